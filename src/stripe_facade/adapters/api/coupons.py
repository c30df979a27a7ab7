"""Endpoint: coupons."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Coupons(Api):
    def create(self, parameters: Parameters = None):
        return self._post("coupons", parameters)

    def find(self, coupon_id: str):
        return self._get(self._path("coupons", coupon_id))

    def update(self, coupon_id: str, parameters: Parameters = None):
        return self._post(self._path("coupons", coupon_id), parameters)

    def delete(self, coupon_id: str):
        return self._delete(self._path("coupons", coupon_id))

    def all(self, parameters: Parameters = None):
        return self._list("coupons", parameters)
