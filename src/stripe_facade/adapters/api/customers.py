"""Endpoint: customers."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Customers(Api):
    def create(self, parameters: Parameters = None):
        return self._post("customers", parameters)

    def find(self, customer_id: str):
        return self._get(self._path("customers", customer_id))

    def update(self, customer_id: str, parameters: Parameters = None):
        return self._post(self._path("customers", customer_id), parameters)

    def delete(self, customer_id: str):
        return self._delete(self._path("customers", customer_id))

    def delete_discount(self, customer_id: str):
        """Remove the coupon currently applied to a customer."""

        return self._delete(self._path("customers", customer_id, "discount"))

    def all(self, parameters: Parameters = None):
        return self._list("customers", parameters)
