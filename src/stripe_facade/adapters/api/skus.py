"""Endpoint: SKUs (relay)."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Skus(Api):
    def create(self, parameters: Parameters = None):
        return self._post("skus", parameters)

    def find(self, sku_id: str):
        return self._get(self._path("skus", sku_id))

    def update(self, sku_id: str, parameters: Parameters = None):
        return self._post(self._path("skus", sku_id), parameters)

    def delete(self, sku_id: str):
        return self._delete(self._path("skus", sku_id))

    def all(self, parameters: Parameters = None):
        return self._list("skus", parameters)
