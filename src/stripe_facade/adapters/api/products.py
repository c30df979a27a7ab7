"""Endpoint: products (relay)."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Products(Api):
    def create(self, parameters: Parameters = None):
        return self._post("products", parameters)

    def find(self, product_id: str):
        return self._get(self._path("products", product_id))

    def update(self, product_id: str, parameters: Parameters = None):
        return self._post(self._path("products", product_id), parameters)

    def delete(self, product_id: str):
        return self._delete(self._path("products", product_id))

    def all(self, parameters: Parameters = None):
        return self._list("products", parameters)
