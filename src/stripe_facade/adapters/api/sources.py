"""Endpoint: payment sources of a customer (cards, bank accounts, bitcoin receivers)."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Sources(Api):
    def create(self, customer_id: str, parameters: Parameters = None):
        return self._post(self._path("customers", customer_id, "sources"), parameters)

    def find(self, customer_id: str, source_id: str):
        return self._get(self._path("customers", customer_id, "sources", source_id))

    def update(self, customer_id: str, source_id: str, parameters: Parameters = None):
        return self._post(self._path("customers", customer_id, "sources", source_id), parameters)

    def delete(self, customer_id: str, source_id: str):
        return self._delete(self._path("customers", customer_id, "sources", source_id))

    def all(self, customer_id: str, parameters: Parameters = None):
        return self._list(self._path("customers", customer_id, "sources"), parameters)
