"""Endpoint: bitcoin receivers."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Bitcoin(Api):
    def create(self, parameters: Parameters = None):
        return self._post("bitcoin/receivers", parameters)

    def find(self, receiver_id: str):
        return self._get(self._path("bitcoin", "receivers", receiver_id))

    def all(self, parameters: Parameters = None):
        return self._list("bitcoin/receivers", parameters)

    def transactions(self, receiver_id: str, parameters: Parameters = None):
        """List the transactions that filled a receiver."""

        return self._list(self._path("bitcoin", "receivers", receiver_id, "transactions"), parameters)
