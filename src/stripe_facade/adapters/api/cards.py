"""Endpoint: cards stored as customer sources.

Responses with `"object": "card"` are returned as `Card` models.
"""

from __future__ import annotations

from typing import Any, Mapping

from stripe_facade.adapters.api.base import Api, Parameters


class Cards(Api):
    def create(self, customer_id: str, source: str | Mapping[str, Any]):
        """Attach a card to a customer.

        `source` is either a token id (`tok_...`) or a `card[...]` hash.
        """

        parameters = {"source": source}
        return self._post(self._path("customers", customer_id, "sources"), parameters)

    def find(self, customer_id: str, card_id: str):
        return self._get(self._path("customers", customer_id, "sources", card_id))

    def update(self, customer_id: str, card_id: str, parameters: Parameters = None):
        return self._post(self._path("customers", customer_id, "sources", card_id), parameters)

    def delete(self, customer_id: str, card_id: str):
        return self._delete(self._path("customers", customer_id, "sources", card_id))

    def all(self, customer_id: str, parameters: Parameters = None):
        params = {"object": "card", **dict(parameters or {})}
        return self._list(self._path("customers", customer_id, "sources"), params)
