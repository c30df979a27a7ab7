"""Endpoint: orders (relay)."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from stripe_facade.adapters.api.base import Api, Parameters


class Orders(Api):
    def create(self, parameters: Parameters = None):
        return self._post("orders", parameters)

    def find(self, order_id: str):
        return self._get(self._path("orders", order_id))

    def update(self, order_id: str, parameters: Parameters = None):
        return self._post(self._path("orders", order_id), parameters)

    def pay(self, order_id: str, parameters: Parameters = None):
        """Pay an order with a source or the customer's default source."""

        return self._post(self._path("orders", order_id, "pay"), parameters)

    def return_items(self, order_id: str, items: Sequence[Mapping[str, Any]] | None = None):
        """Return all (no `items`) or some of the items of a paid order."""

        return self._post(self._path("orders", order_id, "returns"), {"items": items})

    def all(self, parameters: Parameters = None):
        return self._list("orders", parameters)
