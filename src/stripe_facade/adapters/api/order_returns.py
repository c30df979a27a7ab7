"""Endpoint: order returns."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class OrderReturns(Api):
    def find(self, order_return_id: str):
        return self._get(self._path("order_returns", order_return_id))

    def all(self, parameters: Parameters = None):
        return self._list("order_returns", parameters)
