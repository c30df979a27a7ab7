"""Endpoint: refunds of a charge."""

from __future__ import annotations

from typing import Any

from stripe_facade.adapters.api.base import Api, Parameters


class Refunds(Api):
    def create(self, charge_id: str, amount: Any = None, parameters: Parameters = None):
        """Refund a charge, fully (no `amount`) or partially."""

        params = {**dict(parameters or {}), "amount": amount}
        return self._post(self._path("charges", charge_id, "refunds"), params)

    def find(self, charge_id: str, refund_id: str):
        return self._get(self._path("charges", charge_id, "refunds", refund_id))

    def update(self, charge_id: str, refund_id: str, parameters: Parameters = None):
        return self._post(self._path("charges", charge_id, "refunds", refund_id), parameters)

    def all(self, charge_id: str, parameters: Parameters = None):
        return self._list(self._path("charges", charge_id, "refunds"), parameters)
