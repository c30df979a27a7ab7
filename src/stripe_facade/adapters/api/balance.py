"""Endpoint: account balance and balance history."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Balance(Api):
    def current(self):
        """Current balance of the account."""

        return self._get("balance")

    def find(self, transaction_id: str):
        """Retrieve a single balance transaction."""

        return self._get(self._path("balance", "history", transaction_id))

    def all(self, parameters: Parameters = None):
        """List balance transactions (balance history)."""

        return self._list("balance/history", parameters)
