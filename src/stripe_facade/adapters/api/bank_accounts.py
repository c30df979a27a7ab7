"""Endpoint: bank accounts stored as customer sources."""

from __future__ import annotations

from typing import Sequence

from stripe_facade.adapters.api.base import Api, Parameters


class BankAccounts(Api):
    def create(self, customer_id: str, parameters: Parameters = None):
        """Attach a bank account (token or `bank_account[...]` hash) to a customer."""

        return self._post(self._path("customers", customer_id, "sources"), parameters)

    def find(self, customer_id: str, bank_account_id: str):
        return self._get(self._path("customers", customer_id, "sources", bank_account_id))

    def update(self, customer_id: str, bank_account_id: str, parameters: Parameters = None):
        return self._post(self._path("customers", customer_id, "sources", bank_account_id), parameters)

    def delete(self, customer_id: str, bank_account_id: str):
        return self._delete(self._path("customers", customer_id, "sources", bank_account_id))

    def all(self, customer_id: str, parameters: Parameters = None):
        params = {"object": "bank_account", **dict(parameters or {})}
        return self._list(self._path("customers", customer_id, "sources"), params)

    def verify(
        self,
        customer_id: str,
        bank_account_id: str,
        amounts: Sequence[int],
        verification_method: str | None = None,
    ):
        """Verify a bank account with the two micro-deposit amounts (in cents)."""

        parameters = {
            "amounts": list(amounts),
            "verification_method": verification_method,
        }
        return self._post(
            self._path("customers", customer_id, "sources", bank_account_id, "verify"),
            parameters,
        )
