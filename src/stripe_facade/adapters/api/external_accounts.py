"""Endpoint: external (bank/card) accounts of a connected account."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class ExternalAccounts(Api):
    def create(self, account_id: str, parameters: Parameters = None):
        return self._post(self._path("accounts", account_id, "external_accounts"), parameters)

    def find(self, account_id: str, external_account_id: str):
        return self._get(self._path("accounts", account_id, "external_accounts", external_account_id))

    def update(self, account_id: str, external_account_id: str, parameters: Parameters = None):
        return self._post(
            self._path("accounts", account_id, "external_accounts", external_account_id),
            parameters,
        )

    def delete(self, account_id: str, external_account_id: str):
        return self._delete(self._path("accounts", account_id, "external_accounts", external_account_id))

    def all(self, account_id: str, parameters: Parameters = None):
        return self._list(self._path("accounts", account_id, "external_accounts"), parameters)
