"""Endpoint: Connect accounts (`/v1/account`, `/v1/accounts`)."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Account(Api):
    def create(self, parameters: Parameters = None):
        """Create a managed or standalone account."""

        return self._post("accounts", parameters)

    def find(self, account_id: str | None = None):
        """Retrieve an account; without an id, the account owning the API key."""

        if account_id is None:
            return self._get("account")
        return self._get(self._path("accounts", account_id))

    def update(self, account_id: str, parameters: Parameters = None):
        return self._post(self._path("accounts", account_id), parameters)

    def delete(self, account_id: str):
        return self._delete(self._path("accounts", account_id))

    def reject(self, account_id: str, reason: str):
        """Reject an account (`fraud`, `terms_of_service` or `other`)."""

        return self._post(self._path("accounts", account_id, "reject"), {"reason": reason})

    def all(self, parameters: Parameters = None):
        return self._list("accounts", parameters)
