"""Endpoint: transfers."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Transfers(Api):
    def create(self, parameters: Parameters = None):
        return self._post("transfers", parameters)

    def find(self, transfer_id: str):
        return self._get(self._path("transfers", transfer_id))

    def update(self, transfer_id: str, parameters: Parameters = None):
        return self._post(self._path("transfers", transfer_id), parameters)

    def cancel(self, transfer_id: str):
        """Cancel a pending transfer."""

        return self._post(self._path("transfers", transfer_id, "cancel"))

    def all(self, parameters: Parameters = None):
        return self._list("transfers", parameters)
