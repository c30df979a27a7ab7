"""Endpoint: reversals of a transfer."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class TransferReversals(Api):
    def create(self, transfer_id: str, parameters: Parameters = None):
        return self._post(self._path("transfers", transfer_id, "reversals"), parameters)

    def find(self, transfer_id: str, reversal_id: str):
        return self._get(self._path("transfers", transfer_id, "reversals", reversal_id))

    def update(self, transfer_id: str, reversal_id: str, parameters: Parameters = None):
        return self._post(self._path("transfers", transfer_id, "reversals", reversal_id), parameters)

    def all(self, transfer_id: str, parameters: Parameters = None):
        return self._list(self._path("transfers", transfer_id, "reversals"), parameters)
