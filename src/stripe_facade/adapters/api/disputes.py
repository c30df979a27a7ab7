"""Endpoint: disputes."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Disputes(Api):
    def find(self, dispute_id: str):
        return self._get(self._path("disputes", dispute_id))

    def update(self, dispute_id: str, parameters: Parameters = None):
        """Submit evidence or update metadata."""

        return self._post(self._path("disputes", dispute_id), parameters)

    def close(self, dispute_id: str):
        """Accept the dispute (the charge stays refunded to the customer)."""

        return self._post(self._path("disputes", dispute_id, "close"))

    def all(self, parameters: Parameters = None):
        return self._list("disputes", parameters)
