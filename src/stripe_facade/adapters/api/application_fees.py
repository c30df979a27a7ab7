"""Endpoint: application fees collected on connected accounts."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class ApplicationFees(Api):
    def find(self, fee_id: str):
        return self._get(self._path("application_fees", fee_id))

    def all(self, parameters: Parameters = None):
        return self._list("application_fees", parameters)
