"""Endpoint: refunds of an application fee."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class ApplicationFeeRefunds(Api):
    def create(self, fee_id: str, parameters: Parameters = None):
        return self._post(self._path("application_fees", fee_id, "refunds"), parameters)

    def find(self, fee_id: str, refund_id: str):
        return self._get(self._path("application_fees", fee_id, "refunds", refund_id))

    def update(self, fee_id: str, refund_id: str, parameters: Parameters = None):
        return self._post(self._path("application_fees", fee_id, "refunds", refund_id), parameters)

    def all(self, fee_id: str, parameters: Parameters = None):
        return self._list(self._path("application_fees", fee_id, "refunds"), parameters)
