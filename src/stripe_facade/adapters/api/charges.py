"""Endpoint: charges."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Charges(Api):
    def create(self, parameters: Parameters = None):
        """Create a charge. `amount` goes through the amount converter."""

        return self._post("charges", parameters)

    def find(self, charge_id: str):
        return self._get(self._path("charges", charge_id))

    def update(self, charge_id: str, parameters: Parameters = None):
        return self._post(self._path("charges", charge_id), parameters)

    def capture(self, charge_id: str, parameters: Parameters = None):
        """Capture an uncaptured charge (created with `capture=False`)."""

        return self._post(self._path("charges", charge_id, "capture"), parameters)

    def all(self, parameters: Parameters = None):
        return self._list("charges", parameters)
