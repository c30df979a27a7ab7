"""Endpoint: events."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Events(Api):
    def find(self, event_id: str):
        return self._get(self._path("events", event_id))

    def all(self, parameters: Parameters = None):
        return self._list("events", parameters)
