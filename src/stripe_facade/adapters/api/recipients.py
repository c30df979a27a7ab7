"""Endpoint: transfer recipients."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Recipients(Api):
    def create(self, parameters: Parameters = None):
        return self._post("recipients", parameters)

    def find(self, recipient_id: str):
        return self._get(self._path("recipients", recipient_id))

    def update(self, recipient_id: str, parameters: Parameters = None):
        return self._post(self._path("recipients", recipient_id), parameters)

    def delete(self, recipient_id: str):
        return self._delete(self._path("recipients", recipient_id))

    def all(self, parameters: Parameters = None):
        return self._list("recipients", parameters)
