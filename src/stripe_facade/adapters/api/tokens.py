"""Endpoint: tokens (card, bank account, PII)."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Tokens(Api):
    def create(self, parameters: Parameters = None):
        return self._post("tokens", parameters)

    def find(self, token_id: str):
        return self._get(self._path("tokens", token_id))
