"""Endpoint: country specs."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class CountrySpecs(Api):
    def find(self, country: str):
        return self._get(self._path("country_specs", country))

    def all(self, parameters: Parameters = None):
        return self._list("country_specs", parameters)
