"""Endpoint: subscription plans."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Plans(Api):
    def create(self, parameters: Parameters = None):
        return self._post("plans", parameters)

    def find(self, plan_id: str):
        return self._get(self._path("plans", plan_id))

    def update(self, plan_id: str, parameters: Parameters = None):
        return self._post(self._path("plans", plan_id), parameters)

    def delete(self, plan_id: str):
        return self._delete(self._path("plans", plan_id))

    def all(self, parameters: Parameters = None):
        return self._list("plans", parameters)
