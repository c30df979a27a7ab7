"""Endpoint: subscriptions of a customer."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Subscriptions(Api):
    def create(self, customer_id: str, parameters: Parameters = None):
        return self._post(self._path("customers", customer_id, "subscriptions"), parameters)

    def find(self, customer_id: str, subscription_id: str):
        return self._get(self._path("customers", customer_id, "subscriptions", subscription_id))

    def update(self, customer_id: str, subscription_id: str, parameters: Parameters = None):
        return self._post(
            self._path("customers", customer_id, "subscriptions", subscription_id),
            parameters,
        )

    def cancel(self, customer_id: str, subscription_id: str, at_period_end: bool = False):
        """Cancel now, or at the end of the current period when `at_period_end`."""

        return self._delete(
            self._path("customers", customer_id, "subscriptions", subscription_id),
            {"at_period_end": at_period_end},
        )

    def reactivate(self, customer_id: str, subscription_id: str):
        """Undo a pending `at_period_end` cancellation by re-applying the same plan."""

        subscription = self.find(customer_id, subscription_id)
        return self.update(customer_id, subscription_id, {"plan": subscription["plan"]["id"]})

    def delete_discount(self, customer_id: str, subscription_id: str):
        return self._delete(
            self._path("customers", customer_id, "subscriptions", subscription_id, "discount")
        )

    def all(self, customer_id: str, parameters: Parameters = None):
        return self._list(self._path("customers", customer_id, "subscriptions"), parameters)
