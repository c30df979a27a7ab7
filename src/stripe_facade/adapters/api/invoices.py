"""Endpoint: invoices."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class Invoices(Api):
    def create(self, customer_id: str, parameters: Parameters = None):
        """Draft an invoice from the customer's pending invoice items."""

        params = {**dict(parameters or {}), "customer": customer_id}
        return self._post("invoices", params)

    def find(self, invoice_id: str):
        return self._get(self._path("invoices", invoice_id))

    def update(self, invoice_id: str, parameters: Parameters = None):
        return self._post(self._path("invoices", invoice_id), parameters)

    def pay(self, invoice_id: str):
        """Attempt payment of an open invoice out of the normal schedule."""

        return self._post(self._path("invoices", invoice_id, "pay"))

    def upcoming_invoice(self, customer_id: str, subscription_id: str | None = None):
        """Preview the next invoice of a customer (optionally a single subscription)."""

        params = {"customer": customer_id, "subscription": subscription_id}
        return self._get("invoices/upcoming", params)

    def invoice_line_items(self, invoice_id: str, parameters: Parameters = None):
        return self._list(self._path("invoices", invoice_id, "lines"), parameters)

    def all(self, parameters: Parameters = None):
        return self._list("invoices", parameters)
