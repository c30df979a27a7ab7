"""Endpoint: invoice items."""

from __future__ import annotations

from stripe_facade.adapters.api.base import Api, Parameters


class InvoiceItems(Api):
    def create(self, parameters: Parameters = None):
        return self._post("invoiceitems", parameters)

    def find(self, invoice_item_id: str):
        return self._get(self._path("invoiceitems", invoice_item_id))

    def update(self, invoice_item_id: str, parameters: Parameters = None):
        return self._post(self._path("invoiceitems", invoice_item_id), parameters)

    def delete(self, invoice_item_id: str):
        return self._delete(self._path("invoiceitems", invoice_item_id))

    def all(self, parameters: Parameters = None):
        return self._list("invoiceitems", parameters)
