"""Lazy pagination over Stripe list endpoints.

The pager walks a collection page by page with Stripe's cursor convention
(`starting_after=<id of the last item>`) and yields the items one at a
time. A page is only requested once the consumer has exhausted the
previous one.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from stripe_facade.core.domain.models import StripeObject
from stripe_facade.core.interfaces.api import ListableApi
from stripe_facade.core.logging import get_logger

DEFAULT_PER_PAGE = 100

_logger = get_logger("pager")


class Pager:
    """Iterate every item of a list endpoint.

    Stops when a page holds fewer items than the page size, when Stripe
    reports `has_more: false`, or on an empty page.
    """

    def __init__(self, api: ListableApi, per_page: int = DEFAULT_PER_PAGE) -> None:
        if per_page < 1:
            raise ValueError("per_page must be a positive integer")
        self._api = api
        self._per_page = per_page
        self.next_token: str | None = None
        self.pages_fetched = 0

    @property
    def api(self) -> ListableApi:
        return self._api

    def fetch(self, *args: Any) -> Iterator[StripeObject]:
        """Lazily yield the items of every page.

        Leading positional args are forwarded to `api.all()` (e.g. the
        customer id of a card listing); a trailing mapping holds the list
        parameters (`created`, `customer`, `limit`, ...).
        """

        positional: tuple[Any, ...] = args
        parameters: dict[str, Any] = {}
        if args and isinstance(args[-1], Mapping):
            positional = args[:-1]
            parameters = dict(args[-1])
        return self._iterate(positional, parameters)

    def _iterate(self, positional: tuple[Any, ...], parameters: dict[str, Any]) -> Iterator[StripeObject]:
        page_size = int(parameters.get("limit") or self._per_page)
        self._api.per_page = page_size
        self.next_token = parameters.get("starting_after")

        while True:
            params = dict(parameters)
            if self.next_token:
                params["starting_after"] = self.next_token

            page = self._api.all(*positional, params)
            self.pages_fetched += 1
            items = list(page.data)
            _logger.debug(
                "stripe.page",
                api=type(self._api).__name__,
                page=self.pages_fetched,
                count=len(items),
                starting_after=self.next_token,
            )

            yield from items

            if not items or len(items) < page_size or not page.has_more:
                self.next_token = None
                return
            self.next_token = items[-1]["id"]
