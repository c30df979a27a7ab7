"""Contract of a list-capable Stripe endpoint.

The pager only depends on this structural contract, so any endpoint
exposing a page size and `all(...)` can be paginated.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from stripe_facade.core.domain.models import StripeList


@runtime_checkable
class ListableApi(Protocol):
    """Minimal contract for paginated endpoints.

    - `per_page` is sent as `limit` on list requests.
    - `all` returns one page (`StripeList`).
    """

    per_page: int | None

    def all(self, *args: Any, **kwargs: Any) -> StripeList:
        """Fetch one page of the collection."""

        ...
