"""Response wrappers (Pydantic v2).

Stripe objects are dynamically keyed: every key returned by the API is kept
as an extra field, and the instances are frozen so they stay read-only
mirrors of the response.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterator

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class StripeObject(BaseModel):
    """Generic Stripe API object (charge, customer, event, ...)."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str | None = Field(
        default=None,
        description="Object identifier (absent on a few singletons such as balance).",
    )
    object: Any = Field(
        default=None,
        description="Stripe object type, e.g. 'charge' or 'list'. Inside an event's `data` it holds the changed resource itself.",
    )

    def __getitem__(self, key: str) -> Any:
        if key in type(self).model_fields:
            return getattr(self, key)
        extra = self.model_extra or {}
        if key in extra:
            return extra[key]
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        try:
            self[key]  # type: ignore[index]
        except KeyError:
            return False
        return True

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> list[str]:
        return list(type(self).model_fields) + list(self.model_extra or {})

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible representation, nested objects included."""

        return self.model_dump(mode="json", exclude_unset=True, serialize_as_any=True)


class StripeList(StripeObject):
    """A page of a list endpoint (`"object": "list"`)."""

    data: list[StripeObject] = Field(default_factory=list)
    has_more: bool = False
    url: str | None = None

    def __iter__(self) -> Iterator[StripeObject]:  # type: ignore[override]
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)


class Card(StripeObject):
    """Payment card attached to a customer, recipient or account."""

    exp_month: int | None = None
    exp_year: int | None = None
    brand: str | None = None
    last4: str | None = None

    def has_expired(self, now: datetime | None = None) -> bool:
        """True once the expiry month has fully elapsed."""

        if self.exp_month is None or self.exp_year is None:
            return False

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        if self.exp_month == 12:
            first_invalid = datetime(self.exp_year + 1, 1, 1, tzinfo=timezone.utc)
        else:
            first_invalid = datetime(self.exp_year, self.exp_month + 1, 1, tzinfo=timezone.utc)
        return now >= first_invalid


OBJECT_CLASSES: dict[str, type[StripeObject]] = {
    "list": StripeList,
    "card": Card,
}


def convert_to_stripe_object(payload: Any) -> Any:
    """Recursively wrap decoded JSON into `StripeObject` instances."""

    if isinstance(payload, list):
        return [convert_to_stripe_object(item) for item in payload]
    if not isinstance(payload, dict):
        return payload

    values = {key: convert_to_stripe_object(value) for key, value in payload.items()}
    object_type = payload.get("object")
    cls = OBJECT_CLASSES.get(object_type, StripeObject) if isinstance(object_type, str) else StripeObject
    return cls.model_validate(values)
