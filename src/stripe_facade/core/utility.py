"""Request parameter preparation and form encoding."""

from __future__ import annotations

import calendar
from datetime import datetime
from typing import Any, Iterator, Mapping

from stripe_facade.core.domain.amount import get_amount_converter


def prepare_parameters(parameters: Mapping[str, Any] | None) -> dict[str, Any]:
    """Apply the amount converter and normalize booleans.

    Only the top-level `amount` key is converted.
    """

    prepared = dict(parameters or {})

    converter = get_amount_converter()
    if converter is not None and prepared.get("amount") is not None:
        prepared["amount"] = converter(prepared["amount"])

    return {key: _normalize_bool(value) for key, value in prepared.items()}


def _normalize_bool(value: Any) -> Any:
    if value is True:
        return "true"
    if value is False:
        return "false"
    return value


def _encode_datetime(value: datetime) -> int:
    if value.tzinfo is not None and value.utcoffset() is not None:
        return calendar.timegm(value.utctimetuple())
    return int(value.timestamp())


def _flatten(key: str, value: Any) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            yield from _flatten(f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if isinstance(item, Mapping):
                yield from _flatten(f"{key}[{index}]", item)
            else:
                yield from _flatten(f"{key}[]", item)
    elif isinstance(value, datetime):
        yield key, str(_encode_datetime(value))
    else:
        yield key, str(_normalize_bool(value))


def encode_parameters(parameters: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten nested parameters into Stripe's bracket notation.

    `{"metadata": {"order": 1}, "expand": ["customer"]}` becomes
    `[("metadata[order]", "1"), ("expand[]", "customer")]`.
    """

    pairs: list[tuple[str, str]] = []
    for key, value in (parameters or {}).items():
        pairs.extend(_flatten(str(key), value))
    return pairs
