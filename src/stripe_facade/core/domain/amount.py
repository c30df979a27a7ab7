"""Amount conversion (major units -> minor units).

Stripe expects amounts as integers in the smallest currency unit. The
default converter lets callers pass `10.50` or `"1,250.00"` and sends
`1050` / `125000`.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable

AmountConverter = Callable[[Any], str]

_SEPARATORS = re.compile(r",")
_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def convert(number: Any) -> str:
    """Convert an amount in major units into minor units.

    Non-numeric input converts to "0".
    """

    text = _NON_NUMERIC.sub("", _SEPARATORS.sub("", str(number)))
    try:
        value = Decimal(text)
    except InvalidOperation:
        return "0"
    if not value.is_finite():
        return "0"

    cents = (value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return str(int(cents))


def get_default_amount_converter() -> AmountConverter:
    return convert


_amount_converter: AmountConverter | None = get_default_amount_converter()


def get_amount_converter() -> AmountConverter | None:
    return _amount_converter


def set_amount_converter(converter: AmountConverter | None) -> None:
    """Install a converter; `None` disables amount conversion."""

    global _amount_converter
    _amount_converter = converter
