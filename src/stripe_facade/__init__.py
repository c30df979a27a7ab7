"""stripe-facade: Stripe REST API bindings.

Usage:

    from stripe_facade import Stripe

    stripe = Stripe("sk_test_...")
    charge = stripe.charges().create({"amount": 10.50, "currency": "usd", "source": "tok_visa"})
    for customer in stripe.customers_iterator():
        ...
"""

from __future__ import annotations

from stripe_facade.version import VERSION
from stripe_facade.core.config import Config
from stripe_facade.core.errors import StripeError, UndefinedMethodError
from stripe_facade.core.services.facade import Stripe
from stripe_facade.core.services.pager import Pager

__version__ = VERSION

__all__ = [
    "Config",
    "Pager",
    "Stripe",
    "StripeError",
    "UndefinedMethodError",
    "VERSION",
]
