"""Stripe facade.

Entry point of the library: resolves accessor names to endpoint classes
and hands out endpoint instances that share one config and one HTTP
client.

    stripe = Stripe("sk_test_...")
    stripe.charges().find("ch_123")
    stripe.cards().all("cus_123")
    for event in stripe.events_iterator({"type": "charge.succeeded"}):
        ...
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterator

import httpx

from stripe_facade.adapters import api as endpoints
from stripe_facade.adapters.api.base import Api
from stripe_facade.adapters.http_client import build_client
from stripe_facade.core.config import Config
from stripe_facade.core.domain import amount
from stripe_facade.core.domain.amount import AmountConverter
from stripe_facade.core.domain.models import StripeObject
from stripe_facade.core.errors import UndefinedMethodError
from stripe_facade.core.logging import configure_logging_once, get_logger
from stripe_facade.core.services.pager import Pager
from stripe_facade.version import VERSION

ITERATOR_SUFFIX = "_iterator"

_ACCESSOR = re.compile(r"[a-z][a-z0-9]*(?:_[a-z0-9]+)*")

_logger = get_logger("facade")


def resolve_api_class(method: str) -> type[Api]:
    """Map a snake_case accessor (`invoice_items`) to its endpoint class."""

    if _ACCESSOR.fullmatch(method):
        class_name = "".join(part.capitalize() for part in method.split("_"))
        candidate = getattr(endpoints, class_name, None)
        if isinstance(candidate, type) and issubclass(candidate, Api) and candidate is not Api:
            return candidate
    raise UndefinedMethodError(method)


def available_accessors() -> list[str]:
    """Snake_case accessor names of every endpoint class."""

    names = []
    for class_name in endpoints.__all__:
        if class_name == "Api":
            continue
        names.append(re.sub(r"(?<!^)(?=[A-Z])", "_", class_name).lower())
    return sorted(names)


class Stripe:
    """Facade over the Stripe REST API."""

    VERSION = VERSION

    def __init__(
        self,
        api_key: str | None = None,
        api_version: str | None = None,
        *,
        config: Config | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if config is None:
            overrides = {"api_key": api_key, "api_version": api_version}
            config = Config(**{k: v for k, v in overrides.items() if v is not None})
        self._config = config
        self._transport = transport
        self._client: httpx.Client | None = None
        configure_logging_once(config.log_level, config.log_json)

    @classmethod
    def make(cls, api_key: str | None = None, api_version: str | None = None, **kwargs: Any) -> "Stripe":
        return cls(api_key, api_version, **kwargs)

    @classmethod
    def get_version(cls) -> str:
        return cls.VERSION

    # Amount converter (process-wide)

    @staticmethod
    def get_amount_converter() -> AmountConverter | None:
        return amount.get_amount_converter()

    @staticmethod
    def set_amount_converter(converter: AmountConverter | None) -> None:
        amount.set_amount_converter(converter)

    @staticmethod
    def disable_amount_converter() -> None:
        amount.set_amount_converter(None)

    @staticmethod
    def set_default_amount_converter() -> None:
        amount.set_amount_converter(amount.get_default_amount_converter())

    @staticmethod
    def get_default_amount_converter() -> AmountConverter:
        return amount.get_default_amount_converter()

    # Configuration

    @property
    def config(self) -> Config:
        return self._config

    @config.setter
    def config(self, config: Config) -> None:
        self.close()
        self._config = config

    @property
    def api_key(self) -> str | None:
        return self._config.api_key

    @api_key.setter
    def api_key(self, api_key: str) -> None:
        self._config.api_key = api_key

    @property
    def api_version(self) -> str:
        return self._config.api_version

    @api_version.setter
    def api_version(self, api_version: str) -> None:
        self._config.api_version = api_version

    def idempotent(self, idempotency_key: str | None) -> "Stripe":
        """Send `Idempotency-Key` on the following requests; chainable."""

        self._config.idempotency_key = idempotency_key
        return self

    # HTTP client

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = build_client(self._config, transport=self._transport)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "Stripe":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Dynamic dispatch

    @staticmethod
    def is_iterator_request(method: str) -> bool:
        return method.endswith(ITERATOR_SUFFIX)

    def get_api_instance(self, method: str) -> Api:
        api_class = resolve_api_class(method)
        return api_class(self._config, client=self.client)

    def __getattr__(self, method: str) -> Callable[..., Any]:
        if method.startswith("_"):
            raise AttributeError(method)

        if self.is_iterator_request(method):
            resource = method[: -len(ITERATOR_SUFFIX)]
            resolve_api_class(resource)

            def iterate(*args: Any) -> Iterator[StripeObject]:
                _logger.debug("stripe.iterator", resource=resource)
                return Pager(self.get_api_instance(resource)).fetch(*args)

            return iterate

        resolve_api_class(method)

        def accessor() -> Api:
            return self.get_api_instance(method)

        return accessor

    def __dir__(self) -> list[str]:
        accessors = available_accessors()
        return sorted(
            set(super().__dir__())
            | set(accessors)
            | {f"{name}{ITERATOR_SUFFIX}" for name in accessors}
        )
