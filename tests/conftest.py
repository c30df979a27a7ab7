"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Callable
from urllib.parse import parse_qsl

import httpx
import pytest

from stripe_facade.core.config import Config
from stripe_facade.core.domain import amount
from stripe_facade.core.services.facade import Stripe

API_KEY = "sk_test_4eC39HqLyjWDarjtT1zdp7dc"


class StripeStub:
    """In-memory stand-in for api.stripe.com.

    Responses are served in the order they were queued; without a queued
    response, a generic charge object is returned.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queue: list[httpx.Response | Callable[[httpx.Request], httpx.Response]] = []

    def queue(self, payload: Any = None, status_code: int = 200) -> "StripeStub":
        self._queue.append(httpx.Response(status_code, json=payload))
        return self

    def queue_handler(self, handler: Callable[[httpx.Request], httpx.Response]) -> "StripeStub":
        self._queue.append(handler)
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            return httpx.Response(200, json={"id": "ch_default", "object": "charge"})
        response = self._queue.pop(0)
        if callable(response):
            return response(request)
        return response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def form_data(request: httpx.Request) -> dict[str, str]:
    """Decode an urlencoded request body."""

    return dict(parse_qsl(request.content.decode("utf-8")))


@pytest.fixture
def stub() -> StripeStub:
    return StripeStub()


@pytest.fixture
def config() -> Config:
    return Config(api_key=API_KEY, _env_file=None)


@pytest.fixture
def stripe(config: Config, stub: StripeStub):
    with Stripe(config=config, transport=stub.transport) as client:
        yield client


@pytest.fixture
def http_client(stub: StripeStub):
    with httpx.Client(transport=stub.transport) as client:
        yield client


@pytest.fixture(autouse=True)
def _default_amount_converter():
    amount.set_amount_converter(amount.get_default_amount_converter())
    yield
    amount.set_amount_converter(amount.get_default_amount_converter())


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for name in ("STRIPE_API_KEY", "STRIPE_API_VERSION", "STRIPE_IDEMPOTENCY_KEY", "STRIPE_API_BASE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def decode_form() -> Callable[[httpx.Request], dict[str, str]]:
    return form_data
