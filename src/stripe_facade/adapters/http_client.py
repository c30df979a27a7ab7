"""httpx wrapper.

- Standardizes timeouts and default headers for every endpoint.
- The transport can be swapped (e.g. `httpx.MockTransport`) for testing.
"""

from __future__ import annotations

import httpx

from stripe_facade.core.config import Config


def build_client(
    config: Config,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the configured defaults.

    Credentials are not baked into the client: endpoints attach them per
    request so that later changes to the config are honored.
    """

    headers: dict[str, str] = {
        "User-Agent": f"stripe-facade/{config.version}",
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(config.timeout_seconds),
        headers=headers,
        transport=transport,
    )
