"""Base class shared by every Stripe endpoint."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote, urlencode

import httpx

from stripe_facade.adapters.http_client import build_client
from stripe_facade.core.config import Config
from stripe_facade.core.domain.models import convert_to_stripe_object
from stripe_facade.core.errors import ApiConnectionError, StripeError, error_from_response
from stripe_facade.core.logging import get_logger
from stripe_facade.core.utility import encode_parameters, prepare_parameters

Parameters = Mapping[str, Any] | None


class Api:
    """Issues authenticated requests against `{base_url}/v1/`.

    When no client is given, a short-lived client is created per request.
    """

    def __init__(self, config: Config, *, client: httpx.Client | None = None) -> None:
        self._config = config
        self._client = client
        self.per_page: int | None = None
        self._logger = get_logger(f"api.{type(self).__name__.lower()}")

    @property
    def config(self) -> Config:
        return self._config

    def base_url(self) -> str:
        return self._config.api_base

    def get_per_page(self) -> int | None:
        return self.per_page

    def set_per_page(self, per_page: int | None) -> "Api":
        self.per_page = per_page
        return self

    @staticmethod
    def _path(*segments: Any) -> str:
        return "/".join(quote(str(segment), safe="") for segment in segments)

    def _get(self, path: str, parameters: Parameters = None) -> Any:
        return self.execute("GET", path, parameters)

    def _list(self, path: str, parameters: Parameters = None) -> Any:
        params = dict(parameters or {})
        if self.per_page and "limit" not in params:
            params["limit"] = self.per_page
        return self.execute("GET", path, params)

    def _post(self, path: str, parameters: Parameters = None, *, files: Any = None) -> Any:
        return self.execute("POST", path, parameters, files=files)

    def _delete(self, path: str, parameters: Parameters = None) -> Any:
        return self.execute("DELETE", path, parameters)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Stripe-Version": self._config.api_version,
            "User-Agent": f"stripe-facade/{self._config.version}",
        }
        if self._config.idempotency_key:
            headers["Idempotency-Key"] = self._config.idempotency_key
        return headers

    def execute(
        self,
        method: str,
        path: str,
        parameters: Parameters = None,
        *,
        files: Any = None,
    ) -> Any:
        """Send one request and return the wrapped JSON response.

        Raises:
            StripeError: the mapped subclass for any non-2xx response.
            ApiConnectionError: when no response was received.
        """

        method = method.upper()
        url = f"{self.base_url().rstrip('/')}/v1/{path.lstrip('/')}"
        encoded = encode_parameters(prepare_parameters(parameters))
        headers = self._headers()

        kwargs: dict[str, Any] = {"headers": headers}
        if method in ("GET", "DELETE"):
            if encoded:
                kwargs["params"] = encoded
        elif files is not None:
            fields: dict[str, list[str]] = {}
            for key, value in encoded:
                fields.setdefault(key, []).append(value)
            kwargs["data"] = fields
            kwargs["files"] = files
        else:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            kwargs["content"] = urlencode(encoded)

        self._logger.debug("stripe.request", method=method, path=path)
        try:
            response = self._send(method, url, **kwargs)
        except httpx.TransportError as exc:
            self._logger.warning("stripe.connection_error", method=method, path=path, error=str(exc))
            raise ApiConnectionError(f"Could not connect to Stripe ({url}): {exc}") from exc

        if not response.is_success:
            error = error_from_response(response)
            self._logger.warning(
                "stripe.error",
                method=method,
                path=path,
                status_code=response.status_code,
                error=error.__class__.__name__,
                error_type=error.error_type,
                error_code=error.error_code,
            )
            raise error

        self._logger.debug("stripe.response", method=method, path=path, status_code=response.status_code)
        try:
            payload = response.json()
        except ValueError as exc:
            raise StripeError(
                f"Invalid response body from API: {response.text[:200]!r}",
                http_status=response.status_code,
                raw_output=response.text,
            ) from exc
        return convert_to_stripe_object(payload)

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if self._client is not None:
            return self._client.request(method, url, **kwargs)
        with build_client(self._config) as client:
            return client.request(method, url, **kwargs)
