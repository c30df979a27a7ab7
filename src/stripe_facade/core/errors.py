"""Stripe error hierarchy and HTTP error mapping.

Every error raised by an endpoint carries the HTTP status code returned by
Stripe (`http_status`) together with the decoded error payload, so callers
can branch on the exception class or inspect the raw fields.
"""

from __future__ import annotations

from typing import Any

import httpx


class StripeError(Exception):
    """Base exception for all errors raised by this package."""

    def __init__(
        self,
        message: str | None = None,
        *,
        http_status: int | None = None,
        error_type: str | None = None,
        error_code: str | None = None,
        missing_parameter: str | None = None,
        raw_output: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.error_type = error_type
        self.error_code = error_code
        self.missing_parameter = missing_parameter
        self.raw_output = raw_output

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "http_status": self.http_status,
            "type": self.error_type,
            "code": self.error_code,
            "param": self.missing_parameter,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, http_status={self.http_status})"


class BadRequestError(StripeError):
    """400: the request was unacceptable, often a missing parameter."""


class UnauthorizedError(StripeError):
    """401: no valid API key provided."""


class InvalidRequestError(StripeError):
    """402 or `invalid_request_error`: parameters were valid but the request failed."""


class NotFoundError(StripeError):
    """404: the requested resource doesn't exist."""


class RateLimitError(StripeError):
    """429: too many requests hit the API too quickly."""


class ServerError(StripeError):
    """5xx or `api_error`: something went wrong on Stripe's end."""


class CardError(StripeError):
    """The card could not be charged."""


class MissingParameterError(StripeError):
    """A required parameter was not sent."""


class ApiConnectionError(StripeError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""


class ConfigError(StripeError):
    """Invalid or incomplete client configuration."""


class UndefinedMethodError(StripeError, AttributeError):
    """An unknown resource accessor was requested from the facade."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Undefined method [{method}] called.")
        self.method = method


ERRORS_BY_CODE: dict[str, type[StripeError]] = {
    "invalid_number": CardError,
    "incorrect_number": CardError,
    "invalid_expiry_month": CardError,
    "invalid_expiry_year": CardError,
    "invalid_cvc": CardError,
    "incorrect_cvc": CardError,
    "incorrect_zip": CardError,
    "expired_card": CardError,
    "card_declined": CardError,
    "processing_error": CardError,
    "missing": MissingParameterError,
}

ERRORS_BY_TYPE: dict[str, type[StripeError]] = {
    "api_error": ServerError,
    "card_error": CardError,
    "invalid_request_error": InvalidRequestError,
    "authentication_error": UnauthorizedError,
    "rate_limit_error": RateLimitError,
}

ERRORS_BY_STATUS: dict[int, type[StripeError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    402: InvalidRequestError,
    404: NotFoundError,
    429: RateLimitError,
}


def resolve_error_class(
    *,
    status_code: int,
    error_type: str | None = None,
    error_code: str | None = None,
) -> type[StripeError]:
    """Pick the exception class for an error response.

    Order: error code, error type, status code. Unmapped 5xx responses are
    `ServerError`, anything else falls back to `StripeError`.
    """

    if error_code and error_code in ERRORS_BY_CODE:
        return ERRORS_BY_CODE[error_code]
    if error_type and error_type in ERRORS_BY_TYPE:
        return ERRORS_BY_TYPE[error_type]
    if status_code in ERRORS_BY_STATUS:
        return ERRORS_BY_STATUS[status_code]
    if status_code >= 500:
        return ServerError
    return StripeError


def error_from_response(response: httpx.Response) -> StripeError:
    """Build (without raising) the exception matching an error response."""

    try:
        payload: Any = response.json()
    except ValueError:
        payload = response.text

    error: dict[str, Any] = {}
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        error = payload["error"]

    error_type = error.get("type")
    error_code = error.get("code")
    message = error.get("message") or f"HTTP {response.status_code} returned by the Stripe API."

    exc_class = resolve_error_class(
        status_code=response.status_code,
        error_type=error_type,
        error_code=error_code,
    )
    return exc_class(
        message,
        http_status=response.status_code,
        error_type=error_type,
        error_code=error_code,
        missing_parameter=error.get("param"),
        raw_output=payload,
    )
