"""Tests for the error hierarchy and HTTP error mapping."""

import httpx
import pytest

from stripe_facade.core.errors import (
    BadRequestError,
    CardError,
    InvalidRequestError,
    MissingParameterError,
    NotFoundError,
    RateLimitError,
    ServerError,
    StripeError,
    UnauthorizedError,
    UndefinedMethodError,
    error_from_response,
    resolve_error_class,
)


@pytest.mark.parametrize(
    "status_code, expected",
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (402, InvalidRequestError),
        (404, NotFoundError),
        (429, RateLimitError),
        (500, ServerError),
        (503, ServerError),
        (418, StripeError),
    ],
)
def test_resolve_by_status_code(status_code, expected):
    assert resolve_error_class(status_code=status_code) is expected


def test_error_code_takes_precedence_over_type_and_status():
    assert resolve_error_class(status_code=400, error_type="invalid_request_error", error_code="missing") is MissingParameterError
    assert resolve_error_class(status_code=402, error_type="card_error", error_code="card_declined") is CardError


def test_error_type_takes_precedence_over_status():
    assert resolve_error_class(status_code=400, error_type="card_error") is CardError
    assert resolve_error_class(status_code=400, error_type="rate_limit_error") is RateLimitError


def test_error_from_response_card_declined():
    response = httpx.Response(
        402,
        json={
            "error": {
                "type": "card_error",
                "code": "card_declined",
                "message": "Your card was declined.",
                "param": "",
            }
        },
    )
    error = error_from_response(response)

    assert isinstance(error, CardError)
    assert error.message == "Your card was declined."
    assert error.http_status == 402
    assert error.error_type == "card_error"
    assert error.error_code == "card_declined"
    assert error.raw_output["error"]["code"] == "card_declined"


def test_error_from_response_missing_parameter():
    response = httpx.Response(
        400,
        json={
            "error": {
                "type": "invalid_request_error",
                "code": "missing",
                "message": "Missing required param: currency.",
                "param": "currency",
            }
        },
    )
    error = error_from_response(response)

    assert isinstance(error, MissingParameterError)
    assert error.missing_parameter == "currency"
    assert error.to_dict()["param"] == "currency"


def test_error_from_response_without_json_body():
    error = error_from_response(httpx.Response(502, text="Bad Gateway"))

    assert isinstance(error, ServerError)
    assert error.http_status == 502
    assert error.raw_output == "Bad Gateway"
    assert "502" in error.message


def test_undefined_method_error():
    error = UndefinedMethodError("foo")

    assert isinstance(error, StripeError)
    assert isinstance(error, AttributeError)
    assert str(error) == "Undefined method [foo] called."
    assert error.method == "foo"
