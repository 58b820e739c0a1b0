"""Unit tests for mapping domain errors to HTTP responses."""

import pytest
from fastapi import HTTPException

from agora.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from agora.interface.error import translate_errors


@pytest.mark.parametrize(
    "error,status_code",
    [
        (NotFoundError("Policy", "abc"), 404),
        (NotAuthorizedError("delete", "policy", "abc", "user"), 403),
        (ValidationError("Title is required."), 400),
        (BusinessRuleViolationError("Already signed."), 400),
        (ValueError("badly formed hexadecimal UUID string"), 400),
    ],
)
def test_domain_errors_map_to_status(error, status_code):
    with pytest.raises(HTTPException) as exc_info:
        with translate_errors("do something"):
            raise error

    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == str(error)


def test_unexpected_errors_hide_details():
    with pytest.raises(HTTPException) as exc_info:
        with translate_errors("sign petition"):
            raise RuntimeError("connection reset")

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Failed to sign petition"


def test_http_exceptions_pass_through():
    with pytest.raises(HTTPException) as exc_info:
        with translate_errors("load policy"):
            raise HTTPException(status_code=401, detail="Unauthorized.")

    assert exc_info.value.status_code == 401
