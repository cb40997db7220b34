"""Unit tests for login input and token output schemas."""

from __future__ import annotations

import pytest
from marshmallow import ValidationError

from products_api.schemas import LoginSchema, TokenResponseSchema
from products_api.services.auth.dto import TokenOut


def test_login_reads_camel_case_username():
    data = LoginSchema().load({"userName": "admin", "password": "admin123"})
    assert data == {"username": "admin", "password": "admin123"}


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({"password": "admin123"}, "userName"),
        ({"userName": "ab", "password": "admin123"}, "userName"),
        ({"userName": "u" * 51, "password": "admin123"}, "userName"),
        ({"userName": "admin", "password": "ab"}, "password"),
        ({"userName": "admin"}, "password"),
    ],
)
def test_login_rejects_invalid_fields(payload, field):
    with pytest.raises(ValidationError) as exc_info:
        LoginSchema().load(payload)
    assert field in exc_info.value.messages


def test_login_ignores_unknown_members():
    data = LoginSchema().load({"userName": "admin", "password": "admin123", "rememberMe": True})
    assert data == {"username": "admin", "password": "admin123"}


def test_login_missing_fields_use_readable_messages():
    with pytest.raises(ValidationError) as exc_info:
        LoginSchema().load({})
    assert exc_info.value.messages == {
        "userName": ["Username is required"],
        "password": ["Password is required"],
    }


@pytest.mark.parametrize(
    ("payload", "field", "message"),
    [
        ({"userName": "   ", "password": "admin123"}, "userName", "Username is required"),
        ({"userName": "admin", "password": "\t\t\t"}, "password", "Password is required"),
    ],
)
def test_login_rejects_blank_fields(payload, field, message):
    with pytest.raises(ValidationError) as exc_info:
        LoginSchema().load(payload)
    assert exc_info.value.messages == {field: [message]}


def test_token_response_uses_camel_case_keys():
    body = TokenResponseSchema().dump(TokenOut(token="t", expires_in=3600))
    assert body == {"token": "t", "expiresIn": 3600, "tokenType": "Bearer"}
