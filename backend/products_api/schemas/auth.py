"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from .common import NotBlank

USERNAME_REQUIRED = "Username is required"
PASSWORD_REQUIRED = "Password is required"


class LoginSchema(Schema):
    """Input payload for authenticating the configured account.

    Members other than ``userName`` and ``password`` are ignored.
    """

    class Meta:
        unknown = EXCLUDE

    username = fields.String(
        data_key="userName",
        required=True,
        validate=[NotBlank(error=USERNAME_REQUIRED), validate.Length(min=3, max=50)],
        error_messages={"required": USERNAME_REQUIRED, "null": USERNAME_REQUIRED},
    )
    password = fields.String(
        required=True,
        validate=[NotBlank(error=PASSWORD_REQUIRED), validate.Length(min=3, max=100)],
        error_messages={"required": PASSWORD_REQUIRED, "null": PASSWORD_REQUIRED},
    )


class TokenResponseSchema(Schema):
    """Response payload containing an access token."""

    token = fields.String(required=True)
    expires_in = fields.Integer(data_key="expiresIn", required=True)
    token_type = fields.String(data_key="tokenType", dump_default="Bearer")
