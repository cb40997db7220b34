"""Authentication endpoint issuing bearer tokens."""

from __future__ import annotations

from flask import Blueprint, current_app
from marshmallow import ValidationError

from products_api.api.deps import json_body, json_response, timing
from products_api.api.errors import register_service_error_handlers
from products_api.core.errors import BadRequest
from products_api.core.extensions import get_auth_user, get_jwt_settings
from products_api.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from products_api.schemas import LoginSchema, TokenResponseSchema
from products_api.services.auth.dto import LoginIn
from products_api.services.auth.service import AuthService

bp = Blueprint("auth", __name__)
register_service_error_handlers(bp)

login_schema = LoginSchema()
token_schema = TokenResponseSchema()


def _auth_service() -> AuthService:
    return AuthService(
        token_provider=JWTTokenProvider(),
        auth_user=get_auth_user(current_app),
        settings=get_jwt_settings(current_app),
    )


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue an access token."""

    try:
        data = login_schema.load(json_body())
    except ValidationError as err:
        raise BadRequest("Invalid request", errors=err.normalized_messages()) from err
    result = _auth_service().login(LoginIn(username=data["username"], password=data["password"]))
    return json_response(token_schema.dump(result))
