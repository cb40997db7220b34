"""Bearer token verification callbacks for ``flask-jwt-extended``.

Signature, issuer, audience, ``exp`` and ``nbf`` checks are performed by the
library using the keys derived from :class:`~products_api.core.config.JwtSettings`.
The callbacks here add the claim policy (role and subject) and render every
rejection as a 401 problem body.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Response, current_app
from flask_jwt_extended import JWTManager

from products_api.core.errors import as_problem, problem_response

log = logging.getLogger(__name__)

USER_ROLE = "User"
ROLE_CLAIM = "role"
NAME_CLAIM = "name"


def _unauthorized(message: str) -> Response:
    problem = as_problem(status=HTTPStatus.UNAUTHORIZED, code="unauthorized", message=message)
    log.warning("Bearer token rejected: %s request_id=%s", message, problem.get("request_id"))
    response = problem_response(problem)
    response.headers["WWW-Authenticate"] = "Bearer"
    return response


def claims_are_acceptable(claims: dict[str, Any]) -> bool:
    """
    Return whether verified claims belong to the configured account.

    :param claims: Decoded token payload.
    :returns: ``True`` when the role is ``"User"`` and ``sub`` matches the
        configured username.
    """
    from products_api.core.extensions import get_auth_user

    auth_user = get_auth_user(current_app)
    return claims.get(ROLE_CLAIM) == USER_ROLE and claims.get("sub") == auth_user.username


def register_callbacks(manager: JWTManager) -> None:
    """Install the gate callbacks on ``manager``."""

    @manager.unauthorized_loader
    def _missing_token(reason: str) -> Response:
        return _unauthorized(reason or "Missing Authorization header")

    @manager.invalid_token_loader
    def _invalid_token(reason: str) -> Response:
        return _unauthorized(reason or "Invalid token")

    @manager.expired_token_loader
    def _expired_token(jwt_header: dict[str, Any], jwt_payload: dict[str, Any]) -> Response:
        return _unauthorized("Token has expired")

    @manager.token_verification_loader
    def _verify_claims(jwt_header: dict[str, Any], jwt_payload: dict[str, Any]) -> bool:
        return claims_are_acceptable(jwt_payload)

    @manager.token_verification_failed_loader
    def _claims_rejected(jwt_header: dict[str, Any], jwt_payload: dict[str, Any]) -> Response:
        return _unauthorized("Token claims are not accepted")
