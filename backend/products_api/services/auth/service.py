# products_api/services/auth/service.py
from __future__ import annotations

import hmac
import logging
from typing import Any

from products_api.core.config import AuthUser, JwtSettings
from products_api.core.security import NAME_CLAIM, ROLE_CLAIM, USER_ROLE
from products_api.services._shared.base import BaseService
from products_api.services._shared.errors import AuthenticationError
from products_api.services._shared.ports.token_provider import TokenProvider
from products_api.services.auth.dto import LoginIn, TokenOut

log = logging.getLogger(__name__)


def _same(presented: str, expected: str) -> bool:
    """Constant-time string equality."""
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


class AuthService(BaseService):
    """
    Credential check and token issuance for the single configured account.

    The service is stateless: it compares the presented credentials with the
    configured :class:`AuthUser` and issues a signed token through the
    :class:`TokenProvider` port. There is no session store and no revocation.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        auth_user: AuthUser,
        settings: JwtSettings,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param token_provider: Adapter for issuing JWTs.
        :param auth_user: The configured credential record.
        :param settings: Token lifetime and signing parameters.
        """
        super().__init__()
        self.tokens = token_provider
        self.auth_user = auth_user
        self.settings = settings

    def login(self, dto: LoginIn) -> TokenOut:
        """
        Authenticate credentials and issue an access token.

        Both fields are always compared so the outcome does not reveal which
        one was wrong.

        :param dto: Login input.
        :returns: Token, lifetime in seconds and token type.
        :raises AuthenticationError: If either field differs from the
            configured pair.
        """
        log.info("Login attempt", extra={"username": dto.username})

        username_ok = _same(dto.username, self.auth_user.username)
        password_ok = _same(dto.password, self.auth_user.password)
        if not (username_ok and password_ok):
            log.warning("Authentication failed", extra={"username": dto.username})
            raise AuthenticationError()

        token = self.issue_token(dto.username)
        log.info("User authenticated", extra={"username": dto.username})
        return TokenOut(token=token, expires_in=self.settings.expires_in_seconds)

    def issue_token(self, username: str) -> str:
        """
        Sign a token for an already authenticated ``username``.

        :param username: Subject of the token.
        :returns: Compact JWT valid for ``settings.expiration_minutes``.
        """
        claims: dict[str, Any] = {
            NAME_CLAIM: username,
            ROLE_CLAIM: USER_ROLE,
        }
        return self.tokens.create_access_token(
            identity=username,
            additional_claims=claims,
            expires_delta=self.settings.expires_delta,
        )
