from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any, Protocol
from uuid import uuid4


class TokenProvider(Protocol):
    """Port for issuing bearer tokens."""

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str: ...


class StubTokenProvider(TokenProvider):
    """Deterministic token provider used in unit tests.

    Issued claims are kept in ``issued`` keyed by token.
    """

    def __init__(self) -> None:
        self._now = datetime.now(tz=UTC)
        self._seq = 0
        self.issued: dict[str, dict[str, Any]] = {}

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        self._seq += 1
        token = f"access.{identity}.{self._seq}"
        payload: dict[str, Any] = {
            "sub": identity,
            "jti": str(uuid4()),
            "iat": int(self._now.timestamp()),
            "exp": int((self._now + (expires_delta or timedelta(minutes=15))).timestamp()),
        }
        if additional_claims:
            payload.update(additional_claims)
        self.issued[token] = payload
        return token
