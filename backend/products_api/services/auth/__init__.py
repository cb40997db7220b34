"""Authentication service and DTOs."""

from __future__ import annotations

from .dto import BEARER_TOKEN_TYPE, LoginIn, TokenOut
from .service import AuthService

__all__ = ["AuthService", "BEARER_TOKEN_TYPE", "LoginIn", "TokenOut"]
