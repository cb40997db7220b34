# products_api/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param username: Presented user name (already length-validated).
    :type username: str
    :param password: Presented raw password.
    :type password: str
    """

    username: str
    password: str

    def __repr__(self) -> str:
        return f"LoginIn(username={self.username!r}, password='***')"


# --------------------------- Output DTOs ---------------------------------- #

BEARER_TOKEN_TYPE = "Bearer"


@dataclass(frozen=True, slots=True)
class TokenOut:
    """
    Output DTO with the issued access token.

    :param token: Encoded JWT.
    :type token: str
    :param expires_in: Lifetime in seconds.
    :type expires_in: int
    :param token_type: Authorization scheme, always ``"Bearer"``.
    :type token_type: str
    """

    token: str
    expires_in: int
    token_type: str = BEARER_TOKEN_TYPE
