"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP. They serve as stable contracts between repositories and
application services.

The translation to HTTP responses is handled by
``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories or domain logic.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True, eq=False)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "Product").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} with ID {self.key} not found"


class AuthenticationError(ServiceError):
    """Raised when presented credentials do not match the configured account."""

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(message)


@dataclass(slots=True, eq=False)
class ConcurrencyError(ServiceError):
    """
    Raised when a write matched an unexpected number of rows.

    :param entity: Entity name.
    :param key: Primary key the write targeted.
    :param detail: Short explanation from the persistence layer.
    """

    entity: str
    key: str | int
    detail: str = "concurrent modification"

    def __str__(self) -> str:
        return f"Concurrency conflict on {self.entity} {self.key}: {self.detail}"
