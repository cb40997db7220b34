# products_api/services/products/dto.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductIn:
    """
    Validated product fields for create and full replace.

    :param name: Product name (3 to 100 characters).
    :type name: str
    :param value: Strictly positive value.
    :type value: Decimal
    """

    name: str
    value: Decimal


@dataclass(frozen=True, slots=True)
class ProductReplaceIn:
    """
    Input DTO for a full-record replace.

    :param id: Primary key of the row to overwrite.
    :type id: int
    :param fields: New field values.
    :type fields: ProductIn
    """

    id: int
    fields: ProductIn


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductOut:
    """Projection of a stored product."""

    id: int
    name: str
    value: Decimal
