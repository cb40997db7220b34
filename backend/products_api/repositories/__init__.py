"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from products_api.repositories.base import BaseRepository
from products_api.repositories.product import ProductRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
]
