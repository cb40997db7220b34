"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, TokenResponseSchema
from .product import ProductCreateSchema, ProductSchema, ProductUpdateSchema

__all__ = [
    "LoginSchema",
    "TokenResponseSchema",
    "ProductSchema",
    "ProductCreateSchema",
    "ProductUpdateSchema",
]
