"""Product lifecycle service and DTOs."""

from __future__ import annotations

from .dto import ProductIn, ProductOut, ProductReplaceIn
from .service import ProductService

__all__ = ["ProductIn", "ProductOut", "ProductReplaceIn", "ProductService"]
