"""Product catalog model."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from products_api.core.extensions import db

from .base import PKMixin, ReprMixin

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
VALUE_PRECISION = 18
VALUE_SCALE = 2
MIN_VALUE = Decimal("0.01")
# Largest amount a Numeric(18, 2) column holds
MAX_VALUE = Decimal("9" * (VALUE_PRECISION - VALUE_SCALE) + "." + "9" * VALUE_SCALE)


class Product(PKMixin, ReprMixin, db.Model):
    """A named product with a positive monetary value."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    value: Mapped[Decimal] = mapped_column(
        Numeric(VALUE_PRECISION, VALUE_SCALE, asdecimal=True), nullable=False
    )

    __table_args__ = (CheckConstraint("value > 0", name="value_positive"),)
