"""Product resource schemas."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_dump, validate

from products_api.models.product import (
    MAX_VALUE,
    MIN_VALUE,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    VALUE_SCALE,
)

from .common import MaxDecimalPlaces, NotBlank

NAME_REQUIRED = "Name is required"
NAME_LENGTH = f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
VALUE_REQUIRED = "Value is required"
VALUE_POSITIVE = "Value must be greater than 0"
VALUE_TOO_LARGE = f"Value must not exceed {MAX_VALUE}"
VALUE_PLACES = f"Value must have at most {VALUE_SCALE} decimal places"


class ProductSchema(Schema):
    """Representation of a stored product.

    ``value`` is emitted as a JSON number rather than a string. Inputs are
    limited to what the ``Numeric(18, 2)`` column stores exactly, so a created
    record reads back unchanged.
    """

    id = fields.Integer(dump_only=True)
    name = fields.String(
        required=True,
        validate=[
            NotBlank(error=NAME_REQUIRED),
            validate.Length(min=NAME_MIN_LENGTH, max=NAME_MAX_LENGTH, error=NAME_LENGTH),
        ],
        error_messages={"required": NAME_REQUIRED, "null": NAME_REQUIRED},
    )
    value = fields.Decimal(
        required=True,
        validate=[
            validate.Range(min=MIN_VALUE, error=VALUE_POSITIVE),
            validate.Range(max=MAX_VALUE, error=VALUE_TOO_LARGE),
            MaxDecimalPlaces(VALUE_SCALE, error=VALUE_PLACES),
        ],
        error_messages={"required": VALUE_REQUIRED, "null": VALUE_REQUIRED},
    )

    @post_dump
    def value_as_number(self, data: dict[str, Any], **_: Any) -> dict[str, Any]:
        value = data.get("value")
        if isinstance(value, Decimal):
            data["value"] = float(value)
        return data


class ProductCreateSchema(ProductSchema):
    """Payload for creating a product; a client-supplied ``id`` is ignored."""

    class Meta:
        unknown = EXCLUDE


class ProductUpdateSchema(ProductSchema):
    """Payload for a full replace; ``id`` must match the path parameter."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(load_default=0)
