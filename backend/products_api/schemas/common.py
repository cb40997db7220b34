"""Validators shared across resource schemas."""

from __future__ import annotations

from decimal import Decimal

from marshmallow import ValidationError, validate


class NotBlank(validate.Validator):
    """Reject strings that are empty or contain only whitespace."""

    def __init__(self, *, error: str) -> None:
        self.error = error

    def __call__(self, value: str) -> str:
        if not value.strip():
            raise ValidationError(self.error)
        return value


class MaxDecimalPlaces(validate.Validator):
    """Reject decimals with significant digits past ``places`` fractional digits.

    Trailing zeros do not count, so ``Decimal("1.500")`` passes with two places.
    """

    def __init__(self, places: int, *, error: str) -> None:
        self.places = places
        self.error = error

    def _repr_args(self) -> str:
        return f"places={self.places!r}"

    def __call__(self, value: Decimal) -> Decimal:
        _, digits, exponent = value.as_tuple()
        extra = -int(exponent) - self.places
        if extra > 0 and any(digits[-extra:]):
            raise ValidationError(self.error)
        return value
