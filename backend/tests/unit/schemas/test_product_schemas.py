"""Unit tests for product payload validation and serialization."""

from __future__ import annotations

from decimal import Decimal

import pytest
from marshmallow import ValidationError

from products_api.schemas import ProductCreateSchema, ProductSchema, ProductUpdateSchema
from products_api.services.products.dto import ProductOut


class TestProductCreateSchema:
    @pytest.fixture()
    def schema(self) -> ProductCreateSchema:
        return ProductCreateSchema()

    def test_loads_valid_payload_and_drops_client_id(self, schema):
        data = schema.load({"id": 99, "name": "Widget", "value": 9.99})
        assert data == {"name": "Widget", "value": Decimal("9.99")}

    def test_reports_every_missing_field(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({})
        assert exc_info.value.messages == {
            "name": ["Name is required"],
            "value": ["Value is required"],
        }

    @pytest.mark.parametrize("name", ["ab", "x" * 101])
    def test_rejects_name_length(self, schema, name):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({"name": name, "value": 1})
        assert exc_info.value.messages == {
            "name": ["Name must be between 3 and 100 characters"],
        }

    @pytest.mark.parametrize("value", [0, -5, "-0.01"])
    def test_rejects_non_positive_value(self, schema, value):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({"name": "Widget", "value": value})
        assert exc_info.value.messages == {"value": ["Value must be greater than 0"]}

    def test_accepts_smallest_value(self, schema):
        assert schema.load({"name": "abc", "value": "0.01"})["value"] == Decimal("0.01")

    def test_sub_cent_value_reports_both_rules(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({"name": "Widget", "value": "0.001"})
        assert exc_info.value.messages == {
            "value": [
                "Value must be greater than 0",
                "Value must have at most 2 decimal places",
            ]
        }

    @pytest.mark.parametrize("value", [9.999, "1.005", "100.0001"])
    def test_rejects_more_than_two_places(self, schema, value):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({"name": "Widget", "value": value})
        assert exc_info.value.messages == {"value": ["Value must have at most 2 decimal places"]}

    @pytest.mark.parametrize("value", ["1.500", "2.0000", "1E+2"])
    def test_trailing_zeros_do_not_count_as_places(self, schema, value):
        assert schema.load({"name": "Widget", "value": value})["value"] == Decimal(value)

    def test_accepts_largest_column_value(self, schema):
        data = schema.load({"name": "Widget", "value": "9999999999999999.99"})
        assert data["value"] == Decimal("9999999999999999.99")

    @pytest.mark.parametrize("value", ["10000000000000000", 1e300])
    def test_rejects_value_beyond_column_range(self, schema, value):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({"name": "Widget", "value": value})
        assert exc_info.value.messages == {"value": ["Value must not exceed 9999999999999999.99"]}

    @pytest.mark.parametrize("name", ["   ", "\t\t\t", "  \n  "])
    def test_blank_name_is_required_error(self, schema, name):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({"name": name, "value": 1})
        assert exc_info.value.messages == {"name": ["Name is required"]}

    def test_short_blank_name_reports_both_rules(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({"name": " ", "value": 1})
        assert exc_info.value.messages == {
            "name": ["Name is required", "Name must be between 3 and 100 characters"],
        }

    def test_null_name_is_required_error(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            schema.load({"name": None, "value": 1})
        assert exc_info.value.messages == {"name": ["Name is required"]}


class TestProductUpdateSchema:
    def test_missing_id_defaults_to_zero(self):
        data = ProductUpdateSchema().load({"name": "Widget", "value": 1})
        assert data["id"] == 0

    def test_keeps_body_id(self):
        data = ProductUpdateSchema().load({"id": 6, "name": "Widget", "value": 1})
        assert data["id"] == 6


def test_dump_emits_value_as_number():
    out = ProductOut(id=4, name="Widget", value=Decimal("9.99"))
    assert ProductSchema().dump(out) == {"id": 4, "name": "Widget", "value": 9.99}
