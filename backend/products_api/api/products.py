"""Product CRUD endpoints."""

from __future__ import annotations

from flask import Blueprint, url_for

from products_api.api.deps import (
    empty_response,
    json_body,
    json_response,
    require_auth,
    service_context,
    timing,
)
from products_api.api.errors import register_service_error_handlers
from products_api.core.errors import BadRequest
from products_api.schemas import ProductCreateSchema, ProductSchema, ProductUpdateSchema
from products_api.services.products.dto import ProductIn, ProductReplaceIn
from products_api.services.products.service import ProductService

ID_MISMATCH_MESSAGE = "ID in URL does not match product ID"
# Ids are 32-bit signed integers; larger path segments match no route (404)
MAX_PRODUCT_ID = 2_147_483_647
PRODUCT_ROUTE = f"/<int(max={MAX_PRODUCT_ID}):product_id>"

bp = Blueprint("products", __name__)
register_service_error_handlers(bp)

product_schema = ProductSchema()
product_list_schema = ProductSchema(many=True)
product_create_schema = ProductCreateSchema()
product_update_schema = ProductUpdateSchema()


def _service() -> ProductService:
    return ProductService(ctx=service_context())


@bp.get("")
@require_auth
@timing
def list_products():
    """Return every product."""

    items = _service().list_products()
    return json_response(product_list_schema.dump(items))


@bp.get(PRODUCT_ROUTE)
@require_auth
@timing
def get_product(product_id: int):
    """Return a single product."""

    product = _service().get_product(product_id)
    return json_response(product_schema.dump(product))


@bp.post("")
@require_auth
@timing
def create_product():
    """Create a product and point ``Location`` at it."""

    payload = product_create_schema.load(json_body())
    product = _service().create_product(ProductIn(name=payload["name"], value=payload["value"]))
    response = json_response(product_schema.dump(product), status=201)
    response.headers["Location"] = url_for("products.get_product", product_id=product.id)
    return response


@bp.put(PRODUCT_ROUTE)
@require_auth
@timing
def replace_product(product_id: int):
    """Overwrite every field of an existing product."""

    payload = product_update_schema.load(json_body())
    if payload["id"] != product_id:
        raise BadRequest(ID_MISMATCH_MESSAGE)
    fields = ProductIn(name=payload["name"], value=payload["value"])
    _service().replace_product(ProductReplaceIn(id=product_id, fields=fields))
    return empty_response()


@bp.delete(PRODUCT_ROUTE)
@require_auth
@timing
def delete_product(product_id: int):
    """Remove a product."""

    _service().delete_product(product_id)
    return empty_response()
