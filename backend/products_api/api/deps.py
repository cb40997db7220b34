"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from products_api.core.logger import ensure_request_id
from products_api.services._shared.base import ServiceContext

F = TypeVar("F", bound=Callable[..., Any])


def require_auth(func: F) -> F:
    """Ensure the request carries a valid bearer token.

    Signature, issuer, audience, lifetime and claim checks run inside
    ``verify_jwt_in_request``; failures are rendered by the callbacks in
    :mod:`products_api.core.security`.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        verify_jwt_in_request(optional=False)
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def service_context() -> ServiceContext:
    """Build the request-scoped context handed to services."""

    return ServiceContext(actor=get_jwt_identity(), request_id=ensure_request_id())


def json_body() -> Any:
    """Return the parsed JSON body, or an empty mapping when absent or malformed."""

    return request.get_json(silent=True) or {}


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def empty_response(*, status: int = 204) -> Response:
    """Return a body-less response (``204 No Content`` by default)."""

    return current_app.response_class(status=status)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
