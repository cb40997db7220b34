"""Centralized JSON (RFC 7807 style) error handling for the API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, current_app, has_request_context, jsonify, request
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from products_api.core.logger import ensure_request_id

log = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An error occurred while processing your request."
VALIDATION_ERROR_MESSAGE = "One or more validation errors occurred."


def _http_status_to_code(status_code: int) -> str:
    """Map common HTTP status codes to canonical, stable error codes."""
    mapping = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        413: "payload_too_large",
        415: "unsupported_media_type",
        500: "internal_server_error",
    }
    return mapping.get(status_code, "error")


def as_problem(
    *,
    status: int,
    code: str,
    message: str,
    errors: dict[str, Any] | None = None,
    detail: str | None = None,
) -> dict[str, Any]:
    """
    Build the JSON error body shared by every failure path.

    :param status: HTTP status code.
    :param code: Stable machine-consumable error code.
    :param message: Human-readable error summary (safe for clients).
    :param errors: Optional per-field validation messages.
    :param detail: Optional internal detail (only set for 500s in development).
    :returns: Problem dictionary.
    :rtype: dict
    """
    problem: dict[str, Any] = {
        "type": "about:blank",
        "title": HTTPStatus(status).phrase,
        "status": status,
        "message": message,
        "instance": request.path if has_request_context() else None,
        "code": code,
    }
    if errors:
        problem["errors"] = errors
    if detail is not None:
        problem["detail"] = detail
    problem["request_id"] = ensure_request_id()
    return problem


def problem_response(problem: dict[str, Any]) -> Response:
    """
    Return a Flask response with ``application/problem+json`` media type.

    :param problem: Problem payload built by :func:`as_problem`.
    :returns: Flask JSON Response carrying the problem status code.
    :rtype: flask.Response
    """
    resp = jsonify(problem)
    resp.status_code = int(problem["status"])
    resp.mimetype = "application/problem+json"
    return resp


def internal_error_response(err: BaseException | None = None) -> Response:
    """
    Build the generic 500 body.

    The exception message is only exposed when ``ERROR_INCLUDE_DETAIL`` is
    enabled (development configuration).
    """
    detail = None
    if err is not None and current_app.config.get("ERROR_INCLUDE_DETAIL", False):
        detail = str(err)
    problem = as_problem(
        status=HTTPStatus.INTERNAL_SERVER_ERROR,
        code="internal_server_error",
        message=INTERNAL_ERROR_MESSAGE,
        detail=detail,
    )
    return problem_response(problem)


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier. Defaults to ``"bad_request"``.
    errors : dict[str, Any] | None, optional
        Per-field validation messages included in the response body.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "bad_request",
        errors: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.errors = errors or {}

    def to_problem(self) -> dict[str, Any]:
        """Serialize error metadata into a problem dictionary."""
        return as_problem(
            status=self.status_code,
            code=self.code,
            message=self.message,
            errors=self.errors or None,
        )


# Domain conveniences
class BadRequest(APIError):
    """400 for invalid input."""

    def __init__(self, message: str = "Invalid request", errors: dict[str, Any] | None = None) -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code="bad_request", errors=errors)


class NotFound(APIError):
    """404 when resources are missing."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=HTTPStatus.NOT_FOUND, code="not_found")


class Unauthorized(APIError):
    """401 when authentication fails."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status_code=HTTPStatus.UNAUTHORIZED, code="unauthorized")


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers and the ``/error`` fallback to the Flask app.

    Notes
    -----
    - Every handled error carries ``message`` and ``request_id``.
    - 5xx are logged with ``exc_info``; 4xx as warnings.
    """

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        problem = err.to_problem()
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: code=%s status=%s msg=%s request_id=%s",
            err.code,
            err.status_code,
            err.message,
            problem.get("request_id"),
        )
        return problem_response(problem)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        error_code = _http_status_to_code(status)
        message = (err.description or error_code.replace("_", " ").capitalize()).strip()
        if status == HTTPStatus.NOT_FOUND and has_request_context():
            message = f"Route '{request.path}' not found"
        problem = as_problem(status=status, code=error_code, message=message)
        level = log.error if status >= 500 else log.warning
        level(
            "HTTPException: code=%s status=%s detail=%s request_id=%s",
            error_code,
            status,
            message,
            problem.get("request_id"),
        )
        return problem_response(problem)

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
        problem = as_problem(
            status=HTTPStatus.BAD_REQUEST,
            code="validation_error",
            message=VALIDATION_ERROR_MESSAGE,
            errors=messages,
        )
        log.warning(
            "ValidationError: fields=%s request_id=%s",
            sorted(messages),
            problem.get("request_id"),
        )
        return problem_response(problem)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Unexpected server-side error; never leak internal details by default
        response = internal_error_response(err)
        log.error(
            "Unhandled exception: request_id=%s",
            ensure_request_id(),
            exc_info=err,
        )
        return response

    @app.get("/error")
    def error_fallback():
        """Return the generic 500 body."""
        return internal_error_response()
