"""Translate service-layer failures raised inside API blueprints."""

from __future__ import annotations

import logging

from flask import Blueprint, Response

from products_api.core.errors import APIError, internal_error_response, problem_response
from products_api.services._shared.base import BaseService
from products_api.services._shared.errors import ServiceError

log = logging.getLogger(__name__)


def register_service_error_handlers(bp: Blueprint) -> None:
    """Attach the :class:`ServiceError` handler to a blueprint.

:param bp: Blueprint receiving the handler.
:type bp: flask.Blueprint

Known service errors are mapped through
:meth:`BaseService.translate_exceptions`; anything left untranslated, such as
an unresolved write conflict, becomes the generic 500 body.
"""

    @bp.errorhandler(ServiceError)
    def _service_error_handler(err: ServiceError) -> Response:
        translated = BaseService.translate_exceptions(err)
        if isinstance(translated, APIError):
            problem = translated.to_problem()
            log.warning(
                "ServiceError: code=%s status=%s msg=%s request_id=%s",
                translated.code,
                translated.status_code,
                translated.message,
                problem.get("request_id"),
            )
            return problem_response(problem)
        log.error("Unresolved service error", exc_info=err)
        return internal_error_response(err)
