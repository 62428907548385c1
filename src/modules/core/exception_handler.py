"""DRF exception handler: service conditions → HTTP responses.

Every error leaves the API in one envelope::

    {"type": "<kind>", "errors": [{"code": ..., "detail": ..., "attr": ...}]}

``NotFound`` and ``InvalidArgument`` become client errors carrying their
own message.  Pydantic validation failures raised while building DTOs
and DRF's own ``APIException`` family keep their status; a 5xx one is
logged at error level.  Anything else is logged with the view and action that raised it and
answered with a generic 500 that exposes no internal detail.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from modules.core.exceptions import InvalidArgument, NotFound

logger = structlog.get_logger(__name__)

SERVER_ERROR_DETAIL = "A server error occurred."


def _envelope(
    kind: str, errors: List[Dict[str, Any]], status_code: int
) -> Response:
    return Response({"type": kind, "errors": errors}, status=status_code)


def _error(code: str, detail: str, attr: Optional[str] = None) -> Dict[str, Any]:
    return {"code": code, "detail": detail, "attr": attr}


def _call_site(context: Dict[str, Any]) -> Dict[str, Optional[str]]:
    view = context.get("view")
    return {
        "component": type(view).__name__ if view is not None else None,
        "operation": getattr(view, "action", None),
    }


def _flatten_drf_errors(data: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Turn DRF's nested ``detail`` structures into a flat error list."""
    if isinstance(data, dict):
        if set(data) == {"detail"}:
            return _flatten_drf_errors(data["detail"], attr)
        errors: List[Dict[str, Any]] = []
        for key, value in data.items():
            nested = key if attr is None else f"{attr}.{key}"
            errors.extend(_flatten_drf_errors(value, nested))
        return errors
    if isinstance(data, list):
        errors = []
        for value in data:
            errors.extend(_flatten_drf_errors(value, attr))
        return errors
    code = getattr(data, "code", None) or "error"
    return [_error(code, str(data), attr)]


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Map ``exc`` to a response; registered as DRF ``EXCEPTION_HANDLER``."""
    call_site = _call_site(context)

    if isinstance(exc, NotFound):
        logger.info("api.not_found", detail=exc.message, **call_site)
        return _envelope(
            "not_found",
            [_error("not_found", exc.message)],
            status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, InvalidArgument):
        logger.warning(
            "api.invalid_argument", field=exc.field, detail=exc.message, **call_site
        )
        return _envelope(
            "validation_error",
            [_error("invalid_argument", exc.message, exc.field)],
            status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, PydanticValidationError):
        errors = [
            _error(
                "invalid",
                err["msg"],
                ".".join(str(part) for part in err["loc"]) or None,
            )
            for err in exc.errors()
        ]
        logger.warning("api.validation_error", error_count=len(errors), **call_site)
        return _envelope("validation_error", errors, status.HTTP_400_BAD_REQUEST)

    response = drf_exception_handler(exc, context)
    if response is not None:
        kind = "client_error" if response.status_code < 500 else "server_error"
        if isinstance(exc, APIException) and response.status_code == 400:
            kind = "validation_error"
        if response.status_code >= 500:
            logger.error(
                "api.server_error",
                status_code=response.status_code,
                error=str(exc),
                **call_site,
            )
        response.data = {
            "type": kind,
            "errors": _flatten_drf_errors(response.data),
        }
        return response

    logger.exception("api.unhandled_exception", error=str(exc), **call_site)
    return _envelope(
        "server_error",
        [_error("error", SERVER_ERROR_DETAIL)],
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
