"""
Error boundary for the avatar API Gateway handlers.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import AvatarServiceError
from core.utils.response import ResponseBuilder

logger = Logger(service="avatar-api-handler", UTC=True)

JsonDict = dict[str, Any]
Handler = Callable[..., JsonDict]


def _service_error(exc: AvatarServiceError, **context: Any) -> JsonDict:
    return ResponseBuilder.internal_error(exc.message, error=exc.error_code, **context)


def _bad_input(exc: Exception, **context: Any) -> JsonDict:
    return ResponseBuilder.bad_request(
        "The provided data is invalid. Please check your input and try again.", **context
    )


def _unexpected(exc: Exception, **context: Any) -> JsonDict:
    return ResponseBuilder.internal_error(
        "We're experiencing technical difficulties. Please try again in a few moments.", **context
    )


# First match wins; (exception types, log message, logged with traceback, response)
ERROR_RESPONSES: list[tuple[tuple[type[Exception], ...], str, bool, Callable[..., JsonDict]]] = [
    ((AvatarServiceError,), "Unhandled service error in handler", True, _service_error),
    ((ValueError, KeyError, TypeError), "Invalid input in handler", False, _bad_input),
    ((Exception,), "Unexpected error in handler", True, _unexpected),
]


def api_gateway_handler(func: Handler) -> Handler:
    """
    Wrap an avatar API handler.

    Answers CORS preflight requests without calling the handler, and turns
    exceptions the handler did not translate itself into error responses:
    domain errors keep their code and message (500), malformed input gives
    400 and anything else a generic 500.

    Example:
        @api_gateway_handler
        def handler(event, context):
            return ResponseBuilder.ok({"status": "ok"})
    """

    @wraps(func)
    def wrapper(event: Any, context: Any, *, cors_origin: str | None = None) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.preflight(cors_origin)

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)
        except Exception as exc:
            for error_types, message, with_traceback, respond in ERROR_RESPONSES:
                if isinstance(exc, error_types):
                    break

            log_extra = {
                "handler": func.__name__,
                "request_id": request_id,
                "error": str(exc),
                "error_type": type(exc).__name__,
            }
            if with_traceback:
                logger.exception(message, extra=log_extra)
            else:
                logger.warning(message, extra=log_extra)

            return respond(exc, request_id=request_id, cors_origin=cors_origin)

    return wrapper
