"""
API Gateway proxy responses for the avatar handlers.

Every response is JSON with CORS headers. Error bodies share one shape::

    {"error": "<CODE>", "message": "...", "timestamp": "...", "details": ...}

``request_id`` is added to the body when known.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
)
from core.utils.time import utc_now_iso

JsonDict = dict[str, Any]


class ResponseBuilder:
    """Builds API Gateway-compatible HTTP responses."""

    HEADERS: dict[str, str] = {
        "Content-Type": DEFAULT_CONTENT_TYPE,
        "Access-Control-Allow-Origin": CORS_ORIGIN,
        "Access-Control-Allow-Headers": CORS_HEADERS,
        "Access-Control-Allow-Methods": CORS_METHODS,
    }

    @classmethod
    def headers(cls, cors_origin: str | None = None) -> dict[str, str]:
        headers = dict(cls.HEADERS)
        if cors_origin:
            headers["Access-Control-Allow-Origin"] = cors_origin

        return headers

    @classmethod
    def respond(
        cls,
        status: HTTPStatus,
        payload: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        body = dict(payload)
        if request_id:
            body["request_id"] = request_id

        return {
            "statusCode": status.value,
            "headers": cls.headers(cors_origin),
            "body": json.dumps(body),
        }

    @classmethod
    def preflight(cls, cors_origin: str | None = None) -> JsonDict:
        """Empty 204 answer to a CORS preflight request."""
        return {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": cls.headers(cors_origin),
            "body": "",
        }

    @classmethod
    def ok(cls, body: JsonDict, **context: Any) -> JsonDict:
        return cls.respond(HTTPStatus.OK, body, **context)

    @classmethod
    def error(
        cls,
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: Any = None,
        **context: Any,
    ) -> JsonDict:
        """Error response; ``error`` defaults to the status name (``NOT_FOUND``...)."""
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }
        if details:
            payload["details"] = details

        return cls.respond(status, payload, **context)

    @classmethod
    def bad_request(cls, message: str, *, details: Any = None, **context: Any) -> JsonDict:
        return cls.error(status=HTTPStatus.BAD_REQUEST, message=message, details=details, **context)

    @classmethod
    def validation_error(cls, *, message: str, details: Any = None, **context: Any) -> JsonDict:
        """422 for uploads the avatar policy rejected."""
        return cls.error(
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            error=ERROR_CODE_VALIDATION_FAILED,
            message=message,
            details=details,
            **context,
        )

    @classmethod
    def not_found(cls, message: str = "Entity not found", **context: Any) -> JsonDict:
        return cls.error(status=HTTPStatus.NOT_FOUND, message=message, **context)

    @classmethod
    def internal_error(cls, message: str = "Internal server error", **context: Any) -> JsonDict:
        return cls.error(status=HTTPStatus.INTERNAL_SERVER_ERROR, message=message, **context)
