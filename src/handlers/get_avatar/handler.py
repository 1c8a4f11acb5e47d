"""
Lambda handler responsible for resolving an entity's avatar URL.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.models.errors import NotFoundError, RecordStoreError, StorageError
from core.services.factory import build_avatar_store
from core.utils.constants import METRICS_NAMESPACE, SITE_ID_HEADER
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_header, sanitize_validation_errors, validate_request

from .models import GetAvatarRequest, GetAvatarResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Return the public avatar URL of an entity.

    An entity without an avatar gets an empty ``avatar_url`` and
    ``has_avatar: false``, not a 404.
    """
    path_params = event.get("pathParameters") or {}

    logger.info(
        "Received avatar lookup request",
        extra={
            "entity_id": path_params.get("entity_id"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    try:
        request = validate_request(
            GetAvatarRequest,
            {"entity_id": path_params.get("entity_id")},
        )
    except ValidationError as exc:
        logger.error("Request validation failed", extra={"errors": exc.errors()})
        return ResponseBuilder.bad_request(
            message="Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    try:
        avatar_url = build_avatar_store(get_header(event, SITE_ID_HEADER)).get_avatar_url(
            request.entity_id
        )

    except NotFoundError:
        logger.warning("Entity not found", extra={"entity_id": request.entity_id})
        return ResponseBuilder.not_found(f"Entity not found: {request.entity_id}")

    except (StorageError, RecordStoreError) as exc:
        logger.exception("Avatar lookup failed", extra={"entity_id": request.entity_id})
        return ResponseBuilder.internal_error(exc.message)

    response = GetAvatarResponse(
        entity_id=request.entity_id,
        avatar_url=avatar_url,
        has_avatar=bool(avatar_url),
    )

    return ResponseBuilder.ok(response.model_dump())
