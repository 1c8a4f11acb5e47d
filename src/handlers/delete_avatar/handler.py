"""
Lambda handler responsible for removing an entity's avatar.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.models.errors import NotFoundError, RecordStoreError, StorageError
from core.services.factory import build_avatar_store
from core.utils.constants import METRICS_NAMESPACE, SITE_ID_HEADER
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.time import utc_now_iso
from core.utils.validators import get_header, sanitize_validation_errors, validate_request

from .models import DeleteAvatarRequest, DeleteAvatarResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle avatar deletion requests.

    Clears the entity's avatar and removes the stored file. Deleting an
    avatar that was never set succeeds.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    path_params = event.get("pathParameters") or {}

    logger.info(
        "Received avatar delete request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "entity_id": path_params.get("entity_id"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    try:
        request = validate_request(
            DeleteAvatarRequest,
            {"entity_id": path_params.get("entity_id")},
        )
    except ValidationError as exc:
        logger.error("Request validation failed", extra={"errors": exc.errors()})
        return ResponseBuilder.bad_request(
            message="Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    try:
        build_avatar_store(get_header(event, SITE_ID_HEADER)).delete_avatar(request.entity_id)

    except NotFoundError:
        logger.exception("Entity not found during delete", extra={"entity_id": request.entity_id})
        return ResponseBuilder.not_found(f"Entity not found: {request.entity_id}")

    except (StorageError, RecordStoreError) as exc:
        logger.exception("Avatar deletion failed", extra={"entity_id": request.entity_id})
        return ResponseBuilder.internal_error(exc.message)

    metrics.add_metric(name="AvatarDeleted", unit=MetricUnit.Count, value=1)

    response = DeleteAvatarResponse(
        entity_id=request.entity_id,
        message="Avatar deleted successfully",
        deleted_at=utc_now_iso(),
    )

    return ResponseBuilder.ok(response.model_dump())
