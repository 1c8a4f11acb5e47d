"""
Lambda handler responsible for avatar uploads.
"""

import io
import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.avatar import PostedFile
from core.models.errors import (
    NotFoundError,
    RecordStoreError,
    SettingsError,
    StorageError,
)
from core.services.factory import build_avatar_store
from core.utils.constants import METRICS_NAMESPACE, SITE_ID_HEADER
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_header, sanitize_validation_errors, validate_request

from .models import UploadAvatarRequest, UploadAvatarResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle avatar upload requests.

    Expected API Gateway event structure:
    {
        "pathParameters": {"entity_id": "7"},
        "headers": {"x-site-id": "main"},     # optional, selects site settings
        "body": "{\"file\": \"<base64>\", \"file_name\": \"me.png\"}"
    }

    Args:
        event: API Gateway Lambda proxy event containing the upload payload
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response with the stored extension and URL
    """
    path_params = event.get("pathParameters") or {}
    site_id = get_header(event, SITE_ID_HEADER)

    logger.info(
        "Received avatar upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "entity_id": path_params.get("entity_id"),
            "site_id": site_id,
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request(message="Invalid JSON body")

    if not isinstance(body, dict):
        return ResponseBuilder.bad_request(message="Request body must be a JSON object")

    try:
        request = validate_request(
            UploadAvatarRequest,
            {**body, "entity_id": path_params.get("entity_id")},
        )
    except PydanticValidationError as exc:
        logger.error("Request validation failed", extra={"errors": exc.errors()})
        return ResponseBuilder.bad_request(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    posted_file = PostedFile(
        file_name=request.file_name,
        stream=io.BytesIO(request.file_bytes()),
    )

    try:
        store = build_avatar_store(site_id)
        result = store.save_avatar_file(request.entity_id, posted_file)
        avatar_url = store.get_avatar_url(request.entity_id) if result else ""

    except NotFoundError:
        logger.exception("Entity not found during upload", extra={"entity_id": request.entity_id})
        return ResponseBuilder.not_found(f"Entity not found: {request.entity_id}")

    except (StorageError, RecordStoreError, SettingsError) as exc:
        logger.exception(
            "Infrastructure error during avatar upload",
            extra={"entity_id": request.entity_id},
        )
        return ResponseBuilder.internal_error(exc.message)

    if not result:
        metrics.add_metric(name="AvatarUploadRejected", unit=MetricUnit.Count, value=1)
        errors = [
            {"key": error.key.value, "code": error.key.error_code, "message": error.message}
            for error in result.errors
        ]
        logger.info(
            "Avatar upload rejected",
            extra={"entity_id": request.entity_id, "errors": errors},
        )
        return ResponseBuilder.validation_error(
            message=result.errors[0].message,
            details={"errors": errors},
        )

    metrics.add_metric(name="AvatarUploaded", unit=MetricUnit.Count, value=1)

    response = UploadAvatarResponse(
        entity_id=request.entity_id,
        file_extension=result.file_extension or "",
        avatar_url=avatar_url,
        message="Avatar uploaded successfully",
    )

    return ResponseBuilder.ok(response.model_dump())
