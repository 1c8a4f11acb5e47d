"""Global constants used throughout the application.

Error codes, storage layout, upload policy defaults and the names of the
environment variables the service is configured through live here so they
are never hardcoded in the modules that use them.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_FILE_TOO_LARGE = "FILE_TOO_LARGE"
ERROR_CODE_NOT_ALLOWED_FILE_TYPE = "NOT_ALLOWED_FILE_TYPE"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_AVATAR_FILE_NOT_FOUND = "AVATAR_FILE_NOT_FOUND"
ERROR_CODE_AVATAR_RECORD_NOT_FOUND = "AVATAR_RECORD_NOT_FOUND"

# Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_FOLDER_CREATE_FAILED = "FOLDER_CREATE_FAILED"
ERROR_CODE_AVATAR_UPLOAD_FAILED = "AVATAR_UPLOAD_FAILED"
ERROR_CODE_AVATAR_DELETE_FAILED = "AVATAR_DELETE_FAILED"
ERROR_CODE_PUBLIC_URL_FAILED = "PUBLIC_URL_FAILED"

# Record / DynamoDB Errors
ERROR_CODE_RECORD_STORE = "RECORD_STORE_ERROR"
ERROR_CODE_RECORD_FETCH_FAILED = "RECORD_FETCH_FAILED"
ERROR_CODE_RECORD_COMMIT_FAILED = "RECORD_COMMIT_FAILED"
ERROR_CODE_RECORD_CREATE_FAILED = "RECORD_CREATE_FAILED"
ERROR_CODE_RECORD_INVALID_FORMAT = "RECORD_INVALID_FORMAT"

# Settings Errors
ERROR_CODE_SETTINGS = "SETTINGS_ERROR"
ERROR_CODE_SETTINGS_FETCH_FAILED = "SETTINGS_FETCH_FAILED"
ERROR_CODE_SETTINGS_INVALID = "SETTINGS_INVALID"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# Storage Layout
# ============================================================================

AVATAR_FOLDER_PATH: Final[str] = "Avatars"

DEFAULT_CONTENT_TYPE_BINARY = "application/octet-stream"
PRESIGNED_URL_EXPIRES_IN = 3600


# ============================================================================
# Upload Policy Defaults
# ============================================================================

DEFAULT_MAX_FILE_SIZE = 100 * 1024  # 100KB in bytes

EXTENSION_CONTENT_TYPE_MAP: Final[dict[str, str]] = {
    "JPG": "image/jpeg",
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "GIF": "image/gif",
    "WEBP": "image/webp",
    "BMP": "image/bmp",
    "SVG": "image/svg+xml",
}


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,PUT,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key,X-Site-Id"
DEFAULT_CONTENT_TYPE = "application/json"
SITE_ID_HEADER = "x-site-id"
METRICS_NAMESPACE = "AvatarService"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_AVATAR_S3_BUCKET_NAME = "AVATAR_S3_BUCKET_NAME"
ENV_AVATAR_TABLE_NAME = "AVATAR_TABLE_NAME"
ENV_AVATAR_SETTINGS_TABLE_NAME = "AVATAR_SETTINGS_TABLE_NAME"
ENV_AVATAR_PUBLIC_BASE_URL = "AVATAR_PUBLIC_BASE_URL"
ENV_AVATAR_ALLOWED_FILE_TYPES = "AVATAR_ALLOWED_FILE_TYPES"
ENV_AVATAR_MAX_FILE_SIZE = "AVATAR_MAX_FILE_SIZE"

# ============================================================================
# Helper Functions
# ============================================================================


def to_kilobytes(size_bytes: int) -> int:
    """Whole kilobytes in a byte count, rounded down."""
    return size_bytes // 1024
