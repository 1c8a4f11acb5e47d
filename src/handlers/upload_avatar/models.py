"""Pydantic models for avatar upload request/response."""

import base64
import binascii

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = Logger(UTC=True)


class UploadAvatarRequest(BaseModel):
    """Validation model for avatar upload request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    entity_id: int = Field(..., ge=0, description="Entity owning the avatar")
    file: str = Field(..., description="Base64 encoded avatar file")
    file_name: str = Field(
        ..., min_length=1, max_length=255, description="Original file name"
    )

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: str) -> str:
        """
        Validate base64 file:
        - must not be empty
        - must decode correctly
        - must have non-zero size

        Size and type limits depend on the site's policy and are checked
        by the avatar store.
        """
        if not value:
            raise ValueError("file must not be empty")

        try:
            file_data = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error(f"File validation error: Invalid base64 - {e}")
            raise ValueError("Invalid base64 encoded file") from e

        if not file_data:
            raise ValueError("Decoded file is empty")

        return value

    def file_bytes(self) -> bytes:
        return base64.b64decode(self.file)


class UploadAvatarResponse(BaseModel):
    """Response model for successful avatar upload."""

    entity_id: int = Field(..., description="Entity ID")
    file_extension: str = Field(..., description="Normalized stored extension")
    avatar_url: str = Field(..., description="Public URL of the avatar")
    message: str = Field(..., description="Success message")
