"""Pydantic models for delete avatar request/response."""

from pydantic import BaseModel, ConfigDict, Field


class DeleteAvatarRequest(BaseModel):
    """Validation model for delete avatar request."""

    model_config = ConfigDict(str_strip_whitespace=True)
    entity_id: int = Field(..., ge=0, description="Entity whose avatar is removed")


class DeleteAvatarResponse(BaseModel):
    """Response model for successful avatar deletion."""

    entity_id: int = Field(..., description="Entity ID")
    message: str = Field(..., description="Success message")
    deleted_at: str = Field(..., description="Deletion timestamp")
