"""Pydantic models for get avatar request/response."""

from pydantic import BaseModel, ConfigDict, Field


class GetAvatarRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)
    entity_id: int = Field(..., ge=0, description="Entity to resolve the avatar for")


class GetAvatarResponse(BaseModel):
    entity_id: int = Field(..., description="Entity ID")
    avatar_url: str = Field(..., description="Public avatar URL, empty when none is set")
    has_avatar: bool = Field(..., description="Whether the entity has an avatar")
