"""Avatar domain models: records, upload policy and posted files."""

import io
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    StrictInt,
    StrictStr,
    field_validator,
)

from core.utils.extensions import normalize_extension, parse_extension_whitelist


class AvatarRecord(BaseModel):
    """Avatar state of a content entity.

    An empty ``file_extension`` means the entity has no avatar. Instances are
    mutable handles: change ``file_extension`` and pass the record back to the
    repository's ``commit`` to persist it.
    """

    model_config = ConfigDict(validate_assignment=True)

    entity_id: StrictInt = Field(..., description="Owning entity identifier")
    file_extension: StrictStr = Field("", description="Normalized extension of the stored file")
    updated_at: StrictStr | None = Field(None, description="ISO-8601 last update timestamp (UTC)")

    @property
    def has_avatar(self) -> bool:
        return bool(self.file_extension)


class AvatarPolicy(BaseModel):
    """Upload policy: maximum size and allowed extensions.

    ``allowed_extensions`` accepts a space separated whitelist string
    (``"JPG PNG GIF"``) or any collection of tokens; tokens are normalized.
    """

    model_config = ConfigDict(frozen=True)

    max_file_size: PositiveInt = Field(..., description="Maximum file size in bytes")
    allowed_extensions: frozenset[str] = Field(
        ..., description="Normalized extensions (upper-case, no leading dot)"
    )

    @field_validator("allowed_extensions", mode="before")
    @classmethod
    def parse_allowed_extensions(cls, value: Any) -> Any:
        if isinstance(value, (str, list, tuple, set, frozenset)):
            return parse_extension_whitelist(value)

        return value

    def allows_extension(self, extension: str | None) -> bool:
        normalized = normalize_extension(extension)
        return bool(normalized) and normalized in self.allowed_extensions

    def allows_size(self, size: int) -> bool:
        return size <= self.max_file_size


class PostedFile(BaseModel):
    """An uploaded file as supplied by the web layer."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    file_name: StrictStr = Field(..., description="Client supplied file name")
    stream: io.IOBase = Field(..., description="Readable, seekable binary stream")
