"""Structured results returned by avatar operations."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from core.utils.constants import (
    ERROR_CODE_FILE_TOO_LARGE,
    ERROR_CODE_NOT_ALLOWED_FILE_TYPE,
    to_kilobytes,
)

FILE_TOO_LARGE_TEMPLATE = (
    "The file was too large for an avatar ({file_size_kb}KB), "
    "maximum file size is {max_file_size_kb}KB"
)
NOT_ALLOWED_FILE_TYPE_TEMPLATE = "This file type is not allowed as an avatar."


class AvatarValidationKey(str, Enum):
    """Kinds of validation failure a save can report."""

    FILE_TOO_LARGE = "FileTooLarge"
    NOT_ALLOWED_FILE_TYPE = "NotAllowedFileType"

    @property
    def error_code(self) -> str:
        if self is AvatarValidationKey.FILE_TOO_LARGE:
            return ERROR_CODE_FILE_TOO_LARGE
        return ERROR_CODE_NOT_ALLOWED_FILE_TYPE


class AvatarValidationError(BaseModel):
    """A single validation failure together with its message template."""

    key: AvatarValidationKey
    message_template: str
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def file_too_large(cls, *, file_size: int, max_file_size: int) -> "AvatarValidationError":
        return cls(
            key=AvatarValidationKey.FILE_TOO_LARGE,
            message_template=FILE_TOO_LARGE_TEMPLATE,
            details={"file_size": file_size, "max_file_size": max_file_size},
        )

    @classmethod
    def not_allowed_file_type(cls, *, extension: str) -> "AvatarValidationError":
        return cls(
            key=AvatarValidationKey.NOT_ALLOWED_FILE_TYPE,
            message_template=NOT_ALLOWED_FILE_TYPE_TEMPLATE,
            details={"extension": extension},
        )

    @property
    def message(self) -> str:
        """The template rendered with sizes in kilobytes."""
        if self.key is AvatarValidationKey.FILE_TOO_LARGE:
            return self.message_template.format(
                file_size_kb=to_kilobytes(self.details.get("file_size", 0)),
                max_file_size_kb=to_kilobytes(self.details.get("max_file_size", 0)),
            )
        return self.message_template


class SaveAvatarResult(BaseModel):
    """Outcome of saving an avatar file.

    Truthy only on success. A failed result carries the validation errors
    that caused it; a successful one carries the stored path and extension.
    """

    success: bool
    errors: list[AvatarValidationError] = Field(default_factory=list)
    file_path: str | None = None
    file_extension: str | None = None

    @classmethod
    def ok(cls, *, file_path: str, file_extension: str) -> "SaveAvatarResult":
        return cls(success=True, file_path=file_path, file_extension=file_extension)

    @classmethod
    def failed(cls, *errors: AvatarValidationError) -> "SaveAvatarResult":
        return cls(success=False, errors=list(errors))

    @property
    def error_keys(self) -> list[AvatarValidationKey]:
        return [error.key for error in self.errors]

    def __bool__(self) -> bool:
        return self.success
