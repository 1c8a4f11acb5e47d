"""Domain errors raised by the avatar service.

Every error carries a stable ``error_code`` that handlers copy into the
HTTP response. Subclasses only differ by their default code; callers may
pass a more specific one (e.g. ``AVATAR_FILE_NOT_FOUND``).

Hierarchy::

    AvatarServiceError
    ├── ValidationError
    ├── NotFoundError
    ├── StorageError
    │   ├── AvatarUploadFailedError
    │   ├── AvatarDeletionFailedError
    │   └── PublicUrlFailedError
    ├── RecordStoreError
    └── SettingsError
"""

from typing import Any, ClassVar

from core.utils.constants import (
    ERROR_CODE_AVATAR_DELETE_FAILED,
    ERROR_CODE_AVATAR_UPLOAD_FAILED,
    ERROR_CODE_INTERNAL_ERROR,
    ERROR_CODE_PUBLIC_URL_FAILED,
    ERROR_CODE_RECORD_STORE,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_SETTINGS,
    ERROR_CODE_STORAGE,
    ERROR_CODE_VALIDATION_FAILED,
)


class AvatarServiceError(Exception):
    """Base class of all avatar service errors."""

    default_error_code: ClassVar[str] = ERROR_CODE_INTERNAL_ERROR

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(AvatarServiceError):
    default_error_code = ERROR_CODE_VALIDATION_FAILED


class NotFoundError(AvatarServiceError):
    """An avatar record or a stored avatar file does not exist."""

    default_error_code = ERROR_CODE_RESOURCE_NOT_FOUND


class StorageError(AvatarServiceError):
    """A blob storage operation failed."""

    default_error_code = ERROR_CODE_STORAGE


class AvatarUploadFailedError(StorageError):
    default_error_code = ERROR_CODE_AVATAR_UPLOAD_FAILED


class AvatarDeletionFailedError(StorageError):
    default_error_code = ERROR_CODE_AVATAR_DELETE_FAILED


class PublicUrlFailedError(StorageError):
    default_error_code = ERROR_CODE_PUBLIC_URL_FAILED


class RecordStoreError(AvatarServiceError):
    """Reading or writing an avatar record failed."""

    default_error_code = ERROR_CODE_RECORD_STORE


class SettingsError(AvatarServiceError):
    """Avatar settings could not be read or are malformed."""

    default_error_code = ERROR_CODE_SETTINGS
