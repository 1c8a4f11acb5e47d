"""S3-backed implementation of AvatarStorageRepository."""

import os
from typing import BinaryIO

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from core.models.errors import (
    AvatarDeletionFailedError,
    AvatarUploadFailedError,
    NotFoundError,
    PublicUrlFailedError,
    StorageError,
)
from core.repositories.storage_repository import AvatarStorageRepository
from core.utils.constants import (
    ENV_AVATAR_PUBLIC_BASE_URL,
    ERROR_CODE_AVATAR_FILE_NOT_FOUND,
    ERROR_CODE_FOLDER_CREATE_FAILED,
    PRESIGNED_URL_EXPIRES_IN,
)
from core.utils.extensions import extension_from_filename
from core.utils.mime import content_type_for_extension

logger = Logger(UTC=True)

FOLDER_CONTENT_TYPE = "application/x-directory"
MISSING_OBJECT_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3AvatarStorage(AvatarStorageRepository):
    """Avatar storage backed by Amazon S3.

    S3 has no real folders; a folder is a zero-byte ``<path>/`` marker object.
    A PUT replaces an existing object atomically.
    """

    def __init__(
        self,
        adapter: S3AdapterProtocol | None = None,
        public_base_url: str | None = None,
    ) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3: S3AdapterProtocol = adapter or S3Adapter()
        self._public_base_url = public_base_url or os.getenv(ENV_AVATAR_PUBLIC_BASE_URL)

    @property
    def supports_atomic_overwrite(self) -> bool:
        return True

    def create_folder(self, *, path: str) -> None:
        """Write the folder marker object; rewriting it is harmless."""
        key = f"{path.strip('/')}/"
        logger.debug("Creating storage folder", extra={"key": key})

        try:
            self._s3.put_object(key=key, body=b"", content_type=FOLDER_CONTENT_TYPE)
        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 folder creation failed", extra={"key": key})
            raise StorageError(
                message="Unable to create avatar folder",
                error_code=ERROR_CODE_FOLDER_CREATE_FAILED,
                details={"path": path},
            ) from exc

    def save_stream(self, *, path: str, stream: BinaryIO) -> None:
        """Upload the stream to S3 under path."""
        content_type = content_type_for_extension(extension_from_filename(path))
        logger.debug(
            "Uploading avatar file",
            extra={"key": path, "content_type": content_type},
        )

        try:
            self._s3.put_object(key=path, body=stream, content_type=content_type)
            logger.info("Avatar file uploaded", extra={"key": path})

        except ClientError as exc:
            logger.error("S3 upload failed", extra={"key": path})
            raise AvatarUploadFailedError(
                message="Unable to upload avatar at this time",
                details={"path": path},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error uploading avatar")
            raise AvatarUploadFailedError(
                message="Unable to upload avatar at this time",
                details={"path": path},
            ) from exc

    def delete_file(self, *, path: str) -> None:
        """Delete an avatar object, raising NotFoundError when it is absent.

        S3 reports success for deletes of missing keys, so existence is
        checked with a HEAD request first.
        """
        logger.debug("Deleting avatar file", extra={"key": path})

        try:
            self._s3.head_object(key=path)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in MISSING_OBJECT_CODES:
                raise NotFoundError(
                    message="Avatar file not found",
                    error_code=ERROR_CODE_AVATAR_FILE_NOT_FOUND,
                    details={"path": path},
                ) from exc

            logger.error("S3 head_object failed", extra={"key": path})
            raise AvatarDeletionFailedError(
                message="Unable to delete avatar at this time",
                details={"path": path},
            ) from exc
        except BotoCoreError as exc:
            logger.error("S3 head_object failed", extra={"key": path})
            raise AvatarDeletionFailedError(
                message="Unable to delete avatar at this time",
                details={"path": path},
            ) from exc

        try:
            self._s3.delete_object(key=path)
            logger.info("Avatar file deleted", extra={"key": path})

        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 deletion failed", extra={"key": path})
            raise AvatarDeletionFailedError(
                message="Unable to delete avatar at this time",
                details={"path": path},
            ) from exc

    def get_public_url(self, *, path: str) -> str:
        """Public base URL + path when configured, a pre-signed GET otherwise."""
        if self._public_base_url:
            return f"{self._public_base_url.rstrip('/')}/{path}"

        try:
            return self._s3.presigned_get_url(key=path, expires_in=PRESIGNED_URL_EXPIRES_IN)
        except (ClientError, BotoCoreError) as exc:
            logger.error("Failed to generate pre-signed URL", extra={"key": path})
            raise PublicUrlFailedError(
                message="Unable to generate avatar URL",
                details={"path": path},
            ) from exc
