"""Business logic for avatar files.

The avatar store validates uploads against the site's policy, writes them
to ``Avatars/{entity_id}.{EXTENSION}``, keeps the owning record's extension
in step with the stored file and resolves public URLs. It owns no state;
records, files and settings all live in the collaborators it is given.
"""

from typing import BinaryIO, cast

from aws_lambda_powertools import Logger

from core.models.avatar import AvatarPolicy, PostedFile
from core.models.errors import NotFoundError, StorageError
from core.models.results import AvatarValidationError, SaveAvatarResult
from core.repositories.record_repository import AvatarRecordRepository
from core.repositories.settings_repository import AvatarSettingsProvider
from core.repositories.storage_repository import AvatarStorageRepository
from core.utils.constants import AVATAR_FOLDER_PATH
from core.utils.extensions import (
    build_avatar_path,
    extension_from_filename,
    normalize_extension,
)
from core.utils.streams import stream_length

logger = Logger(UTC=True)


class AvatarStore:
    """Application service for avatar upload, removal and lookup.

    Validation failures are returned in a SaveAvatarResult and never raised.
    Infrastructure failures raise the collaborators' domain errors.
    """

    def __init__(
        self,
        *,
        storage: AvatarStorageRepository,
        records: AvatarRecordRepository,
        settings: AvatarSettingsProvider,
    ) -> None:
        self.storage = storage
        self.records = records
        self.settings = settings

    def create_storage_folder(self) -> None:
        """Ensure the avatar folder exists in storage."""
        self.storage.create_folder(path=AVATAR_FOLDER_PATH)
        logger.info("Avatar folder ready", extra={"path": AVATAR_FOLDER_PATH})

    def save_avatar(
        self,
        entity_id: int,
        stream: BinaryIO,
        extension: str,
        *,
        policy: AvatarPolicy | None = None,
    ) -> SaveAvatarResult:
        """Validate and store an avatar file for an entity.

        The save flow is:
        1. Resolve the policy (explicit argument, else current settings)
        2. Reject files larger than the policy allows
        3. Reject extensions missing from the whitelist
        4. Clear the target path if the backend cannot overwrite atomically
        5. Write the file and commit the new extension on the record
        6. Remove the previous file when its extension differed

        Args:
            entity_id: Owning entity identifier
            stream: Seekable binary stream positioned at the file start
            extension: File extension, with or without a leading dot
            policy: Policy to apply instead of the current settings

        Returns:
            A successful result, or a failed one carrying validation errors

        Raises:
            NotFoundError: If the entity has no avatar record
            StorageError: If writing the file fails
            RecordStoreError: If the record cannot be read or committed
        """
        normalized = normalize_extension(extension)
        policy = self._resolve_policy(policy)

        if policy is None:
            logger.warning("No avatar policy available", extra={"entity_id": entity_id})
            return SaveAvatarResult.failed(
                AvatarValidationError.not_allowed_file_type(extension=normalized)
            )

        file_size = stream_length(stream)
        if not policy.allows_size(file_size):
            logger.info(
                "Avatar file too large",
                extra={
                    "entity_id": entity_id,
                    "file_size": file_size,
                    "max_file_size": policy.max_file_size,
                },
            )
            return SaveAvatarResult.failed(
                AvatarValidationError.file_too_large(
                    file_size=file_size,
                    max_file_size=policy.max_file_size,
                )
            )

        file_path = build_avatar_path(entity_id, normalized)

        if not policy.allows_extension(normalized):
            logger.info(
                "Avatar file type not allowed",
                extra={"entity_id": entity_id, "extension": normalized},
            )
            return SaveAvatarResult.failed(
                AvatarValidationError.not_allowed_file_type(extension=normalized)
            )

        record = self.records.get_record(entity_id=entity_id)
        previous_extension = record.file_extension

        if not self.storage.supports_atomic_overwrite:
            self._delete_existing(file_path)

        self.storage.save_stream(path=file_path, stream=stream)

        record.file_extension = normalized
        self.records.commit(record=record)

        if previous_extension and previous_extension != normalized:
            self._remove_stale_file(build_avatar_path(entity_id, previous_extension))

        logger.info(
            "Avatar saved",
            extra={"entity_id": entity_id, "path": file_path, "file_size": file_size},
        )
        return SaveAvatarResult.ok(file_path=file_path, file_extension=normalized)

    def save_avatar_file(
        self,
        entity_id: int,
        posted_file: PostedFile,
        *,
        policy: AvatarPolicy | None = None,
    ) -> SaveAvatarResult:
        """Save an uploaded file, taking the extension from its file name."""
        return self.save_avatar(
            entity_id,
            cast(BinaryIO, posted_file.stream),
            extension_from_filename(posted_file.file_name),
            policy=policy,
        )

    def delete_avatar(self, entity_id: int) -> None:
        """Clear the entity's avatar and remove its file.

        A missing file is not an error; other storage failures are logged
        because the record has already been cleared.
        """
        record = self.records.get_record(entity_id=entity_id)
        previous_extension = record.file_extension

        record.file_extension = ""
        self.records.commit(record=record)

        if previous_extension:
            self._remove_stale_file(build_avatar_path(entity_id, previous_extension))

        logger.info("Avatar deleted", extra={"entity_id": entity_id})

    def is_file_allowed(
        self,
        file: str | PostedFile | None,
        *,
        policy: AvatarPolicy | None = None,
    ) -> bool:
        """Whether a file name (or posted file) has a whitelisted extension."""
        if file is None:
            return False

        file_name = file.file_name if isinstance(file, PostedFile) else file

        policy = self._resolve_policy(policy)
        if policy is None:
            return False

        return policy.allows_extension(extension_from_filename(file_name))

    def get_avatar_url(self, entity_id: int) -> str:
        """Public URL of the entity's avatar, or "" when it has none."""
        record = self.records.get_record(entity_id=entity_id)
        if not record.file_extension:
            return ""

        return self.storage.get_public_url(
            path=build_avatar_path(entity_id, record.file_extension)
        )

    def _resolve_policy(self, policy: AvatarPolicy | None) -> AvatarPolicy | None:
        if policy is not None:
            return policy

        return self.settings.current_policy()

    def _delete_existing(self, file_path: str) -> None:
        try:
            self.storage.delete_file(path=file_path)
        except NotFoundError:
            logger.debug("No existing avatar file to replace", extra={"path": file_path})

    def _remove_stale_file(self, file_path: str) -> None:
        try:
            self.storage.delete_file(path=file_path)
        except NotFoundError:
            logger.debug("Stale avatar file already gone", extra={"path": file_path})
        except StorageError as exc:
            logger.warning(
                "Failed to remove stale avatar file",
                extra={"path": file_path, "error": exc.message},
            )
