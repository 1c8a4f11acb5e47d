"""Abstract contract for avatar file storage."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class AvatarStorageRepository(ABC):
    """Contract for storing avatar files under slash separated paths.

    Implementations could be S3, GCS, local disk, etc.
    The avatar store depends on this interface, not the implementation.
    """

    @property
    def supports_atomic_overwrite(self) -> bool:
        """Whether ``save_stream`` replaces an existing file in one step.

        Backends that cannot overwrite atomically get the existing file
        deleted before every save.
        """
        return False

    @abstractmethod
    def create_folder(self, *, path: str) -> None:
        """Ensure a folder exists. Succeeds if it is already there.

        Raises:
            StorageError: If the folder cannot be created
        """

    @abstractmethod
    def save_stream(self, *, path: str, stream: BinaryIO) -> None:
        """Write the stream to path, replacing any existing content.

        Raises:
            AvatarUploadFailedError: If the write fails
        """

    @abstractmethod
    def delete_file(self, *, path: str) -> None:
        """Delete the file at path.

        Raises:
            NotFoundError: If there is no file at path
            AvatarDeletionFailedError: If deletion fails
        """

    @abstractmethod
    def get_public_url(self, *, path: str) -> str:
        """Return the externally visible URL of the file at path.

        Raises:
            PublicUrlFailedError: If no URL can be produced
        """
