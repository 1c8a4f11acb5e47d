"""Abstract contract for avatar record persistence."""

from abc import ABC, abstractmethod

from core.models.avatar import AvatarRecord


class AvatarRecordRepository(ABC):
    """Contract for reading and updating the avatar state of entities.

    Implementations could be DynamoDB, PostgreSQL, a CMS content store, etc.
    """

    @abstractmethod
    def get_record(self, *, entity_id: int) -> AvatarRecord:
        """Fetch the avatar record of an entity.

        Args:
            entity_id: Owning entity identifier

        Returns:
            A mutable record handle

        Raises:
            NotFoundError: If the entity has no record
            RecordStoreError: If the fetch fails
        """

    @abstractmethod
    def commit(self, *, record: AvatarRecord) -> None:
        """Persist the pending changes of a record.

        Raises:
            RecordStoreError: If the write fails
        """

    @abstractmethod
    def create_record(self, *, entity_id: int) -> AvatarRecord:
        """Create an empty record for an entity, or return the existing one.

        Raises:
            RecordStoreError: If creation fails
        """
