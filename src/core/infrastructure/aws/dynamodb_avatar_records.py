"""DynamoDB-backed implementation of AvatarRecordRepository."""

from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.avatar import AvatarRecord
from core.models.errors import NotFoundError, RecordStoreError
from core.repositories.record_repository import AvatarRecordRepository
from core.utils.constants import (
    ERROR_CODE_AVATAR_RECORD_NOT_FOUND,
    ERROR_CODE_RECORD_COMMIT_FAILED,
    ERROR_CODE_RECORD_CREATE_FAILED,
    ERROR_CODE_RECORD_FETCH_FAILED,
    ERROR_CODE_RECORD_INVALID_FORMAT,
)
from core.utils.time import utc_now_iso

Item = dict[str, Any]

logger = Logger(UTC=True)

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


def _error_code(exc: ClientError) -> str | None:
    return exc.response.get("Error", {}).get("Code")


class DynamoDBAvatarRecords(AvatarRecordRepository):
    """Avatar records in a DynamoDB table keyed by numeric ``entity_id``.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def get_record(self, *, entity_id: int) -> AvatarRecord:
        """Fetch the avatar record of an entity.

        Raises:
            NotFoundError: If no record exists
            RecordStoreError: If the fetch fails or the item is malformed
        """
        logger.debug("Fetching avatar record", extra={"entity_id": entity_id})

        try:
            response = self._db.get_item(key={"entity_id": entity_id})
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"entity_id": entity_id})
            raise RecordStoreError(
                message="Unable to retrieve avatar record",
                error_code=ERROR_CODE_RECORD_FETCH_FAILED,
                details={"entity_id": entity_id},
            ) from exc

        item = response.get("Item")
        if item is None:
            raise NotFoundError(
                message="Avatar record not found",
                error_code=ERROR_CODE_AVATAR_RECORD_NOT_FOUND,
                details={"entity_id": entity_id},
            )

        return self._to_record(item, entity_id=entity_id)

    def commit(self, *, record: AvatarRecord) -> None:
        """Write the record's extension back to its existing item.

        Raises:
            NotFoundError: If the item disappeared since it was read
            RecordStoreError: If the update fails
        """
        updated_at = utc_now_iso()
        logger.debug(
            "Committing avatar record",
            extra={"entity_id": record.entity_id, "file_extension": record.file_extension},
        )

        try:
            self._db.update_item(
                key={"entity_id": record.entity_id},
                updates={"file_extension": record.file_extension, "updated_at": updated_at},
                condition_expression="attribute_exists(entity_id)",
            )
        except ClientError as exc:
            if _error_code(exc) == CONDITIONAL_CHECK_FAILED:
                raise NotFoundError(
                    message="Avatar record not found",
                    error_code=ERROR_CODE_AVATAR_RECORD_NOT_FOUND,
                    details={"entity_id": record.entity_id},
                ) from exc

            logger.error("DynamoDB update_item failed", extra={"entity_id": record.entity_id})
            raise RecordStoreError(
                message="Unable to save avatar record",
                error_code=ERROR_CODE_RECORD_COMMIT_FAILED,
                details={"entity_id": record.entity_id},
            ) from exc

        record.updated_at = updated_at
        logger.info(
            "Avatar record committed",
            extra={"entity_id": record.entity_id, "file_extension": record.file_extension},
        )

    def create_record(self, *, entity_id: int) -> AvatarRecord:
        """Create an empty record; an existing record is returned unchanged."""
        record = AvatarRecord(entity_id=entity_id, updated_at=utc_now_iso())

        try:
            self._db.put_item(
                item=record.model_dump(),
                condition_expression="attribute_not_exists(entity_id)",
            )
        except ClientError as exc:
            if _error_code(exc) == CONDITIONAL_CHECK_FAILED:
                logger.debug("Avatar record already exists", extra={"entity_id": entity_id})
                return self.get_record(entity_id=entity_id)

            logger.error("DynamoDB put_item failed", extra={"entity_id": entity_id})
            raise RecordStoreError(
                message="Unable to create avatar record",
                error_code=ERROR_CODE_RECORD_CREATE_FAILED,
                details={"entity_id": entity_id},
            ) from exc

        logger.info("Avatar record created", extra={"entity_id": entity_id})
        return record

    @staticmethod
    def _to_record(item: Item, *, entity_id: int) -> AvatarRecord:
        # DynamoDB returns numbers as Decimal
        try:
            return AvatarRecord(
                entity_id=int(item["entity_id"]),
                file_extension=item.get("file_extension") or "",
                updated_at=item.get("updated_at"),
            )
        except (KeyError, TypeError, ValueError, PydanticValidationError) as exc:
            logger.error("Malformed avatar record", extra={"entity_id": entity_id})
            raise RecordStoreError(
                message="Invalid avatar record format",
                error_code=ERROR_CODE_RECORD_INVALID_FORMAT,
                details={"entity_id": entity_id},
            ) from exc
