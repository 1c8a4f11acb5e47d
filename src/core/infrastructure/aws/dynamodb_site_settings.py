"""DynamoDB-backed per-site avatar settings."""

from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.avatar import AvatarPolicy
from core.models.errors import SettingsError
from core.repositories.settings_repository import AvatarSettingsProvider
from core.utils.constants import (
    ENV_AVATAR_SETTINGS_TABLE_NAME,
    ERROR_CODE_SETTINGS_FETCH_FAILED,
    ERROR_CODE_SETTINGS_INVALID,
)

logger = Logger(UTC=True)


class DynamoDBSiteSettings(AvatarSettingsProvider):
    """Upload policy of one site, stored as an item keyed by ``site_id``.

    Item attributes: ``max_file_size`` (bytes) and ``allowed_file_types``
    (space separated whitelist, e.g. ``"JPG PNG GIF"``).
    """

    def __init__(
        self,
        site_id: str | None,
        adapter: DynamoDBAdapterProtocol | None = None,
    ) -> None:
        self._site_id = site_id
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter(
            ENV_AVATAR_SETTINGS_TABLE_NAME
        )

    def current_policy(self) -> AvatarPolicy | None:
        """Read the site's policy; None without a site or a settings item."""
        if not self._site_id:
            logger.warning("No site context, avatar uploads are disabled")
            return None

        try:
            response = self._db.get_item(key={"site_id": self._site_id})
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"site_id": self._site_id})
            raise SettingsError(
                message="Unable to read avatar settings",
                error_code=ERROR_CODE_SETTINGS_FETCH_FAILED,
                details={"site_id": self._site_id},
            ) from exc

        item: dict[str, Any] | None = response.get("Item")
        if item is None:
            logger.warning("No avatar settings for site", extra={"site_id": self._site_id})
            return None

        try:
            return AvatarPolicy(
                max_file_size=int(item["max_file_size"]),
                allowed_extensions=str(item.get("allowed_file_types") or ""),
            )
        except (KeyError, TypeError, ValueError, PydanticValidationError) as exc:
            logger.error("Malformed avatar settings", extra={"site_id": self._site_id})
            raise SettingsError(
                message="Invalid avatar settings",
                error_code=ERROR_CODE_SETTINGS_INVALID,
                details={"site_id": self._site_id},
            ) from exc
