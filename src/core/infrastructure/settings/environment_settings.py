"""Avatar settings read from environment variables."""

import os

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.aws.dynamodb_site_settings import DynamoDBSiteSettings
from core.models.avatar import AvatarPolicy
from core.models.errors import SettingsError
from core.repositories.settings_repository import AvatarSettingsProvider
from core.utils.constants import (
    DEFAULT_MAX_FILE_SIZE,
    ENV_AVATAR_ALLOWED_FILE_TYPES,
    ENV_AVATAR_MAX_FILE_SIZE,
    ENV_AVATAR_SETTINGS_TABLE_NAME,
    ERROR_CODE_SETTINGS_INVALID,
)

logger = Logger(UTC=True)


class EnvironmentAvatarSettings(AvatarSettingsProvider):
    """Policy from ``AVATAR_ALLOWED_FILE_TYPES`` and ``AVATAR_MAX_FILE_SIZE``.

    The variables are re-read on every call. An unset whitelist means no
    policy, which disables uploads.
    """

    def current_policy(self) -> AvatarPolicy | None:
        whitelist = os.getenv(ENV_AVATAR_ALLOWED_FILE_TYPES)
        if whitelist is None:
            logger.warning(f"{ENV_AVATAR_ALLOWED_FILE_TYPES} is not set, avatar uploads are disabled")
            return None

        raw_max_size = os.getenv(ENV_AVATAR_MAX_FILE_SIZE) or str(DEFAULT_MAX_FILE_SIZE)

        try:
            return AvatarPolicy(
                max_file_size=int(raw_max_size),
                allowed_extensions=whitelist,
            )
        except (ValueError, PydanticValidationError) as exc:
            raise SettingsError(
                message="Invalid avatar settings in environment",
                error_code=ERROR_CODE_SETTINGS_INVALID,
                details={ENV_AVATAR_MAX_FILE_SIZE: raw_max_size},
            ) from exc


def build_settings_provider(site_id: str | None = None) -> AvatarSettingsProvider:
    """Per-site DynamoDB settings when a settings table is configured."""
    if os.getenv(ENV_AVATAR_SETTINGS_TABLE_NAME):
        return DynamoDBSiteSettings(site_id)

    return EnvironmentAvatarSettings()
