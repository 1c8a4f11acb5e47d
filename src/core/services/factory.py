"""Wiring of the avatar store to its AWS collaborators."""

from core.infrastructure.aws.dynamodb_avatar_records import DynamoDBAvatarRecords
from core.infrastructure.aws.s3_avatar_storage import S3AvatarStorage
from core.infrastructure.settings.environment_settings import build_settings_provider
from core.services.avatar_store import AvatarStore


def build_avatar_store(site_id: str | None = None) -> AvatarStore:
    return AvatarStore(
        storage=S3AvatarStorage(),
        records=DynamoDBAvatarRecords(),
        settings=build_settings_provider(site_id),
    )
