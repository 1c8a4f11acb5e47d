from core.infrastructure.aws.dynamodb_avatar_records import DynamoDBAvatarRecords
from core.infrastructure.aws.dynamodb_site_settings import DynamoDBSiteSettings
from core.infrastructure.aws.s3_avatar_storage import S3AvatarStorage
from core.infrastructure.settings.environment_settings import EnvironmentAvatarSettings
from core.services.factory import build_avatar_store


def test_builds_store_with_aws_backends(aws_mock) -> None:
    store = build_avatar_store()

    assert isinstance(store.storage, S3AvatarStorage)
    assert isinstance(store.records, DynamoDBAvatarRecords)
    assert isinstance(store.settings, EnvironmentAvatarSettings)


def test_uses_site_settings_when_table_configured(settings_table) -> None:
    store = build_avatar_store("main")

    assert isinstance(store.settings, DynamoDBSiteSettings)
