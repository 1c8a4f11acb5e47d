"""
Pytest configuration and fixtures for avatar service tests.
Provides AWS mocking, DynamoDB and S3 fixtures with proper cleanup.
"""

import base64
import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["AWS_SECURITY_TOKEN"] = "testing"
os.environ["AWS_SESSION_TOKEN"] = "testing"
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AVATAR_S3_BUCKET_NAME", "test-avatars")
os.environ.setdefault("AVATAR_TABLE_NAME", "test-avatar-records")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.pop("AWS_ENDPOINT_URL", None)
os.environ.pop("AVATAR_SETTINGS_TABLE_NAME", None)
os.environ.pop("AVATAR_PUBLIC_BASE_URL", None)

SETTINGS_TABLE_NAME = "test-avatar-settings"


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def avatar_table(dynamodb_resource):
    """Avatar records table keyed by numeric entity_id."""
    table = dynamodb_resource.create_table(
        TableName=os.getenv("AVATAR_TABLE_NAME"),
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "entity_id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "entity_id", "AttributeType": "N"}],
    )
    table.wait_until_exists()
    return table


@pytest.fixture(scope="function")
def settings_table(dynamodb_resource, monkeypatch):
    """Per-site settings table; also points the service at it."""
    monkeypatch.setenv("AVATAR_SETTINGS_TABLE_NAME", SETTINGS_TABLE_NAME)

    table = dynamodb_resource.create_table(
        TableName=SETTINGS_TABLE_NAME,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "site_id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "site_id", "AttributeType": "S"}],
    )
    table.wait_until_exists()
    return table


@pytest.fixture
def avatar_put_record(avatar_table) -> Callable[..., dict[str, Any]]:
    """
    Helper to insert an avatar record.

    Usage:
        avatar_put_record(7)            # no avatar yet
        avatar_put_record(7, "PNG")     # avatar stored as Avatars/7.PNG
    """

    def _put(entity_id: int, file_extension: str = "") -> dict[str, Any]:
        item = {"entity_id": entity_id, "file_extension": file_extension}
        avatar_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def avatar_get_record(avatar_table) -> Callable[[int], dict[str, Any] | None]:
    def _get(entity_id: int) -> dict[str, Any] | None:
        response: dict[str, Any] = avatar_table.get_item(Key={"entity_id": entity_id})
        return response.get("Item")

    return _get


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """Create the avatar bucket inside the moto context."""
    s3_client.create_bucket(Bucket=os.getenv("AVATAR_S3_BUCKET_NAME"))
    return s3_client


@pytest.fixture
def s3_put_object(s3_bucket) -> Callable[..., dict[str, Any]]:
    """
    Helper to upload an object to S3.

    Usage:
        s3_put_object("Avatars/7.PNG", image_bytes)
    """

    def _put(key: str, body: bytes, content_type: str = "application/octet-stream"):
        return s3_bucket.put_object(
            Bucket=os.getenv("AVATAR_S3_BUCKET_NAME"),
            Key=key,
            Body=body,
            ContentType=content_type,
        )

    return _put


@pytest.fixture
def s3_get_object(s3_bucket) -> Callable[[str], dict[str, Any]]:
    """Helper returning ``{"body": bytes, "content_type": str}`` for a key."""

    def _get(key: str) -> dict[str, Any]:
        response = s3_bucket.get_object(Bucket=os.getenv("AVATAR_S3_BUCKET_NAME"), Key=key)
        return {"body": response["Body"].read(), "content_type": response["ContentType"]}

    return _get


@pytest.fixture
def s3_object_exists(s3_bucket) -> Callable[[str], bool]:
    def _exists(key: str) -> bool:
        try:
            s3_bucket.head_object(Bucket=os.getenv("AVATAR_S3_BUCKET_NAME"), Key=key)
        except ClientError as e:
            if e.response["Error"]["Code"] in ("404", "NoSuchKey"):
                return False
            raise
        return True

    return _exists


@pytest.fixture
def sample_png_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)
