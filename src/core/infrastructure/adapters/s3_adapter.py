"""Thin adapter over the boto3 S3 client for the avatar bucket."""

import os
from collections.abc import Mapping
from typing import Any, BinaryIO, Protocol

import boto3

from core.utils.constants import (
    ENV_AVATAR_S3_BUCKET_NAME,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
)


class S3AdapterProtocol(Protocol):
    """Object operations the avatar storage needs."""

    def put_object(self, *, key: str, body: bytes | BinaryIO, content_type: str) -> None: ...

    def head_object(self, *, key: str) -> Mapping[str, Any]: ...

    def delete_object(self, *, key: str) -> None: ...

    def presigned_get_url(self, *, key: str, expires_in: int) -> str: ...


class S3Adapter:
    """Bucket-bound S3 operations.

    No error handling here: botocore ``ClientError`` propagates and
    ``S3AvatarStorage`` translates it into domain errors.
    """

    def __init__(self) -> None:
        bucket_name = os.getenv(ENV_AVATAR_S3_BUCKET_NAME)
        if not bucket_name:
            raise RuntimeError(f"{ENV_AVATAR_S3_BUCKET_NAME} environment variable is not set")

        self.bucket = bucket_name
        # endpoint_url is only set for LocalStack
        self._client = boto3.client(
            "s3",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=os.getenv(ENV_AWS_REGION),
        )

    def put_object(self, *, key: str, body: bytes | BinaryIO, content_type: str) -> None:
        """Write ``body`` under ``key``; an existing object is replaced in one step."""
        self._client.put_object(Bucket=self.bucket, Key=key, Body=body, ContentType=content_type)

    def head_object(self, *, key: str) -> Mapping[str, Any]:
        """Object metadata. A missing key raises a ClientError with code ``404``."""
        return self._client.head_object(Bucket=self.bucket, Key=key)

    def delete_object(self, *, key: str) -> None:
        # S3 reports success for keys that do not exist
        self._client.delete_object(Bucket=self.bucket, Key=key)

    def presigned_get_url(self, *, key: str, expires_in: int) -> str:
        url: str = self._client.generate_presigned_url(
            ClientMethod="get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=expires_in,
        )
        return url
