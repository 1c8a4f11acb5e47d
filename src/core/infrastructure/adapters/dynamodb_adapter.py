"""Thin adapter over a boto3 DynamoDB table."""

import os
from typing import Any, Protocol

import boto3

from core.utils.constants import (
    ENV_AVATAR_TABLE_NAME,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
)

Item = dict[str, Any]


class DynamoDBAdapterProtocol(Protocol):
    """Table operations the avatar records and site settings need."""

    def put_item(self, *, item: Item, condition_expression: str | None = None) -> Item: ...

    def get_item(self, *, key: Item) -> Item: ...

    def update_item(
        self,
        *,
        key: Item,
        updates: Item,
        condition_expression: str | None = None,
    ) -> Item: ...


class DynamoDBAdapter:
    """Single-table DynamoDB operations.

    The table name is read from the environment variable given at
    construction. Errors are not handled here; botocore ``ClientError``
    reaches the domain implementation unchanged.
    """

    def __init__(self, table_env_var: str = ENV_AVATAR_TABLE_NAME) -> None:
        table_name = os.getenv(table_env_var)
        if not table_name:
            raise RuntimeError(f"{table_env_var} environment variable is not set")

        dynamodb = boto3.resource(
            "dynamodb",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=os.getenv(ENV_AWS_REGION),
        )
        self.table = dynamodb.Table(table_name)

    def put_item(self, *, item: Item, condition_expression: str | None = None) -> Item:
        kwargs: Item = {"Item": item}
        if condition_expression:
            kwargs["ConditionExpression"] = condition_expression

        return self.table.put_item(**kwargs)

    def get_item(self, *, key: Item) -> Item:
        return self.table.get_item(Key=key)

    def update_item(
        self,
        *,
        key: Item,
        updates: Item,
        condition_expression: str | None = None,
    ) -> Item:
        """SET every attribute in ``updates`` on the item at ``key``.

        Attribute names go through placeholders (``#f0``, ``#f1``...) so
        reserved words need no special handling.
        """
        names = {f"#f{i}": field for i, field in enumerate(updates)}
        values = {f":v{i}": value for i, value in enumerate(updates.values())}
        assignments = ", ".join(f"#f{i} = :v{i}" for i in range(len(updates)))

        kwargs: Item = {
            "Key": key,
            "UpdateExpression": f"SET {assignments}",
            "ExpressionAttributeNames": names,
            "ExpressionAttributeValues": values,
        }
        if condition_expression:
            kwargs["ConditionExpression"] = condition_expression

        return self.table.update_item(**kwargs)
