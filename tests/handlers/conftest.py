import base64
import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture
def avatar_env(monkeypatch, avatar_table, s3_bucket):
    """Environment-configured policy plus mocked bucket and records table."""
    monkeypatch.setenv("AVATAR_ALLOWED_FILE_TYPES", "JPG PNG GIF")
    monkeypatch.setenv("AVATAR_MAX_FILE_SIZE", "1024")
    monkeypatch.setenv("AVATAR_PUBLIC_BASE_URL", "https://cdn.example.com")
    return monkeypatch


@pytest.fixture
def upload_event(sample_png_binary) -> Callable[..., dict[str, Any]]:
    def _event(
        entity_id: Any = "7",
        *,
        file_name: str = "portrait.png",
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        payload = content if content is not None else sample_png_binary
        return {
            "httpMethod": "PUT",
            "path": f"/v1/avatars/{entity_id}",
            "pathParameters": {"entity_id": entity_id},
            "headers": headers or {"Content-Type": "application/json"},
            "body": json.dumps(
                {"file": base64.b64encode(payload).decode("utf-8"), "file_name": file_name}
            ),
        }

    return _event


@pytest.fixture
def entity_event() -> Callable[..., dict[str, Any]]:
    def _event(entity_id: Any = "7", method: str = "GET") -> dict[str, Any]:
        return {
            "httpMethod": method,
            "path": f"/v1/avatars/{entity_id}",
            "pathParameters": {"entity_id": entity_id},
            "headers": {},
        }

    return _event
