"""In-memory collaborators for AvatarStore tests."""

from typing import BinaryIO

import pytest

from core.models.avatar import AvatarPolicy, AvatarRecord
from core.models.errors import NotFoundError
from core.repositories.record_repository import AvatarRecordRepository
from core.repositories.settings_repository import AvatarSettingsProvider
from core.repositories.storage_repository import AvatarStorageRepository
from core.services.avatar_store import AvatarStore


class InMemoryStorage(AvatarStorageRepository):
    """Dict-backed storage that records every call in order."""

    def __init__(self, *, atomic_overwrite: bool = False) -> None:
        self.atomic_overwrite = atomic_overwrite
        self.files: dict[str, bytes] = {}
        self.folders: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.delete_errors: dict[str, Exception] = {}

    @property
    def supports_atomic_overwrite(self) -> bool:
        return self.atomic_overwrite

    def create_folder(self, *, path: str) -> None:
        self.calls.append(("create_folder", path))
        self.folders.add(path)

    def save_stream(self, *, path: str, stream: BinaryIO) -> None:
        self.calls.append(("save_stream", path))
        self.files[path] = stream.read()

    def delete_file(self, *, path: str) -> None:
        self.calls.append(("delete_file", path))
        if path in self.delete_errors:
            raise self.delete_errors[path]
        if path not in self.files:
            raise NotFoundError(message="Avatar file not found", details={"path": path})
        del self.files[path]

    def get_public_url(self, *, path: str) -> str:
        return f"https://cdn.example.com/{path}"


class InMemoryRecords(AvatarRecordRepository):
    """Records keyed by entity id; get_record hands out detached copies."""

    def __init__(self) -> None:
        self.extensions: dict[int, str] = {}
        self.commits: list[AvatarRecord] = []

    def get_record(self, *, entity_id: int) -> AvatarRecord:
        if entity_id not in self.extensions:
            raise NotFoundError(message="Avatar record not found", details={"entity_id": entity_id})
        return AvatarRecord(entity_id=entity_id, file_extension=self.extensions[entity_id])

    def commit(self, *, record: AvatarRecord) -> None:
        self.extensions[record.entity_id] = record.file_extension
        self.commits.append(record.model_copy())

    def create_record(self, *, entity_id: int) -> AvatarRecord:
        self.extensions.setdefault(entity_id, "")
        return self.get_record(entity_id=entity_id)


class StaticSettings(AvatarSettingsProvider):
    def __init__(self, policy: AvatarPolicy | None) -> None:
        self.policy = policy
        self.reads = 0

    def current_policy(self) -> AvatarPolicy | None:
        self.reads += 1
        return self.policy


@pytest.fixture
def policy() -> AvatarPolicy:
    return AvatarPolicy(max_file_size=102400, allowed_extensions="JPG PNG GIF")


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def atomic_storage() -> InMemoryStorage:
    return InMemoryStorage(atomic_overwrite=True)


@pytest.fixture
def records() -> InMemoryRecords:
    repo = InMemoryRecords()
    repo.create_record(entity_id=7)
    return repo


@pytest.fixture
def settings(policy) -> StaticSettings:
    return StaticSettings(policy)


@pytest.fixture
def store(storage, records, settings) -> AvatarStore:
    return AvatarStore(storage=storage, records=records, settings=settings)
