"""
Pytest configuration and fixtures for imgdash tests.
"""

from datetime import UTC, datetime
from typing import Any

import pytest

from imgdash.config import get_config
from imgdash.models.upload import IncomingFile, UploadRecord
from imgdash.services.persistence import InMemoryKeyValueStore
from imgdash.services.ports import StoredObject
from imgdash.services.session import SessionGate, reset_session_gate

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 0, tzinfo=UTC)


class FakeObjectStore:
    """In-memory object store recording every call."""

    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.deleted: list[str] = []
        self.store_error: Exception | None = None
        self.delete_error: Exception | None = None
        self._counter = 0

    def store(self, name: str, data: bytes, mime_type: str) -> StoredObject:
        if self.store_error is not None:
            raise self.store_error
        self._counter += 1
        file_id = f"file-{self._counter}"
        self.objects[file_id] = data
        return StoredObject(file_id=file_id, name=name, size=len(data))

    def get_view_url(self, file_id: str) -> str:
        return f"https://cloud.example.com/v1/storage/buckets/images/files/{file_id}/view?project=test-project"

    def delete(self, file_id: str) -> None:
        if self.delete_error is not None:
            raise self.delete_error
        self.deleted.append(file_id)
        self.objects.pop(file_id, None)


class FakeRecordStore:
    """In-memory document store for upload records."""

    def __init__(self, records: list[UploadRecord] | None = None) -> None:
        self.records = list(records or [])
        self.created: list[dict[str, Any]] = []
        self.list_calls = 0
        self.list_error: Exception | None = None
        self.create_error: Exception | None = None

    def list_uploads(self) -> list[UploadRecord]:
        self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return list(self.records)

    def create_upload(self, fields: dict[str, Any]) -> UploadRecord:
        if self.create_error is not None:
            raise self.create_error
        self.created.append(fields)
        record = UploadRecord.from_document({"$id": f"doc-{len(self.created)}", **fields})
        self.records.append(record)
        return record


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Set up test environment variables and reset global state."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("APPWRITE_ENDPOINT", "https://cloud.example.com/v1")
    monkeypatch.setenv("APPWRITE_PROJECT_ID", "test-project")
    monkeypatch.setenv("APPWRITE_DATABASE_ID", "test-database")
    monkeypatch.setenv("APPWRITE_UPLOADS_COLLECTION_ID", "uploads")
    monkeypatch.setenv("APPWRITE_BUCKET_ID", "images")
    monkeypatch.delenv("APPWRITE_API_KEY", raising=False)
    monkeypatch.setenv("SESSION_STORE_PATH", str(tmp_path / "session.json"))

    get_config().clear_cache()
    reset_session_gate()
    yield
    get_config().clear_cache()
    reset_session_gate()


@pytest.fixture
def sample_png_data() -> bytes:
    """Minimal 1x1 PNG image."""
    return bytes.fromhex(
        "89504e470d0a1a0a0000000d49484452000000010000000108020000009077"
        "53de0000000c4944415408d763f80000000100010000000049454e44ae426082"
    )


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def session_gate(kv_store: InMemoryKeyValueStore) -> SessionGate:
    """Unauthenticated gate over an in-memory store."""
    return SessionGate(kv_store)


@pytest.fixture
def logged_in_gate(kv_store: InMemoryKeyValueStore) -> SessionGate:
    """Gate with 'alice' logged in."""
    gate = SessionGate(kv_store)
    assert gate.login("alice", "1234")
    return gate


@pytest.fixture
def object_store() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture
def record_store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def png_file(sample_png_data: bytes) -> IncomingFile:
    return IncomingFile(name="photo.png", mime_type="image/png", data=sample_png_data)


@pytest.fixture
def existing_record() -> UploadRecord:
    return UploadRecord(
        id="doc-existing",
        image_url="https://cloud.example.com/v1/storage/buckets/images/files/old/view?project=test-project",
        file_name="old.jpg",
        uploaded_at=datetime(2024, 1, 1, tzinfo=UTC),
        username="bob",
        file_id="old",
    )
