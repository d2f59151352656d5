"""
Ports between the dashboard logic and its collaborators.

The session gate and the upload dashboard depend on these protocols only, so
they can be driven in tests without a browser, a disk or a remote service.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from ..models.upload import UploadRecord


class KeyValueStore(Protocol):
    """Durable string key-value storage for the login session."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``. Missing keys are ignored."""
        ...


@dataclass(frozen=True)
class StoredObject:
    """Handle of a file written to object storage."""

    file_id: str
    name: str
    size: int


class ObjectStore(Protocol):
    """Remote object storage holding the raw image bytes."""

    def store(self, name: str, data: bytes, mime_type: str) -> StoredObject:
        """Write bytes under a newly generated id."""
        ...

    def get_view_url(self, file_id: str) -> str:
        """Publicly retrievable URL of a stored object."""
        ...

    def delete(self, file_id: str) -> None:
        """Remove a stored object."""
        ...


class UploadRecordStore(Protocol):
    """Remote document store holding upload metadata."""

    def list_uploads(self) -> list[UploadRecord]:
        """All upload records, in server order."""
        ...

    def create_upload(self, fields: dict[str, Any]) -> UploadRecord:
        """Persist a record and return it with its server-assigned id."""
        ...
