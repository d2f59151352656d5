"""
Upload models for imgdash.

UploadRecord mirrors one document in the uploads collection. IncomingFile is
what the UI hands over when the user picks a file.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

ACCEPTED_MIME_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})

EPOCH = datetime.fromtimestamp(0, UTC)


@dataclass(frozen=True)
class UploadRecord:
    """
    Metadata describing one stored image.

    Records are created once the upload completes and never change afterwards.
    """

    id: str
    image_url: str
    file_name: str
    uploaded_at: datetime
    username: str
    file_id: str | None = None

    def to_document(self) -> dict[str, Any]:
        """
        Convert to the field layout of the uploads collection.

        Returns:
            Document fields, without the server-assigned id
        """
        return {
            "imageUrl": self.image_url,
            "fileName": self.file_name,
            "uploadedAt": self.uploaded_at.isoformat(),
            "username": self.username,
            "fileId": self.file_id,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "UploadRecord":
        """
        Create an UploadRecord from a document returned by the document store.

        Args:
            document: Document dictionary including the ``$id`` key

        Returns:
            UploadRecord instance
        """
        return cls(
            id=document["$id"],
            image_url=document.get("imageUrl") or "",
            file_name=document.get("fileName") or "",
            uploaded_at=parse_timestamp(document.get("uploadedAt")),
            username=document.get("username") or "",
            file_id=document.get("fileId") or None,
        )

    def get_display_date(self) -> str:
        """Short date for list entries."""
        return self.uploaded_at.strftime("%Y-%m-%d")

    def get_display_timestamp(self) -> str:
        """Date and time for the viewer header."""
        return self.uploaded_at.strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class IncomingFile:
    """A file selected by the user, with its declared MIME type."""

    name: str
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    def is_accepted_type(self) -> bool:
        return self.mime_type in ACCEPTED_MIME_TYPES

    @classmethod
    def from_uploaded_file(cls, uploaded_file: Any) -> "IncomingFile":
        """Build from a Streamlit ``UploadedFile``."""
        return cls(
            name=uploaded_file.name,
            mime_type=uploaded_file.type or "",
            data=uploaded_file.getvalue(),
        )


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp as stored in documents.

    A trailing ``Z`` is accepted and naive values are taken as UTC. Missing or
    unparseable values fall back to the Unix epoch so that malformed documents
    still list.
    """
    parsed = EPOCH
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            parsed = EPOCH

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
