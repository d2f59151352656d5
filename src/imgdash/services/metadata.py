"""Metadata service for upload records kept in the Appwrite database."""

from typing import Any

from appwrite.client import Client
from appwrite.exception import AppwriteException
from appwrite.id import ID
from appwrite.services.databases import Databases

from ..config import BackendSettings, get_backend_settings
from ..error_handling import DatabaseError
from ..logging_config import get_logger
from ..models.upload import UploadRecord
from .backend import create_appwrite_client

logger = get_logger(__name__)


class UploadMetadataService:
    """Reads and writes documents of the uploads collection."""

    def __init__(self, settings: BackendSettings | None = None, client: Client | None = None) -> None:
        self.settings = settings or get_backend_settings()
        self.database_id = self.settings.database_id
        self.collection_id = self.settings.uploads_collection_id
        self.databases = Databases(client or create_appwrite_client(self.settings))

    def list_uploads(self) -> list[UploadRecord]:
        """
        Fetch upload records in the order the server returns them.

        No pagination or filtering is applied, so only the server's default
        page is returned.

        Raises:
            DatabaseError: If the listing fails
        """
        try:
            response = self.databases.list_documents(self.database_id, self.collection_id)
        except AppwriteException as e:
            raise DatabaseError(
                f"Failed to list uploads: {e.message}",
                user_message=e.message or None,
                details={"database_id": self.database_id, "collection_id": self.collection_id, "status_code": e.code},
                original_exception=e,
            ) from e

        records = [UploadRecord.from_document(document) for document in response.get("documents", [])]
        logger.debug("uploads_listed", count=len(records), total=response.get("total"))
        return records

    def create_upload(self, fields: dict[str, Any]) -> UploadRecord:
        """
        Persist a new upload record.

        Args:
            fields: Document fields (imageUrl, fileName, uploadedAt, username, fileId)

        Returns:
            UploadRecord: The stored record carrying its server-assigned id

        Raises:
            DatabaseError: If the write fails
        """
        try:
            document = self.databases.create_document(
                self.database_id,
                self.collection_id,
                ID.unique(),
                fields,
            )
        except AppwriteException as e:
            raise DatabaseError(
                f"Failed to save upload metadata for '{fields.get('fileName')}': {e.message}",
                user_message=e.message or None,
                details={"database_id": self.database_id, "collection_id": self.collection_id, "status_code": e.code},
                original_exception=e,
            ) from e

        record = UploadRecord.from_document({**fields, **document})
        logger.info("upload_record_created", record_id=record.id, file_name=record.file_name)
        return record


# Global metadata service instance
_metadata_service: UploadMetadataService | None = None


def get_metadata_service() -> UploadMetadataService:
    """Get the global metadata service instance."""
    global _metadata_service

    if _metadata_service is None:
        _metadata_service = UploadMetadataService()

    return _metadata_service
