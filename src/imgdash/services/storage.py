"""Storage service for uploaded image files."""

from urllib.parse import quote

from appwrite.client import Client
from appwrite.exception import AppwriteException
from appwrite.id import ID
from appwrite.input_file import InputFile
from appwrite.services.storage import Storage

from ..config import BackendSettings, get_backend_settings
from ..error_handling import StorageError
from ..logging_config import get_logger
from .backend import create_appwrite_client
from .ports import StoredObject

logger = get_logger(__name__)


class ObjectStorageService:
    """Service for the image bucket of the Appwrite project."""

    def __init__(self, settings: BackendSettings | None = None, client: Client | None = None) -> None:
        """
        Initialize the storage service.

        Args:
            settings: Backend settings (defaults to the configured ones)
            client: Appwrite client (defaults to one built from ``settings``)
        """
        self.settings = settings or get_backend_settings()
        self.bucket_id = self.settings.bucket_id
        self.storage = Storage(client or create_appwrite_client(self.settings))

    def store(self, name: str, data: bytes, mime_type: str) -> StoredObject:
        """
        Upload file bytes under a newly generated id.

        Args:
            name: Original file name
            data: Raw file contents
            mime_type: Declared MIME type

        Returns:
            StoredObject: Handle of the stored file

        Raises:
            StorageError: If the upload fails
        """
        try:
            result = self.storage.create_file(
                self.bucket_id,
                ID.unique(),
                InputFile.from_bytes(data, filename=name, mime_type=mime_type),
            )
        except AppwriteException as e:
            raise StorageError(
                f"Failed to store '{name}': {e.message}",
                user_message=e.message or None,
                details={"file_name": name, "bucket_id": self.bucket_id, "status_code": e.code},
                original_exception=e,
            ) from e
        except Exception as e:
            raise StorageError(
                f"Unexpected error storing '{name}': {e}",
                user_message=str(e) or None,
                details={"file_name": name, "bucket_id": self.bucket_id},
                original_exception=e,
            ) from e

        stored = StoredObject(file_id=result["$id"], name=name, size=len(data))
        logger.info("file_stored", file_id=stored.file_id, file_name=name, size=stored.size)
        return stored

    def get_view_url(self, file_id: str) -> str:
        """
        Build the public view URL for a stored file.

        No request is made; the URL is only retrievable when the bucket grants
        read access to the viewer.
        """
        endpoint = self.settings.endpoint.rstrip("/")
        return (
            f"{endpoint}/storage/buckets/{quote(self.bucket_id, safe='')}"
            f"/files/{quote(file_id, safe='')}/view?project={quote(self.settings.project_id, safe='')}"
        )

    def delete(self, file_id: str) -> None:
        """
        Delete a stored file.

        Raises:
            StorageError: If deletion fails
        """
        try:
            self.storage.delete_file(self.bucket_id, file_id)
        except AppwriteException as e:
            raise StorageError(
                f"Failed to delete file '{file_id}': {e.message}",
                user_message=e.message or None,
                details={"file_id": file_id, "bucket_id": self.bucket_id, "status_code": e.code},
                original_exception=e,
            ) from e

        logger.info("file_deleted", file_id=file_id)


# Global storage service instance
_storage_service: ObjectStorageService | None = None


def get_storage_service() -> ObjectStorageService:
    """Get the global storage service instance."""
    global _storage_service

    if _storage_service is None:
        _storage_service = ObjectStorageService()

    return _storage_service
