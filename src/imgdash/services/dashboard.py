"""
Upload dashboard state machine.

UploadDashboard holds the state behind the dashboard page: the cached list of
upload records, the selected record, the uploading flag and the error banner.
It talks to the remote service only through the ports in ``ports.py`` and has
no Streamlit dependency, so the page module stays a thin renderer.

Upload sequence:
    1. reject anything that is not a JPEG or PNG (declared type only)
    2. store the bytes in object storage
    3. derive the public view URL of the stored object
    4. write the metadata record
    5. prepend the record to the local list and select it

A failure in 2-4 leaves the list untouched and shows the service message. When
step 4 fails the stored object from step 2 is deleted on a best-effort basis.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from ..error_handling import GENERIC_UPLOAD_ERROR, ValidationError, get_user_message
from ..logging_config import get_logger, log_performance, log_user_action
from ..models.upload import IncomingFile, UploadRecord
from .ports import ObjectStore, StoredObject, UploadRecordStore
from .session import SessionGate

logger = get_logger(__name__)

INVALID_FILE_TYPE_MESSAGE = "Please upload only JPG or PNG images"


class DashboardState(Enum):
    """Observable states of the dashboard. Uploading is tracked separately."""

    UNAUTHENTICATED = "unauthenticated"
    LOADING = "authenticated-loading"
    IDLE = "authenticated-idle"
    VIEWING = "authenticated-viewing"


class Navigation(Enum):
    """Where the UI should go after a dashboard operation."""

    LOGIN = "login"
    DASHBOARD = "dashboard"


@dataclass(frozen=True)
class UploadResult:
    """Outcome of one upload attempt."""

    success: bool
    record: UploadRecord | None = None
    error: str | None = None

    @classmethod
    def ok(cls, record: UploadRecord) -> "UploadResult":
        return cls(success=True, record=record)

    @classmethod
    def failed(cls, error: str) -> "UploadResult":
        return cls(success=False, error=error)


def validate_file_type(file: IncomingFile) -> None:
    """
    Reject anything that is not declared as a JPEG or PNG image.

    Raises:
        ValidationError: If the declared MIME type is not accepted
    """
    if not file.is_accepted_type():
        raise ValidationError(
            f"Unsupported file type '{file.mime_type}' for '{file.name}'",
            code="invalid_file_type",
            user_message=INVALID_FILE_TYPE_MESSAGE,
            details={"file_name": file.name, "mime_type": file.mime_type},
        )


def _utc_now() -> datetime:
    return datetime.now(UTC)


class UploadDashboard:
    """State and operations of the upload dashboard for one viewer."""

    def __init__(
        self,
        session_gate: SessionGate,
        object_store: ObjectStore,
        record_store: UploadRecordStore,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if session_gate is None or object_store is None or record_store is None:
            raise ValueError("UploadDashboard requires a session gate, an object store and a record store")

        self.session_gate = session_gate
        self.object_store = object_store
        self.record_store = record_store
        self.clock = clock

        self.uploads: list[UploadRecord] = []
        self.selected: UploadRecord | None = None
        self.is_uploading = False
        self.error = ""
        self.loaded = False
        self._loading = False

    @property
    def state(self) -> DashboardState:
        if not self.session_gate.is_authenticated:
            return DashboardState.UNAUTHENTICATED
        if self._loading:
            return DashboardState.LOADING
        if self.selected is not None:
            return DashboardState.VIEWING
        return DashboardState.IDLE

    def mount(self, refresh: bool = False) -> Navigation:
        """
        Enter the dashboard.

        Unauthenticated viewers are sent to the login page and nothing is
        fetched. Otherwise the upload list is loaded the first time (or again
        when ``refresh`` is set).
        """
        if not self.session_gate.is_authenticated:
            logger.debug("dashboard_mount_redirect", target=Navigation.LOGIN.value)
            return Navigation.LOGIN

        if refresh or not self.loaded:
            self.load_uploads()

        return Navigation.DASHBOARD

    def load_uploads(self) -> None:
        """Replace the local list with the records held by the document store."""
        self._loading = True
        try:
            self.uploads = list(self.record_store.list_uploads())
            logger.info("uploads_loaded", count=len(self.uploads), username=self.session_gate.username)
        except Exception as e:
            # Listing failures are only traced; the list keeps its last contents
            logger.error("uploads_load_failed", error=str(e), exc_info=e)
        finally:
            # Only mount(refresh=True) fetches again after an attempt
            self.loaded = True
            self._loading = False

    def handle_file_upload(self, file: IncomingFile | None) -> UploadResult:
        """
        Validate and upload a file picked by the user.

        Args:
            file: Selected file, or None when the picker was cleared

        Returns:
            UploadResult: The new record on success, the displayed error otherwise
        """
        if file is None:
            return UploadResult.failed("")

        if self.is_uploading:
            logger.warning("upload_rejected_in_progress", file_name=file.name)
            return UploadResult.failed("An upload is already in progress")

        try:
            validate_file_type(file)
        except ValidationError as e:
            self.error = e.user_message
            return UploadResult.failed(self.error)

        self.is_uploading = True
        self.error = ""
        start_time = time.perf_counter()
        username = self.session_gate.username
        stored: StoredObject | None = None

        try:
            stored = self.object_store.store(file.name, file.data, file.mime_type)
            image_url = self.object_store.get_view_url(stored.file_id)

            uploaded_at = self.clock()
            created = self.record_store.create_upload(
                {
                    "imageUrl": image_url,
                    "fileName": file.name,
                    "uploadedAt": uploaded_at.isoformat(),
                    "username": username,
                    "fileId": stored.file_id,
                }
            )

            record = UploadRecord(
                id=created.id,
                image_url=image_url,
                file_name=file.name,
                uploaded_at=created.uploaded_at,
                username=username,
                file_id=stored.file_id,
            )

            self.uploads = [record, *self.uploads]
            self.selected = record

            log_user_action(username, "upload", file_name=file.name, record_id=record.id, size=file.size)
            log_performance("upload", time.perf_counter() - start_time, file_name=file.name)
            return UploadResult.ok(record)

        except Exception as e:
            logger.error("upload_failed", file_name=file.name, error=str(e), exc_info=e)
            if stored is not None:
                self._discard_orphan(stored)
            self.error = get_user_message(e, GENERIC_UPLOAD_ERROR)
            return UploadResult.failed(self.error)

        finally:
            self.is_uploading = False

    def _discard_orphan(self, stored: StoredObject) -> None:
        """Delete an object whose metadata record could not be written."""
        try:
            self.object_store.delete(stored.file_id)
            logger.info("orphaned_file_deleted", file_id=stored.file_id)
        except Exception as e:
            logger.error("orphaned_file_cleanup_failed", file_id=stored.file_id, error=str(e))

    def select(self, upload_id: str) -> UploadRecord | None:
        """Show a record from the list. Unknown ids leave the selection as is."""
        for record in self.uploads:
            if record.id == upload_id:
                self.selected = record
                return record

        logger.debug("select_unknown_upload", upload_id=upload_id)
        return None

    def clear_selection(self) -> None:
        self.selected = None

    def clear_error(self) -> None:
        self.error = ""

    def logout(self) -> Navigation:
        """Log out and drop everything cached for the previous user."""
        self.session_gate.logout()
        self.uploads = []
        self.selected = None
        self.error = ""
        self.loaded = False
        return Navigation.LOGIN
