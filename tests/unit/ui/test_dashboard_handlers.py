"""Tests for dashboard handlers."""

from unittest.mock import MagicMock, patch

from imgdash.services.dashboard import UploadDashboard
from imgdash.ui.handlers.dashboard import create_dashboard, get_dashboard, process_uploaded_file


def make_uploaded_file(name: str, mime_type: str, data: bytes) -> MagicMock:
    uploaded_file = MagicMock()
    uploaded_file.name = name
    uploaded_file.type = mime_type
    uploaded_file.getvalue.return_value = data
    return uploaded_file


class TestDashboardWiring:
    """Test dashboard creation."""

    @patch("imgdash.ui.handlers.dashboard.get_metadata_service")
    @patch("imgdash.ui.handlers.dashboard.get_storage_service")
    def test_create_dashboard(self, mock_get_storage, mock_get_metadata, logged_in_gate):
        with patch("imgdash.ui.handlers.dashboard.get_session_gate", return_value=logged_in_gate):
            dashboard = create_dashboard()

        assert isinstance(dashboard, UploadDashboard)
        assert dashboard.session_gate is logged_in_gate
        assert dashboard.object_store is mock_get_storage.return_value
        assert dashboard.record_store is mock_get_metadata.return_value

    @patch("imgdash.ui.handlers.dashboard.create_dashboard")
    def test_get_dashboard_reuses_session_instance(self, mock_create, session_state):
        first = get_dashboard()
        second = get_dashboard()

        assert first is second
        mock_create.assert_called_once()
        assert session_state.dashboard is first


class TestProcessUploadedFile:
    """Test handing Streamlit uploads to the dashboard."""

    def test_no_file(self, session_state):
        dashboard = MagicMock()

        assert process_uploaded_file(dashboard, None) is None

        dashboard.handle_file_upload.assert_not_called()

    @patch("imgdash.ui.handlers.dashboard.st.spinner")
    def test_valid_file_uploaded(self, mock_spinner, session_state, logged_in_gate, object_store, record_store):
        dashboard = UploadDashboard(logged_in_gate, object_store, record_store)

        result = process_uploaded_file(dashboard, make_uploaded_file("cat.jpg", "image/jpeg", b"\xff\xd8"))

        assert result.success is True
        assert dashboard.uploads[0].file_name == "cat.jpg"
        assert session_state.uploader_counter == 1

    @patch("imgdash.ui.handlers.dashboard.st.spinner")
    def test_invalid_file_rejected(self, mock_spinner, session_state, logged_in_gate, object_store, record_store):
        dashboard = UploadDashboard(logged_in_gate, object_store, record_store)
        session_state.uploader_counter = 3

        result = process_uploaded_file(dashboard, make_uploaded_file("doc.pdf", "application/pdf", b"%PDF"))

        assert result.success is False
        assert dashboard.error == "Please upload only JPG or PNG images"
        assert dashboard.uploads == []
        assert session_state.uploader_counter == 4
