"""Dashboard handlers bridging Streamlit widgets and UploadDashboard."""

from typing import Any

import streamlit as st
import structlog

from imgdash.models.upload import IncomingFile
from imgdash.services.dashboard import UploadDashboard, UploadResult
from imgdash.services.metadata import get_metadata_service
from imgdash.services.session import get_session_gate
from imgdash.services.storage import get_storage_service

logger = structlog.get_logger()


def create_dashboard() -> UploadDashboard:
    """Wire a dashboard to the process-wide session gate and remote services."""
    return UploadDashboard(
        session_gate=get_session_gate(),
        object_store=get_storage_service(),
        record_store=get_metadata_service(),
    )


def get_dashboard() -> UploadDashboard:
    """Get the dashboard of the current browser session, creating it if needed."""
    if st.session_state.get("dashboard") is None:
        st.session_state.dashboard = create_dashboard()
    return st.session_state.dashboard


def process_uploaded_file(dashboard: UploadDashboard, uploaded_file: Any) -> UploadResult | None:
    """
    Hand a file from the Streamlit uploader to the dashboard.

    Args:
        dashboard: Dashboard of the current session
        uploaded_file: Streamlit ``UploadedFile`` or None

    Returns:
        UploadResult, or None when no file was picked
    """
    if uploaded_file is None:
        return None

    incoming = IncomingFile.from_uploaded_file(uploaded_file)
    logger.info("upload_submitted", file_name=incoming.name, mime_type=incoming.mime_type, size=incoming.size)

    with st.spinner("Uploading..."):
        result = dashboard.handle_file_upload(incoming)

    # Fresh uploader widget on the next run
    st.session_state.uploader_counter = st.session_state.get("uploader_counter", 0) + 1
    return result
