"""Dashboard page for imgdash."""

import streamlit as st
import structlog

from imgdash.config import missing_backend_settings
from imgdash.services.dashboard import Navigation, UploadDashboard
from imgdash.ui.components.common import render_error_message
from imgdash.ui.components.uploads import render_image_viewer, render_upload_list, render_upload_prompt
from imgdash.ui.handlers.auth import handle_logout, navigate_to
from imgdash.ui.handlers.dashboard import get_dashboard, process_uploaded_file

logger = structlog.get_logger(__name__)


def render_dashboard_page() -> None:
    """Render the upload list sidebar and the viewer/uploader area."""
    dashboard = get_dashboard()

    if dashboard.mount() is Navigation.LOGIN:
        navigate_to("login")
        return

    _render_sidebar(dashboard)

    missing = missing_backend_settings()
    if missing:
        st.warning(f"Backend is not fully configured. Missing: {', '.join(missing)}")

    if dashboard.error:
        render_error_message(dashboard.error)

    if dashboard.selected is None:
        uploaded_file = render_upload_prompt(dashboard)
    else:
        uploaded_file = render_image_viewer(dashboard, dashboard.selected)

    if uploaded_file is not None:
        process_uploaded_file(dashboard, uploaded_file)
        st.rerun()


def _render_sidebar(dashboard: UploadDashboard) -> None:
    with st.sidebar:
        col1, col2 = st.columns([2, 1])
        with col1:
            st.markdown("### Recent Uploads")
        with col2:
            if st.button("Logout", use_container_width=True):
                handle_logout()

        st.caption(f"Logged in as: {dashboard.session_gate.username}")

        if st.button("🔄 Refresh", use_container_width=True):
            dashboard.mount(refresh=True)
            st.rerun()

        st.divider()
        render_upload_list(dashboard)
