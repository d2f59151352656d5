"""Upload list, viewer and uploader components."""

from typing import Any

import streamlit as st
import structlog

from imgdash.models.upload import UploadRecord
from imgdash.services.dashboard import UploadDashboard

from .common import render_empty_state

logger = structlog.get_logger(__name__)

UPLOADER_TYPES = ["jpg", "jpeg", "png"]


def render_upload_list(dashboard: UploadDashboard) -> None:
    """
    Render the "Recent Uploads" list in the sidebar.

    Clicking an entry selects it; no request is made since the list already
    holds everything needed for display.
    """
    if not dashboard.uploads:
        render_empty_state("No uploads yet", icon="🗂️")
        return

    selected_id = dashboard.selected.id if dashboard.selected else None

    for record in dashboard.uploads:
        is_selected = record.id == selected_id
        col1, col2 = st.columns([1, 3])

        with col1:
            if record.image_url:
                st.image(record.image_url, width=48)

        with col2:
            if st.button(
                record.file_name or "(unnamed)",
                key=f"upload_{record.id}",
                use_container_width=True,
                type="primary" if is_selected else "secondary",
                help=f"Uploaded {record.get_display_date()}",
            ):
                dashboard.select(record.id)
                logger.debug("upload_selected", record_id=record.id)
                st.rerun()
            st.caption(record.get_display_date())


def render_image_viewer(dashboard: UploadDashboard, record: UploadRecord) -> Any:
    """
    Render the selected image with its header actions.

    Returns:
        The file picked with the "Upload New" uploader, if any
    """
    with st.container(border=True):
        col1, col2 = st.columns([3, 2])

        with col1:
            st.markdown(f"### {record.file_name}")
            st.caption(f"Uploaded on {record.get_display_timestamp()}")

        with col2:
            if st.button("Close", use_container_width=True):
                dashboard.clear_selection()
                st.rerun()

            uploaded_file = render_file_uploader(
                "Uploading..." if dashboard.is_uploading else "Upload New",
                disabled=dashboard.is_uploading,
            )

        st.image(record.image_url, caption=record.file_name, use_container_width=True)

    return uploaded_file


def render_upload_prompt(dashboard: UploadDashboard) -> Any:
    """
    Render the uploader shown when no image is selected.

    Returns:
        The picked file, if any
    """
    st.markdown(
        """
    <div style='text-align: center; padding: 1rem 0; color: #888;'>
        <div style='font-size: 4rem;'>+</div>
    </div>
    """,
        unsafe_allow_html=True,
    )

    return render_file_uploader(
        "Uploading..." if dashboard.is_uploading else "Click to upload image",
        disabled=dashboard.is_uploading,
        help_text="JPG or PNG files only",
    )


def render_file_uploader(label: str, disabled: bool = False, help_text: str | None = None) -> Any:
    """
    Render a single-file image uploader.

    The widget key changes after every processed upload so the next rerun
    starts with an empty uploader instead of submitting the same file again.
    """
    counter = st.session_state.get("uploader_counter", 0)

    return st.file_uploader(
        label,
        type=UPLOADER_TYPES,
        accept_multiple_files=False,
        disabled=disabled,
        help=help_text,
        key=f"image_uploader_{counter}",
    )
