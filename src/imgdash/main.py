"""
Main Streamlit application for imgdash.

Run with ``streamlit run src/imgdash/main.py``.
"""

import streamlit as st

from imgdash.logging_config import configure_structured_logging, get_logger
from imgdash.ui.components.common import render_error_message, render_footer, render_header
from imgdash.ui.pages.dashboard import render_dashboard_page
from imgdash.ui.pages.login import render_login_page

configure_structured_logging()
logger = get_logger(__name__)

PAGES = {
    "login": render_login_page,
    "dashboard": render_dashboard_page,
}


def initialize_session_state() -> None:
    """Initialize session state variables."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "dashboard"

    if "uploader_counter" not in st.session_state:
        st.session_state.uploader_counter = 0


def render_main_content() -> None:
    """Render the current page; unknown pages fall back to the dashboard."""
    page = PAGES.get(st.session_state.current_page)
    if page is None:
        logger.warning("unknown_page", page=st.session_state.current_page)
        st.session_state.current_page = "dashboard"
        page = render_dashboard_page

    page()


def main() -> None:
    """Main application entry point."""
    st.set_page_config(
        page_title="imgdash - Image Uploader",
        page_icon="🖼️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()

    try:
        render_header()
        render_main_content()
        render_footer()
    except Exception as e:
        logger.error("critical_application_error", error=str(e), exc_info=e)
        render_error_message("Something went wrong while rendering the page.", details=str(e))


if __name__ == "__main__":
    main()
