"""Authentication handlers for imgdash."""

import streamlit as st
import structlog

from imgdash.services.session import get_session_gate

logger = structlog.get_logger()


def handle_login(username: str, password: str) -> bool:
    """
    Submit the login form to the session gate.

    Returns:
        bool: True if the gate accepted the credentials
    """
    if not get_session_gate().login(username, password):
        return False

    # A new user must not see the previous user's cached dashboard
    st.session_state.pop("dashboard", None)
    st.session_state.current_page = "dashboard"
    return True


def require_authentication() -> bool:
    """
    Redirect to the login page when nobody is logged in.

    Returns:
        bool: True if authenticated, False otherwise
    """
    if get_session_gate().is_authenticated:
        return True

    logger.debug("authentication_required_redirect")
    navigate_to("login")
    return False


def handle_logout() -> None:
    """Log out from the dashboard and return to the login page."""
    dashboard = st.session_state.get("dashboard")
    if dashboard is not None:
        dashboard.logout()
    else:
        get_session_gate().logout()

    st.session_state.pop("dashboard", None)
    navigate_to("login")


def navigate_to(page: str) -> None:
    """Switch the current page and rerun the script."""
    if st.session_state.get("current_page") != page:
        logger.info("page_navigation", from_page=st.session_state.get("current_page"), to_page=page)
    st.session_state.current_page = page
    st.rerun()
