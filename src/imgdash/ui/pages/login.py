"""Login page for imgdash."""

import streamlit as st
import structlog

from imgdash.services.session import get_session_gate
from imgdash.ui.handlers.auth import handle_login, navigate_to

logger = structlog.get_logger()


def render_login_page() -> None:
    """Render the login form. Authenticated visitors go straight to the dashboard."""
    if get_session_gate().is_authenticated:
        navigate_to("dashboard")
        return

    _, col, _ = st.columns([1, 2, 1])

    with col:
        st.markdown("### 🔐 Login")
        st.caption("Enter any name and a 4-digit password.")

        with st.form("login_form"):
            username = st.text_input("Username", placeholder="Guest")
            password = st.text_input("Password", type="password", max_chars=4, placeholder="0000")
            submitted = st.form_submit_button("Login", use_container_width=True, type="primary")

        if submitted:
            if handle_login(username, password):
                st.rerun()
            else:
                st.error("Password must be exactly 4 digits")
