"""Reusable UI components for imgdash."""

import streamlit as st
import structlog

from imgdash import __version__

logger = structlog.get_logger()


def render_header(title: str = "Image Uploader") -> None:
    """Render the page title bar."""
    st.markdown(f"# 🖼️ {title}")
    st.divider()


def render_empty_state(title: str, description: str = "", icon: str = "📭") -> None:
    """
    Render a centered empty state message.

    Args:
        title: Main title for the empty state
        description: Description text
        icon: Emoji icon to display
    """
    st.markdown(
        f"""
    <div style='text-align: center; padding: 2rem 0;'>
        <div style='font-size: 3rem; margin-bottom: 0.5rem;'>{icon}</div>
        <h4 style='color: #666; margin-bottom: 0.5rem;'>{title}</h4>
        <p style='color: #888;'>{description}</p>
    </div>
    """,
        unsafe_allow_html=True,
    )


def render_error_message(message: str, details: str | None = None) -> None:
    """
    Render a standardized error banner.

    Args:
        message: Main error message
        details: Additional error details (optional)
    """
    st.error(message)

    if details:
        with st.expander("🔍 Error details"):
            st.code(details)


def render_footer() -> None:
    """Render the application footer."""
    st.divider()
    st.markdown(
        f"""
    <div style='text-align: center; color: #666; font-size: 0.8em;'>
        <strong>imgdash v{__version__}</strong>
    </div>
    """,
        unsafe_allow_html=True,
    )
