"""
Health check functionality for imgdash.

Reports whether the backend settings are present and whether the session
store can be read. No request is sent to the hosted backend.
"""

import json
import os
import platform
import time
from pathlib import Path
from typing import Any

import streamlit as st

from imgdash import __version__
from imgdash.config import get_backend_settings, get_session_store_path
from imgdash.logging_config import get_logger
from imgdash.services.persistence import JsonFileKeyValueStore
from imgdash.services.session import AUTH_FLAG_KEY

logger = get_logger(__name__)


def check_environment_health() -> dict[str, Any]:
    """Check that every backend identifier is configured."""
    settings = get_backend_settings()
    missing = settings.missing()

    if missing:
        return {
            "status": "unhealthy",
            "message": f"Missing backend settings: {', '.join(missing)}",
            "timestamp": time.time(),
            "missing_vars": missing,
        }

    return {
        "status": "healthy",
        "message": "Backend configuration is complete",
        "timestamp": time.time(),
        "config": {
            "endpoint": settings.endpoint,
            "project_id": settings.project_id,
            "database_id": settings.database_id,
            "uploads_collection_id": settings.uploads_collection_id,
            "bucket_id": settings.bucket_id,
            "api_key_configured": settings.api_key is not None,
        },
    }


def check_session_store_health() -> dict[str, Any]:
    """Check that the session file is readable (a missing file is fine)."""
    path = Path(get_session_store_path())
    try:
        JsonFileKeyValueStore(path).get(AUTH_FLAG_KEY)
    except OSError as e:
        logger.error("session_store_health_check_failed", path=str(path), error=str(e))
        return {"status": "unhealthy", "message": f"Session store unreadable: {e}", "timestamp": time.time()}

    return {
        "status": "healthy",
        "message": "Session store is readable",
        "timestamp": time.time(),
        "path": str(path),
        "exists": path.exists(),
    }


def get_application_info() -> dict[str, Any]:
    """Get application information."""
    return {
        "name": "imgdash",
        "version": __version__,
        "environment": os.getenv("ENVIRONMENT", "development"),
        "python_version": platform.python_version(),
        "timestamp": time.time(),
    }


def perform_health_check() -> dict[str, Any]:
    """Run all checks and aggregate them."""
    start_time = time.time()

    checks = {
        "environment": check_environment_health(),
        "session_store": check_session_store_health(),
    }

    unhealthy_services = [name for name, result in checks.items() if result["status"] != "healthy"]
    overall_status = "unhealthy" if unhealthy_services else "healthy"

    health_response: dict[str, Any] = {
        "status": overall_status,
        "timestamp": time.time(),
        "duration_ms": round((time.time() - start_time) * 1000, 2),
        "application": get_application_info(),
        "checks": checks,
    }

    if unhealthy_services:
        health_response["unhealthy_services"] = unhealthy_services

    logger.info(
        "health_check_completed",
        status=overall_status,
        duration_ms=health_response["duration_ms"],
        unhealthy_services=unhealthy_services,
    )

    return health_response


def health_check_json() -> str:
    """Return health check as JSON string."""
    return json.dumps(perform_health_check(), indent=2)


def render_health_page() -> None:
    """Render health check page for Streamlit."""
    st.title("🏥 Health Check")
    st.markdown("---")

    with st.spinner("Performing health check..."):
        health_data = perform_health_check()

    if health_data["status"] == "healthy":
        st.success(f"✅ Application is healthy (checked in {health_data['duration_ms']}ms)")
    else:
        st.error(f"❌ Application is unhealthy (checked in {health_data['duration_ms']}ms)")
        st.warning(f"Unhealthy services: {', '.join(health_data['unhealthy_services'])}")

    app_info = health_data["application"]
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Name", app_info["name"])
    with col2:
        st.metric("Version", app_info["version"])
    with col3:
        st.metric("Environment", app_info["environment"])

    for service, check_result in health_data["checks"].items():
        with st.expander(f"{service.replace('_', ' ').title()}", expanded=check_result["status"] != "healthy"):
            if check_result["status"] == "healthy":
                st.success(check_result["message"])
            else:
                st.error(check_result["message"])
            st.json(check_result)
