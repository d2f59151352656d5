"""
Unit tests for health checks.
"""

import json

from imgdash.config import get_config
from imgdash.health import (
    check_environment_health,
    check_session_store_health,
    health_check_json,
    perform_health_check,
)


class TestEnvironmentHealth:
    """Test the backend configuration check."""

    def test_healthy(self):
        result = check_environment_health()

        assert result["status"] == "healthy"
        assert result["config"]["bucket_id"] == "images"
        assert result["config"]["api_key_configured"] is False

    def test_missing_settings(self, monkeypatch):
        monkeypatch.setenv("APPWRITE_PROJECT_ID", "")
        get_config().clear_cache()

        result = check_environment_health()

        assert result["status"] == "unhealthy"
        assert result["missing_vars"] == ["APPWRITE_PROJECT_ID"]


class TestSessionStoreHealth:
    """Test the session store check."""

    def test_missing_file_is_healthy(self, tmp_path):
        result = check_session_store_health()

        assert result["status"] == "healthy"
        assert result["exists"] is False

    def test_undecodable_file_is_healthy(self, tmp_path):
        (tmp_path / "session.json").write_bytes(b"\xff\xfe{garbage")

        result = check_session_store_health()

        assert result["status"] == "healthy"
        assert result["exists"] is True

    def test_unreadable_path(self, tmp_path, monkeypatch):
        directory = tmp_path / "a-directory"
        directory.mkdir()
        monkeypatch.setenv("SESSION_STORE_PATH", str(directory))
        get_config().clear_cache()

        result = check_session_store_health()

        assert result["status"] == "unhealthy"


class TestPerformHealthCheck:
    """Test the aggregated health check."""

    def test_all_healthy(self):
        result = perform_health_check()

        assert result["status"] == "healthy"
        assert set(result["checks"]) == {"environment", "session_store"}
        assert "unhealthy_services" not in result
        assert result["application"]["name"] == "imgdash"

    def test_unhealthy_service_listed(self, monkeypatch):
        monkeypatch.setenv("APPWRITE_BUCKET_ID", "")
        get_config().clear_cache()

        result = perform_health_check()

        assert result["status"] == "unhealthy"
        assert result["unhealthy_services"] == ["environment"]

    def test_json_output(self):
        assert json.loads(health_check_json())["status"] == "healthy"
