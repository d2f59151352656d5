"""
Unit tests for Appwrite client construction.
"""

from unittest.mock import patch

from imgdash.config import BackendSettings
from imgdash.services.backend import create_appwrite_client


class TestCreateAppwriteClient:
    """Test cases for create_appwrite_client."""

    @patch("imgdash.services.backend.Client")
    def test_configures_endpoint_and_project(self, mock_client_class):
        settings = BackendSettings(
            endpoint="https://cloud.example.com/v1",
            project_id="proj",
            database_id="db",
            uploads_collection_id="uploads",
            bucket_id="images",
        )

        client = create_appwrite_client(settings)

        assert client is mock_client_class.return_value
        client.set_endpoint.assert_called_once_with("https://cloud.example.com/v1")
        client.set_project.assert_called_once_with("proj")
        client.set_key.assert_not_called()

    @patch("imgdash.services.backend.Client")
    def test_sets_api_key_when_configured(self, mock_client_class):
        settings = BackendSettings(
            endpoint="https://cloud.example.com/v1",
            project_id="proj",
            database_id="db",
            uploads_collection_id="uploads",
            bucket_id="images",
            api_key="secret",
        )

        client = create_appwrite_client(settings)

        client.set_key.assert_called_once_with("secret")

    @patch("imgdash.services.backend.Client")
    def test_defaults_to_configured_settings(self, mock_client_class):
        client = create_appwrite_client()

        client.set_project.assert_called_once_with("test-project")
