"""Appwrite client construction."""

from appwrite.client import Client

from ..config import BackendSettings, get_backend_settings
from ..logging_config import get_logger

logger = get_logger(__name__)


def create_appwrite_client(settings: BackendSettings | None = None) -> Client:
    """
    Build an Appwrite client for the configured project.

    Args:
        settings: Backend settings (defaults to the configured ones)

    Returns:
        Client: SDK client shared by the storage and database services
    """
    settings = settings or get_backend_settings()

    client = Client()
    client.set_endpoint(settings.endpoint)
    client.set_project(settings.project_id)
    if settings.api_key:
        client.set_key(settings.api_key)

    missing = settings.missing()
    if missing:
        logger.warning("backend_settings_missing", missing=missing)

    logger.info("appwrite_client_created", endpoint=settings.endpoint, project_id=settings.project_id)
    return client
