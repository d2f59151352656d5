"""
Services module for imgdash.

- SessionGate: local login gate persisted in a key-value store
- UploadDashboard: dashboard state and the upload sequence
- ObjectStorageService: Appwrite storage bucket operations
- UploadMetadataService: Appwrite uploads collection operations
"""

from .dashboard import DashboardState, Navigation, UploadDashboard, UploadResult
from .metadata import UploadMetadataService, get_metadata_service
from .persistence import InMemoryKeyValueStore, JsonFileKeyValueStore
from .session import SessionGate, get_session_gate, reset_session_gate
from .storage import ObjectStorageService, get_storage_service

__all__ = [
    "DashboardState",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "Navigation",
    "ObjectStorageService",
    "SessionGate",
    "UploadDashboard",
    "UploadMetadataService",
    "UploadResult",
    "get_metadata_service",
    "get_session_gate",
    "get_storage_service",
    "reset_session_gate",
]
