"""
Models module for imgdash.

- Session: login state snapshot
- UploadRecord: metadata of one uploaded image
- IncomingFile: a file picked by the user, before upload
"""

from .session import Session
from .upload import ACCEPTED_MIME_TYPES, IncomingFile, UploadRecord

__all__ = [
    "ACCEPTED_MIME_TYPES",
    "IncomingFile",
    "Session",
    "UploadRecord",
]
