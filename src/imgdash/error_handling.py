"""
Error classification for imgdash.

Every application error carries a category, a machine readable code and a
message that is safe to show in the UI. Errors log themselves when created.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from imgdash.logging_config import log_error

GENERIC_UPLOAD_ERROR = "Failed to upload image. Please check your Appwrite configuration."


class ErrorCategory(Enum):
    """Error categories for classification and handling."""

    VALIDATION = "validation"
    STORAGE = "storage"
    DATABASE = "database"
    UNKNOWN = "unknown"


@dataclass
class ErrorInfo:
    """Structured error information."""

    category: ErrorCategory
    code: str
    message: str
    user_message: str
    details: dict[str, Any]
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert error info to dictionary."""
        return {
            "category": self.category.value,
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class ImgDashError(Exception):
    """Base exception class for imgdash."""

    default_user_message = "An unexpected error occurred."

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        code: str | None = None,
        user_message: str | None = None,
        details: dict[str, Any] | None = None,
        original_exception: Exception | None = None,
    ):
        super().__init__(message)
        self.category = category
        self.code = code or f"{category.value}_error"
        self.user_message = user_message or self.default_user_message
        self.details = details or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now(UTC)

        self._log_error()

    def _log_error(self) -> None:
        error_context = {
            "category": self.category.value,
            "code": self.code,
            **self.details,
        }

        if self.original_exception:
            error_context["original_exception"] = str(self.original_exception)

        log_error(self, error_context)

    def get_error_info(self) -> ErrorInfo:
        """Get structured error information."""
        return ErrorInfo(
            category=self.category,
            code=self.code,
            message=str(self),
            user_message=self.user_message,
            details=self.details,
            timestamp=self.timestamp,
        )


class ValidationError(ImgDashError):
    """Input rejected before any remote call was made."""

    default_user_message = "The submitted data is invalid."

    def __init__(
        self,
        message: str,
        code: str | None = None,
        user_message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            code=code or "validation_failed",
            user_message=user_message,
            details=details,
        )


class StorageError(ImgDashError):
    """Object storage operation failed."""

    default_user_message = GENERIC_UPLOAD_ERROR

    def __init__(
        self,
        message: str,
        code: str | None = None,
        user_message: str | None = None,
        details: dict[str, Any] | None = None,
        original_exception: Exception | None = None,
    ):
        super().__init__(
            message=message,
            category=ErrorCategory.STORAGE,
            code=code or "storage_error",
            user_message=user_message,
            details=details,
            original_exception=original_exception,
        )


class DatabaseError(ImgDashError):
    """Document store operation failed."""

    default_user_message = GENERIC_UPLOAD_ERROR

    def __init__(
        self,
        message: str,
        code: str | None = None,
        user_message: str | None = None,
        details: dict[str, Any] | None = None,
        original_exception: Exception | None = None,
    ):
        super().__init__(
            message=message,
            category=ErrorCategory.DATABASE,
            code=code or "database_error",
            user_message=user_message,
            details=details,
            original_exception=original_exception,
        )


def get_user_message(error: Exception, fallback: str = GENERIC_UPLOAD_ERROR) -> str:
    """
    Pick the text shown to the user for an error.

    Application errors carry their own user message. For anything else the
    exception text is used when present, otherwise ``fallback``.
    """
    if isinstance(error, ImgDashError):
        return error.user_message or fallback
    return str(error) or fallback
