"""Custom exception classes"""
from typing import Any, Optional


class AppException(Exception):
    """Base exception for application errors"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "AppError",
        details: Optional[Any] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Validation error exception"""

    def __init__(
        self,
        message: str,
        details: Optional[Any] = None,
        error_type: str = "ValidationError"
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_type=error_type,
            details=details
        )


class EmptySplitError(ValidationError):
    """Raised when an allocation has nothing to divide by (no participants or no shares)"""

    def __init__(self, message: str = "At least one participant is required", details: Optional[Any] = None):
        super().__init__(message=message, details=details, error_type="EmptySplitError")


class NotFoundError(AppException):
    """Resource not found exception"""

    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=404,
            error_type="NotFoundError",
            details=details
        )
