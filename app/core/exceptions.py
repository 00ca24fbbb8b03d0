from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Base class for every error raised on purpose by the service.
    Keeps the error format returned to clients uniform.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# REQUEST ERRORS
# =========================================================

class ValidationError(BaseAPIException):
    """400: missing or malformed input (absent field, non-numeric id...)"""
    def __init__(self, message: str = "Invalid request", details: dict = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class NotFoundError(BaseAPIException):
    """404: no row matches the requested id"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

# =========================================================
# STORAGE ERRORS
# =========================================================

class StorageError(BaseAPIException):
    """
    500: the database driver failed (no connection, bad SQL,
    constraint violation...). `details` carries the driver message;
    it is only sent to clients when EXPOSE_ERROR_DETAILS is on.
    """
    def __init__(self, message: str, details: dict = None):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )
