"""
Application exceptions.

Every failure the core can report derives from ``AppException``. None of
them is fatal: the web layer turns each into a user-facing message and
the store is left as it was (or partially changed, for file operations).
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable message shown to the user
        error_code: Machine-readable code (e.g. "INVALID_EXTENSION")
        status_code: HTTP status code used by the web layer
        details: Extra context for logs and responses
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {"code": self.error_code, "message": self.message, "details": self.details}
        }


class ValidationException(AppException):
    """Input rejected before any store mutation."""

    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR", **kwargs):
        super().__init__(message=message, error_code=error_code, status_code=400, **kwargs)


class NotFoundException(AppException):
    def __init__(self, message: str, error_code: str = "NOT_FOUND", **kwargs):
        super().__init__(message=message, error_code=error_code, status_code=404, **kwargs)


class NotAuthenticatedException(AppException):
    def __init__(self, message: str = "Not logged in"):
        super().__init__(message=message, error_code="NOT_AUTHENTICATED", status_code=401)


class PermissionDeniedException(AppException):
    def __init__(self, message: str = "Administrator access required"):
        super().__init__(message=message, error_code="PERMISSION_DENIED", status_code=403)


class StorageException(AppException):
    """File copy or delete failed; carries the underlying OS error message."""

    def __init__(self, message: str, error_code: str = "STORAGE_ERROR", **kwargs):
        super().__init__(message=message, error_code=error_code, status_code=500, **kwargs)
