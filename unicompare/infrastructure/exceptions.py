"""
Custom Exceptions for UniCompare

Hierarchical exception classes for proper error handling across layers.
"""

from typing import Optional, Dict, Any, List


class UniCompareError(Exception):
    """Base exception for all UniCompare errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(UniCompareError):
    """Raised when request parameters fail type or range validation."""

    def __init__(
        self,
        message: str = "Invalid filter parameters",
        errors: Optional[List[Dict[str, Any]]] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if errors:
            details["errors"] = errors
        super().__init__(message, details, original_error)


class InvalidArgumentError(UniCompareError):
    """Raised when an operation receives the wrong number of arguments."""
    pass


class NotFoundError(UniCompareError):
    """Raised when a requested university is not in the catalog."""

    def __init__(
        self,
        message: str,
        missing_ids: Optional[List[str]] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_ids:
            details["missing_ids"] = missing_ids
        super().__init__(message, details, original_error)


class CatalogError(UniCompareError):
    """Raised when the university catalog cannot be loaded."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if path:
            details["path"] = path
        super().__init__(message, details, original_error)


class InternalError(UniCompareError):
    """Generic server-side failure. Never carries internal details."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
