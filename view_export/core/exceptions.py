"""
Centralized exception hierarchy for view export.

All custom exceptions inherit from ViewExportException for easy catch-all handling
in the collaborator layer (CLI, export step).

Example:
    >>> from view_export.core import MissingSelectionError
    >>> raise MissingSelectionError("No view selected", table_id="tbl1")
"""

from typing import Any, Optional


class ViewExportException(Exception):
    """
    Base exception for all view export errors.

    Attributes:
        message: Human-readable error message
        details: Additional context (optional)
    """

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =========================================================================
# Export Errors
# =========================================================================

class ExportError(ViewExportException):
    """Error while producing an export payload."""
    pass


class NoDataError(ExportError):
    """Row source is empty but the caller requires at least one record."""
    pass


class SerializationError(ExportError):
    """
    Writing the output format failed.

    The underlying exception is kept on ``cause`` and chained as ``__cause__``
    by the raiser.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None, **details: Any):
        self.cause = cause
        if cause is not None:
            details.setdefault("cause", f"{type(cause).__name__}: {cause}")
        super().__init__(message, **details)


class UnsupportedFormatError(ExportError):
    """Requested export format is not csv or xlsx."""
    pass


# =========================================================================
# Selection / Host Errors
# =========================================================================

class MissingSelectionError(ViewExportException):
    """Exporter called without a resolved table, view or column set."""
    pass


class HostQueryError(ViewExportException):
    """Host record query used outside its lifetime."""
    pass


# =========================================================================
# Configuration Errors
# =========================================================================

class ConfigurationError(ViewExportException):
    """Configuration is invalid."""
    pass
