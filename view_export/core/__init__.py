"""
Core module: exceptions and collaborator interfaces.
"""

from view_export.core.exceptions import (
    ViewExportException,
    ExportError,
    NoDataError,
    SerializationError,
    UnsupportedFormatError,
    MissingSelectionError,
    HostQueryError,
    ConfigurationError,
)
from view_export.core.interfaces import RowHandle, ActiveSelectionProvider

__all__ = [
    'ViewExportException',
    'ExportError',
    'NoDataError',
    'SerializationError',
    'UnsupportedFormatError',
    'MissingSelectionError',
    'HostQueryError',
    'ConfigurationError',
    'RowHandle',
    'ActiveSelectionProvider',
]
