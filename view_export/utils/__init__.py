"""
Utility modules for view export.

Provides:
- Centralized logging configuration
- Custom exceptions (re-exported from core)
- Excel helpers
"""

from view_export.utils.logger import (
    get_logger,
    setup_logging,
    set_correlation_id,
    get_correlation_id,
)
from view_export.core.exceptions import (
    ViewExportException,
    ExportError,
    NoDataError,
    SerializationError,
    MissingSelectionError,
)
from view_export.utils.excel_utils import ExcelUtils

__all__ = [
    'get_logger',
    'setup_logging',
    'set_correlation_id',
    'get_correlation_id',
    'ViewExportException',
    'ExportError',
    'NoDataError',
    'SerializationError',
    'MissingSelectionError',
    'ExcelUtils',
]
