"""
Centralized constants for view export.

Values that are part of file-format contracts live here; tunable values live
in config.settings.
"""

# =============================================================================
# MIME TYPES
# =============================================================================

CSV_MIME_TYPE = "text/csv;charset=utf-8"
XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# =============================================================================
# FILE EXTENSIONS
# =============================================================================

CSV_EXTENSION = ".csv"
XLSX_EXTENSION = ".xlsx"

# =============================================================================
# EXCEL CONSTANTS
# =============================================================================

# Characters Excel rejects in sheet names
EXCEL_SHEET_NAME_INVALID_CHARS = r'[\[\]:*?/\\]'

# Longest string a single cell can hold
EXCEL_MAX_CELL_LENGTH = 32767

# =============================================================================
# FILENAME CONSTANTS
# =============================================================================

# Characters replaced with '-' in export filenames (runs collapse to one '-')
FILENAME_INVALID_CHARS = r'[/\\?%*:|"<>]+'
FILENAME_REPLACEMENT = "-"

# Placeholder for missing table/view names in default filenames
UNKNOWN_NAME = "Unknown"

# =============================================================================
# CELL NORMALIZATION
# =============================================================================

# Separator between elements of multi-value cells (multi-selects, linked records)
MULTI_VALUE_SEPARATOR = ", "
