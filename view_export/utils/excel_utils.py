"""
Shared Excel Utilities.

Sheet-name sanitization and column-width sizing used by the XLSX exporter.
"""

import re
from typing import Iterable, Optional

from view_export.utils.constants import EXCEL_SHEET_NAME_INVALID_CHARS


class ExcelUtils:
    """Shared utility functions for Excel export operations."""

    @staticmethod
    def get_column_letter(idx: int) -> str:
        """
        Convert column index to Excel column letter.

        Args:
            idx: 0-based column index (0=A, 25=Z, 26=AA, etc.)

        Returns:
            Excel column letter(s)
        """
        result = ""
        while idx >= 0:
            result = chr(idx % 26 + 65) + result
            idx = idx // 26 - 1
        return result

    @staticmethod
    def sanitize_sheet_name(
        name: Optional[str],
        max_length: int = 31,
        default: str = "Sheet1"
    ) -> str:
        """
        Sanitize string for Excel sheet name.

        Excel sheet name rules:
        - Max 31 characters
        - No: [ ] : * ? / \\
        - Must not begin or end with an apostrophe

        Args:
            name: Sheet name to sanitize
            max_length: Maximum length (default 31)
            default: Name used when nothing survives sanitization

        Returns:
            Sanitized sheet name, or ``default`` (which may itself be empty;
            callers decide whether that is an error)
        """
        if not name:
            return default

        sanitized = re.sub(EXCEL_SHEET_NAME_INVALID_CHARS, '', str(name))
        sanitized = sanitized.strip().strip("'").strip()

        if len(sanitized) > max_length:
            sanitized = sanitized[:max_length].strip().strip("'").strip()

        return sanitized or default

    @staticmethod
    def column_width(
        header: str,
        values: Iterable[str],
        padding: int = 2,
        max_width: int = 50
    ) -> int:
        """
        Width for one column: longest of header and values, plus padding, capped.

        Args:
            header: Header text
            values: Cell strings in the column
            padding: Extra characters added to the longest value
            max_width: Upper bound for outlier long values

        Returns:
            Column width in characters
        """
        longest = len(header)
        for value in values:
            if len(value) > longest:
                longest = len(value)
        return min(longest + padding, max_width)
