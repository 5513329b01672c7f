"""
Base Excel Exporter with shared styling and sizing helpers.

ExcelTableExporter inherits from this class; the styling constants and the
worksheet helpers live here so a second sheet-producing exporter can reuse them.
"""

from abc import ABC
from typing import List, Optional

from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from view_export.config.settings import settings
from view_export.utils.excel_utils import ExcelUtils


class BaseExcelExporter(ABC):
    """
    Base class with shared Excel export functionality.

    Provides:
    - Sheet name sanitization (delegates to ExcelUtils)
    - Header styling
    - Cell borders
    - Column width sizing

    This class should NOT be instantiated directly - use concrete subclasses.
    """

    # =========================================================================
    # STYLING CONSTANTS
    # =========================================================================

    HEADER_FONT = Font(bold=True)

    THIN_BORDER = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    def __init__(
        self,
        style_header: Optional[bool] = None,
        cell_borders: Optional[bool] = None,
        header_fill: Optional[str] = None
    ):
        self.style_header = (
            settings.EXPORT_XLSX_STYLE_HEADER if style_header is None else style_header
        )
        self.cell_borders = (
            settings.EXPORT_XLSX_CELL_BORDERS if cell_borders is None else cell_borders
        )
        fill_color = header_fill or settings.EXPORT_XLSX_HEADER_FILL
        self.header_fill = PatternFill("solid", fgColor=fill_color) if fill_color else None

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def _get_column_letter(self, idx: int) -> str:
        """
        Convert column index to Excel column letter.

        Args:
            idx: 0-based column index (0=A, 25=Z, 26=AA)
        """
        return ExcelUtils.get_column_letter(idx)

    def _sanitize_sheet_name(self, name: Optional[str]) -> str:
        """
        Sanitize string for Excel sheet name.

        Removes invalid characters, truncates to max length and falls back to
        the configured default sheet name.
        """
        return ExcelUtils.sanitize_sheet_name(
            name,
            max_length=settings.EXPORT_MAX_SHEET_NAME_LENGTH,
            default=settings.EXPORT_DEFAULT_SHEET_NAME,
        )

    # =========================================================================
    # SHEET FORMATTING HELPERS
    # =========================================================================

    def _apply_header_style(self, ws: Worksheet, row_num: int, col_count: int) -> None:
        """Bold (and optionally fill) the header row."""
        for col in range(1, col_count + 1):
            cell = ws.cell(row=row_num, column=col)
            cell.font = self.HEADER_FONT
            if self.header_fill is not None:
                cell.fill = self.header_fill

    def _apply_borders(self, ws: Worksheet, row_count: int, col_count: int) -> None:
        """Thin border on every populated cell."""
        for row in ws.iter_rows(min_row=1, max_row=row_count, max_col=col_count):
            for cell in row:
                cell.border = self.THIN_BORDER

    def _set_column_widths(
        self,
        ws: Worksheet,
        header: List[str],
        columns: List[List[str]]
    ) -> None:
        """
        Size each column to its longest value.

        Args:
            ws: Worksheet
            header: Header strings
            columns: Data cells per column
        """
        for idx, name in enumerate(header):
            width = ExcelUtils.column_width(
                name,
                columns[idx],
                padding=settings.EXPORT_COLUMN_WIDTH_PADDING,
                max_width=settings.EXPORT_MAX_COLUMN_WIDTH,
            )
            ws.column_dimensions[self._get_column_letter(idx)].width = width
