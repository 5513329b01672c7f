"""
Excel Table Exporter.

Writes an ExportGrid to a single-sheet XLSX workbook held in memory.

Sheet layout:
- Row 1: header (bold, filled when styling is enabled)
- Row 2+: grid rows in order, every cell a string cell

Values are written as text; no type inference is applied.
"""

import io
from typing import Optional

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from view_export.config.settings import settings
from view_export.core.exceptions import SerializationError
from view_export.domain.entities import ExportGrid
from view_export.exporters.base_exporter import BaseExcelExporter
from view_export.utils import get_logger
from view_export.utils.constants import EXCEL_MAX_CELL_LENGTH

logger = get_logger(__name__)


class ExcelTableExporter(BaseExcelExporter):
    """
    Export one grid to one worksheet.

    Usage:
        exporter = ExcelTableExporter()
        payload = exporter.to_xlsx(grid, sheet_name="Grid view")
    """

    def __init__(
        self,
        strip_illegal_characters: Optional[bool] = None,
        **style_options
    ):
        super().__init__(**style_options)
        self.strip_illegal_characters = (
            settings.EXPORT_XLSX_STRIP_ILLEGAL_CHARACTERS
            if strip_illegal_characters is None
            else strip_illegal_characters
        )

    def to_xlsx(self, grid: ExportGrid, sheet_name: Optional[str] = None) -> bytes:
        """
        Serialize the grid as an XLSX workbook.

        Args:
            grid: Export grid
            sheet_name: Proposed sheet name (sanitized)

        Returns:
            Workbook bytes

        Raises:
            SerializationError: if the sheet name is unusable or writing fails
        """
        title = self._sanitize_sheet_name(sheet_name)
        if not title:
            raise SerializationError(
                "Sheet name is empty after sanitization",
                proposed=sheet_name,
            )

        try:
            wb = Workbook()
            ws = wb.active
            ws.title = title

            self._write_row(ws, 1, grid.header)
            for row_idx, row in enumerate(grid.rows, start=2):
                self._write_row(ws, row_idx, row)

            if self.style_header and grid.column_count:
                self._apply_header_style(ws, 1, grid.column_count)
            if self.cell_borders and grid.column_count:
                self._apply_borders(ws, grid.record_count + 1, grid.column_count)

            self._set_column_widths(
                ws,
                grid.header,
                [grid.column_values(i) for i in range(grid.column_count)],
            )

            buffer = io.BytesIO()
            wb.save(buffer)
        except SerializationError:
            raise
        except Exception as e:
            raise SerializationError(
                "Failed to write XLSX workbook",
                cause=e,
                sheet=title,
            ) from e

        logger.debug(f"Wrote {grid.record_count} rows to sheet '{title}'")
        return buffer.getvalue()

    def _write_row(self, ws, row_idx: int, values) -> None:
        for col_idx, value in enumerate(values, start=1):
            text = self._clean_text(value)
            cell = ws.cell(row=row_idx, column=col_idx, value=text)
            # Keep '=...' as literal text rather than a formula
            cell.data_type = 's'

    def _clean_text(self, value: str) -> str:
        if self.strip_illegal_characters:
            value = ILLEGAL_CHARACTERS_RE.sub('', value)
        if len(value) > EXCEL_MAX_CELL_LENGTH:
            logger.warning(
                f"Cell value of {len(value)} characters truncated to "
                f"{EXCEL_MAX_CELL_LENGTH} (Excel cell limit)"
            )
            value = value[:EXCEL_MAX_CELL_LENGTH]
        return value


def to_xlsx(grid: ExportGrid, sheet_name: Optional[str] = None) -> bytes:
    """Render a grid as XLSX bytes with default settings."""
    return ExcelTableExporter().to_xlsx(grid, sheet_name)


# Singleton instance
_excel_exporter = None


def get_excel_exporter() -> ExcelTableExporter:
    """Get or create ExcelTableExporter singleton instance."""
    global _excel_exporter
    if _excel_exporter is None:
        _excel_exporter = ExcelTableExporter()
    return _excel_exporter


def reset_excel_exporter() -> None:
    """Drop the singleton (settings changed, tests)."""
    global _excel_exporter
    _excel_exporter = None
