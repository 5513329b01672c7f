"""
Tabular Exporter.

Entry point of the export core: normalize -> build grid -> serialize -> name.
Pure and synchronous; performs no I/O and holds no state across calls.
"""

from datetime import date
from typing import Iterable, Optional, Sequence, Union

from view_export.core.exceptions import NoDataError
from view_export.domain.entities import (
    Column,
    ExportFormat,
    ExportGrid,
    ExportRequest,
    ExportResult,
)
from view_export.exporters.csv_writer import CSVWriter
from view_export.exporters.excel_exporter import ExcelTableExporter
from view_export.exporters.filename_resolver import default_basename, resolve_filename
from view_export.exporters.grid_builder import build_grid
from view_export.utils import get_logger

logger = get_logger(__name__)


class TabularExporter:
    """
    Export (columns, rows) to a CSV or XLSX payload.

    Usage:
        exporter = get_tabular_exporter()
        result = exporter.export(
            columns, rows,
            ExportRequest(format="xlsx"),
            table_name="Tasks", view_name="Grid view",
        )
        # result.content, result.suggested_filename, result.mime_type
    """

    def __init__(
        self,
        csv_writer: Optional[CSVWriter] = None,
        excel_exporter: Optional[ExcelTableExporter] = None,
        prefer_host_strings: bool = True
    ):
        self.csv_writer = csv_writer or CSVWriter()
        self.excel_exporter = excel_exporter or ExcelTableExporter()
        self.prefer_host_strings = prefer_host_strings

    def export(
        self,
        columns: Sequence[Union[Column, str]],
        rows: Iterable,
        request: Optional[ExportRequest] = None,
        table_name: Optional[str] = None,
        view_name: Optional[str] = None,
        today: Optional[date] = None
    ) -> ExportResult:
        """
        Produce the export payload.

        Args:
            columns: Ordered column descriptors
            rows: Ordered row handles
            request: Format, custom filename, sheet name, empty-export policy
            table_name: Used for the default filename only
            view_name: Used for the default filename and default sheet name
            today: Export date override (defaults to today)

        Returns:
            ExportResult with bytes, suggested filename, MIME type and count

        Raises:
            MissingSelectionError: columns/rows not resolved
            NoDataError: zero rows while ``request.require_rows`` is set
            SerializationError: writing the output format failed
        """
        request = request or ExportRequest()

        grid = build_grid(columns, rows, prefer_host_strings=self.prefer_host_strings)

        if request.require_rows and grid.record_count == 0:
            raise NoDataError(
                "No records to export",
                table=table_name or "",
                view=view_name or "",
            )

        content = self.serialize(grid, request.format, request.sheet_name or view_name)
        filename = resolve_filename(
            request.filename,
            default_basename(table_name, view_name, today),
            request.format,
        )

        logger.debug(
            f"Exported {grid.record_count} records as {request.format.value} "
            f"({len(content)} bytes) -> {filename}"
        )

        return ExportResult(
            content=content,
            suggested_filename=filename,
            mime_type=request.format.mime_type,
            record_count=grid.record_count,
            format=request.format,
        )

    def serialize(
        self,
        grid: ExportGrid,
        fmt: Union[ExportFormat, str],
        sheet_name: Optional[str] = None
    ) -> bytes:
        """Serialize a prepared grid to the byte payload of the given format."""
        export_format = ExportFormat.from_value(fmt)
        if export_format is ExportFormat.CSV:
            return self.csv_writer.to_csv_bytes(grid)
        return self.excel_exporter.to_xlsx(grid, sheet_name)


# Singleton instance
_exporter_instance = None


def get_tabular_exporter() -> TabularExporter:
    """Get or create TabularExporter singleton instance."""
    global _exporter_instance
    if _exporter_instance is None:
        _exporter_instance = TabularExporter()
    return _exporter_instance


def reset_tabular_exporter() -> None:
    """Drop the singleton (settings changed, tests)."""
    global _exporter_instance
    _exporter_instance = None
