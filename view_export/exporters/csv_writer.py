"""
CSV Writer.

Every field is quoted and internal quotes are doubled, so embedded commas,
newlines and quotes never need a second rule. Rows are joined with '\\n' and
no trailing terminator is emitted.
"""

import csv
from typing import Optional

from view_export.config.settings import settings
from view_export.core.exceptions import SerializationError
from view_export.domain.entities import ExportGrid
from view_export.utils import get_logger

logger = get_logger(__name__)


class CSVWriter:
    """
    Serializes an ExportGrid to CSV text.

    Features:
    - QUOTE_ALL quoting with doubled internal quotes
    - Configurable line terminator (default '\\n')
    - Optional UTF-8 BOM on the byte payload for spreadsheet tools that expect it
    """

    def __init__(
        self,
        line_terminator: Optional[str] = None,
        include_bom: Optional[bool] = None
    ):
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}")
        self.line_terminator = line_terminator or settings.EXPORT_CSV_LINE_TERMINATOR
        self.include_bom = (
            settings.EXPORT_CSV_INCLUDE_BOM if include_bom is None else include_bom
        )

    @property
    def encoding(self) -> str:
        return 'utf-8-sig' if self.include_bom else 'utf-8'

    def to_csv(self, grid: ExportGrid) -> str:
        """
        Render the grid as CSV text.

        Args:
            grid: Export grid

        Returns:
            CSV text; '' for a grid without columns
        """
        if grid.column_count == 0:
            return ""

        df = grid.to_dataframe()
        try:
            text = df.to_csv(
                index=False,
                header=list(grid.header),
                quoting=csv.QUOTE_ALL,
                doublequote=True,
                lineterminator=self.line_terminator,
            )
        except Exception as e:
            raise SerializationError("Failed to write CSV", cause=e) from e

        if text.endswith(self.line_terminator):
            text = text[:-len(self.line_terminator)]

        self.logger.debug(f"Wrote {grid.record_count} rows as CSV")
        return text

    def to_csv_bytes(self, grid: ExportGrid) -> bytes:
        """CSV payload encoded as UTF-8 (with BOM when configured)."""
        return self.to_csv(grid).encode(self.encoding)


def to_csv(grid: ExportGrid) -> str:
    """Render a grid as CSV text with default settings."""
    return CSVWriter().to_csv(grid)


def get_csv_writer() -> CSVWriter:
    """Factory function for CSVWriter."""
    return CSVWriter()
