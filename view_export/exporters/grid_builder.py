"""
Grid Builder.

Turns (columns, rows) into the ExportGrid both serializers consume:
header from column names in order, one normalized string per cell.
"""

from typing import Iterable, Optional, Sequence, Union

from view_export.core.exceptions import MissingSelectionError
from view_export.domain.entities import Column, ExportGrid, as_columns
from view_export.exporters.normalizer import CellNormalizer
from view_export.utils import get_logger

logger = get_logger(__name__)


def build_grid(
    columns: Optional[Sequence[Union[Column, str]]],
    rows: Optional[Iterable],
    prefer_host_strings: bool = True
) -> ExportGrid:
    """
    Build the export grid.

    Zero rows is valid and yields a header-only grid; whether to block such an
    export is the caller's decision.

    Args:
        columns: Ordered column descriptors (plain names are accepted)
        rows: Ordered row handles
        prefer_host_strings: Use the host string accessor over raw values

    Returns:
        ExportGrid with ``len(rows)`` data rows, each ``len(columns)`` wide

    Raises:
        MissingSelectionError: if columns or rows were not resolved
    """
    if columns is None:
        raise MissingSelectionError("No column set resolved for export")
    if rows is None:
        raise MissingSelectionError("No row source resolved for export")

    cols = as_columns(columns)
    normalizer = CellNormalizer(prefer_host_strings=prefer_host_strings)

    header = [col.name for col in cols]
    grid_rows = [
        [normalizer.cell(row, col) for col in cols]
        for row in rows
    ]

    logger.debug(f"Built grid: {len(grid_rows)} rows x {len(header)} columns")
    return ExportGrid(header=header, rows=grid_rows)
