"""
Domain entities for tabular export.

All entities are transient: built per export invocation and discarded once the
payload is handed back to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union

import pandas as pd

from view_export.core.exceptions import UnsupportedFormatError
from view_export.utils.constants import (
    CSV_EXTENSION,
    CSV_MIME_TYPE,
    XLSX_EXTENSION,
    XLSX_MIME_TYPE,
)


class ExportFormat(Enum):
    """Supported output formats."""

    CSV = "csv"
    XLSX = "xlsx"

    @classmethod
    def from_value(cls, value: Union["ExportFormat", str]) -> "ExportFormat":
        """
        Parse a format name.

        Accepts 'csv', 'xlsx' and the UI alias 'excel' (case-insensitive).

        Raises:
            UnsupportedFormatError: for any other value
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().lstrip(".")
        if key == "excel":
            key = "xlsx"
        for member in cls:
            if member.value == key:
                return member
        raise UnsupportedFormatError(f"Unsupported export format: {value!r}", supported="csv, xlsx")

    @property
    def extension(self) -> str:
        return CSV_EXTENSION if self is ExportFormat.CSV else XLSX_EXTENSION

    @property
    def mime_type(self) -> str:
        return CSV_MIME_TYPE if self is ExportFormat.CSV else XLSX_MIME_TYPE

    @property
    def label(self) -> str:
        """Display name used in user-facing messages."""
        return "CSV" if self is ExportFormat.CSV else "Excel"


@dataclass(frozen=True)
class Column:
    """
    One exportable field.

    ``position`` (and ``field_id`` when the host provides one) address the
    column; ``name`` is display text only and may repeat.
    """

    name: str
    position: int
    field_id: Optional[str] = None


def as_columns(columns: Sequence[Union[Column, str]]) -> List[Column]:
    """Coerce plain names to Column objects, keeping order as positions."""
    result = []
    for idx, col in enumerate(columns):
        if isinstance(col, Column):
            result.append(col)
        else:
            result.append(Column(name=str(col), position=idx))
    return result


@dataclass
class ExportGrid:
    """Header plus rows of normalized strings; shared by both serializers."""

    header: List[str]
    rows: List[List[str]] = field(default_factory=list)

    def __post_init__(self):
        width = len(self.header)
        for idx, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {idx} has {len(row)} cells, expected {width}"
                )

    @property
    def record_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.header)

    def column_values(self, idx: int) -> List[str]:
        """All data cells of one column (header excluded)."""
        return [row[idx] for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        """
        DataFrame view of the grid.

        Columns are positional (0..n-1) so duplicate header names survive;
        header text is kept in ``df.attrs['header']``.
        """
        df = pd.DataFrame(self.rows, columns=range(self.column_count), dtype=object)
        df.attrs['header'] = list(self.header)
        return df


@dataclass
class ExportRequest:
    """What the caller wants produced."""

    format: ExportFormat = ExportFormat.CSV
    filename: Optional[str] = None
    sheet_name: Optional[str] = None
    require_rows: bool = False

    def __post_init__(self):
        self.format = ExportFormat.from_value(self.format)


@dataclass
class ExportResult:
    """Named byte payload handed back to the collaborator."""

    content: bytes
    suggested_filename: str
    mime_type: str
    record_count: int
    format: ExportFormat

    @property
    def size_bytes(self) -> int:
        return len(self.content)
