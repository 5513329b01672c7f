"""
Ready-made row handles for callers that hold plain Python data.

- MappingRow: values keyed by column field_id (or name)
- SequenceRow: values addressed by column position
- rows_from_dataframe: one SequenceRow per DataFrame row
"""

from typing import Any, Iterable, List, Mapping, Sequence

import pandas as pd

from view_export.domain.entities import Column
from view_export.exporters.normalizer import normalize


class MappingRow:
    """Row handle over a mapping such as ``{"Name": "Alice", "Tags": [...]}``."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any]):
        self._values = values

    def cell_value_raw(self, column: Column) -> Any:
        if column.field_id is not None and column.field_id in self._values:
            return self._values[column.field_id]
        return self._values.get(column.name)

    def cell_value_as_string(self, column: Column) -> str:
        return normalize(self.cell_value_raw(column))

    def __repr__(self) -> str:
        return f"MappingRow({dict(self._values)!r})"


class SequenceRow:
    """Row handle over a positional sequence of values."""

    __slots__ = ("_values",)

    def __init__(self, values: Sequence[Any]):
        self._values = values

    def cell_value_raw(self, column: Column) -> Any:
        if 0 <= column.position < len(self._values):
            return self._values[column.position]
        return None

    def cell_value_as_string(self, column: Column) -> str:
        return normalize(self.cell_value_raw(column))

    def __repr__(self) -> str:
        return f"SequenceRow({list(self._values)!r})"


def rows_from_records(records: Iterable[Mapping[str, Any]]) -> List[MappingRow]:
    """Wrap plain dict records as row handles."""
    return [MappingRow(record) for record in records]


def rows_from_dataframe(df: pd.DataFrame) -> List[SequenceRow]:
    """
    Wrap DataFrame rows as positional row handles.

    NaN/NaT cells become None so they normalize to ''.
    """
    rows = []
    for values in df.itertuples(index=False, name=None):
        rows.append(SequenceRow([None if _is_missing(v) else v for v in values]))
    return rows


def columns_from_dataframe(df: pd.DataFrame) -> List[Column]:
    """Columns in DataFrame order, addressed by position."""
    return [Column(name=str(name), position=idx) for idx, name in enumerate(df.columns)]


def _is_missing(value: Any) -> bool:
    if isinstance(value, (list, tuple, dict)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
