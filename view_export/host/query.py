"""
Scoped record queries.

A query is acquired for one (table, view), its rows are read, and it is
released on every exit path. Reading a released query is an error.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List

from view_export.core.exceptions import HostQueryError
from view_export.domain.entities import Column
from view_export.exporters.normalizer import normalize
from view_export.host.models import FieldModel, RecordModel, TableModel, ViewModel
from view_export.utils import get_logger

logger = get_logger(__name__)


class RecordRow:
    """Row handle over a host record."""

    __slots__ = ("record",)

    def __init__(self, record: RecordModel):
        self.record = record

    def cell_value_raw(self, column: Column) -> Any:
        cells = self.record.cells
        if column.field_id is not None and column.field_id in cells:
            return cells[column.field_id]
        return cells.get(column.name)

    def cell_value_as_string(self, column: Column) -> str:
        return normalize(self.cell_value_raw(column))


class RecordQuery:
    """Loaded records of one view, limited to the requested fields."""

    def __init__(self, table: TableModel, view: ViewModel):
        self.table = table
        self.view = view
        self._fields = view.visible_fields(table)
        self._columns = table.columns_for(view)
        self._records = [RecordRow(r) for r in table.records]
        self._released = False

    @property
    def is_released(self) -> bool:
        return self._released

    def _check(self) -> None:
        if self._released:
            raise HostQueryError(
                "Record query already released",
                table=self.table.name,
                view=self.view.name,
            )

    @property
    def fields(self) -> List[FieldModel]:
        self._check()
        return self._fields

    @property
    def columns(self) -> List[Column]:
        self._check()
        return self._columns

    @property
    def records(self) -> List[RecordRow]:
        self._check()
        return self._records

    def release(self) -> None:
        """Drop loaded records. Safe to call twice."""
        if not self._released:
            self._records = []
            self._released = True
            logger.debug(f"Released query for {self.table.name}/{self.view.name}")


@contextmanager
def select_records(table: TableModel, view: ViewModel) -> Iterator[RecordQuery]:
    """
    Acquire a record query for a view; always released on exit.

    Usage:
        with select_records(table, view) as query:
            result = exporter.export(query.columns, query.records, request)
    """
    query = RecordQuery(table, view)
    logger.debug(f"Loaded {len(table.records)} records for {table.name}/{view.name}")
    try:
        yield query
    finally:
        query.release()
