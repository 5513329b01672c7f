"""
Active selection strategies.

Decide which (table, view) an export targets:
- ManualSelectionProvider: explicit table (and optionally view) IDs
- CursorTrackingSelectionProvider: follow the user's cursor, optionally
  falling back to the first table/view when detection fails
- FirstAvailableSelectionProvider: first table, first view
"""

from dataclasses import dataclass
from typing import Optional

from view_export.core.exceptions import ConfigurationError, MissingSelectionError
from view_export.core.interfaces import ActiveSelectionProvider
from view_export.host.models import BaseSnapshot, TableModel, ViewModel
from view_export.utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Selection:
    """Resolved export target."""

    table: TableModel
    view: ViewModel

    @property
    def table_name(self) -> str:
        return self.table.name

    @property
    def view_name(self) -> str:
        return self.view.name


@dataclass(frozen=True)
class Cursor:
    """Where the user currently is in the host UI."""

    active_table_id: Optional[str] = None
    active_view_id: Optional[str] = None

    @classmethod
    def from_snapshot(cls, snapshot: BaseSnapshot) -> "Cursor":
        return cls(snapshot.active_table_id, snapshot.active_view_id)


def _first_view(table: TableModel) -> Optional[ViewModel]:
    return table.views[0] if table.views else None


class ManualSelectionProvider:
    """Use the table/view the user picked; never substitute a default table."""

    name = "manual"

    def __init__(self, table_id: Optional[str], view_id: Optional[str] = None):
        self.table_id = table_id
        self.view_id = view_id

    def resolve(self, snapshot: BaseSnapshot) -> Selection:
        if not self.table_id:
            raise MissingSelectionError("Please select a table and view")

        table = snapshot.get_table_by_id_if_exists(self.table_id)
        if table is None:
            raise MissingSelectionError("Selected table not found", table_id=self.table_id)

        if self.view_id:
            view = table.get_view_by_id_if_exists(self.view_id)
            if view is None:
                raise MissingSelectionError(
                    "Selected view not found",
                    table=table.name,
                    view_id=self.view_id,
                )
        else:
            # Picking a table defaults the view dropdown to its first view
            view = _first_view(table)
            if view is None:
                raise MissingSelectionError("Selected table has no views", table=table.name)

        return Selection(table, view)


class CursorTrackingSelectionProvider:
    """Follow the active table/view of the cursor."""

    name = "cursor"

    def __init__(self, cursor: Optional[Cursor] = None, fallback_to_first: bool = True):
        self.cursor = cursor
        self.fallback_to_first = fallback_to_first

    def resolve(self, snapshot: BaseSnapshot) -> Selection:
        cursor = self.cursor or Cursor.from_snapshot(snapshot)

        table = snapshot.get_table_by_id_if_exists(cursor.active_table_id)
        view = table.get_view_by_id_if_exists(cursor.active_view_id) if table else None

        if table is not None and view is not None:
            return Selection(table, view)

        if not self.fallback_to_first:
            raise MissingSelectionError(
                "Could not detect the active table/view",
                table_id=cursor.active_table_id,
                view_id=cursor.active_view_id,
            )

        if table is None:
            if not snapshot.tables:
                raise MissingSelectionError("Base has no tables")
            logger.info(f"Active table not found ({cursor.active_table_id}), using first table")
            table = snapshot.tables[0]

        view = _first_view(table)
        if view is None:
            raise MissingSelectionError("Table has no views", table=table.name)

        return Selection(table, view)


class FirstAvailableSelectionProvider:
    """Always export the first view of the first table."""

    name = "first"

    def resolve(self, snapshot: BaseSnapshot) -> Selection:
        if not snapshot.tables:
            raise MissingSelectionError("Base has no tables")
        table = snapshot.tables[0]
        view = _first_view(table)
        if view is None:
            raise MissingSelectionError("Table has no views", table=table.name)
        return Selection(table, view)


def get_selection_provider(
    strategy: str,
    table_id: Optional[str] = None,
    view_id: Optional[str] = None,
    fallback_to_first: bool = True
) -> ActiveSelectionProvider:
    """
    Build a selection provider by strategy name.

    Args:
        strategy: 'manual', 'cursor' or 'first'
        table_id: Table for manual selection (also seeds the cursor)
        view_id: View for manual selection (also seeds the cursor)
        fallback_to_first: Cursor strategy fallback policy

    Raises:
        ConfigurationError: for an unknown strategy
    """
    key = (strategy or "").strip().lower()
    if key == "manual":
        return ManualSelectionProvider(table_id, view_id)
    if key == "cursor":
        cursor = Cursor(table_id, view_id) if (table_id or view_id) else None
        return CursorTrackingSelectionProvider(cursor, fallback_to_first=fallback_to_first)
    if key == "first":
        return FirstAvailableSelectionProvider()
    raise ConfigurationError(
        f"Unknown selection strategy: {strategy!r}",
        supported="manual, cursor, first",
    )
