"""
Host interface definitions using Python Protocols.

These protocols define what the exporter needs from the host data layer,
enabling duck typing over any record source (host snapshot, in-memory rows,
DataFrames) and swapping of active-selection strategies.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from view_export.domain.entities import Column
    from view_export.host.models import BaseSnapshot
    from view_export.host.selection import Selection


@runtime_checkable
class RowHandle(Protocol):
    """
    Read-only record handle offering value lookup by column.

    Implementations: MappingRow, SequenceRow, RecordRow
    """

    def cell_value_as_string(self, column: "Column") -> str:
        """Host-formatted display string for the cell."""
        ...

    def cell_value_raw(self, column: "Column") -> Any:
        """Raw cell value: None, scalar, object with ``name``, or list of such."""
        ...


@runtime_checkable
class ActiveSelectionProvider(Protocol):
    """
    Strategy resolving which table and view to export.

    Implementations: ManualSelectionProvider, CursorTrackingSelectionProvider,
    FirstAvailableSelectionProvider
    """

    @property
    def name(self) -> str:
        """Strategy identifier."""
        ...

    def resolve(self, snapshot: "BaseSnapshot") -> "Selection":
        """
        Resolve the active selection.

        Raises:
            MissingSelectionError: when no table/view can be resolved
        """
        ...
