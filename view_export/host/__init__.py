"""
Host binding: base snapshots, scoped record queries and selection strategies.
"""

from view_export.host.models import (
    BaseSnapshot,
    TableModel,
    ViewModel,
    FieldModel,
    RecordModel,
    load_snapshot,
)
from view_export.host.query import RecordQuery, RecordRow, select_records
from view_export.host.selection import (
    Selection,
    Cursor,
    ManualSelectionProvider,
    CursorTrackingSelectionProvider,
    FirstAvailableSelectionProvider,
    get_selection_provider,
)

__all__ = [
    'BaseSnapshot',
    'TableModel',
    'ViewModel',
    'FieldModel',
    'RecordModel',
    'load_snapshot',
    'RecordQuery',
    'RecordRow',
    'select_records',
    'Selection',
    'Cursor',
    'ManualSelectionProvider',
    'CursorTrackingSelectionProvider',
    'FirstAvailableSelectionProvider',
    'get_selection_provider',
]
