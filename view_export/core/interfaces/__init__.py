"""Protocol definitions for host collaborators."""

from view_export.core.interfaces.host import RowHandle, ActiveSelectionProvider

__all__ = [
    'RowHandle',
    'ActiveSelectionProvider',
]
