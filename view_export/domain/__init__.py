"""Domain entities: columns, grids, export requests and results."""

from view_export.domain.entities import (
    Column,
    ExportFormat,
    ExportGrid,
    ExportRequest,
    ExportResult,
    as_columns,
)

__all__ = [
    'Column',
    'ExportFormat',
    'ExportGrid',
    'ExportRequest',
    'ExportResult',
    'as_columns',
]
