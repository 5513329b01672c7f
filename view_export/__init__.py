"""
view_export - export host table views to CSV or XLSX.

Quick use:
    from view_export import TabularExporter, ExportRequest, MappingRow

    rows = [MappingRow({"Name": "Alice", "Tags": [{"name": "VIP"}]})]
    result = TabularExporter().export(["Name", "Tags"], rows, ExportRequest(format="csv"))
"""

from view_export.core.exceptions import (
    ViewExportException,
    NoDataError,
    MissingSelectionError,
    SerializationError,
    UnsupportedFormatError,
)
from view_export.domain.entities import (
    Column,
    ExportFormat,
    ExportGrid,
    ExportRequest,
    ExportResult,
)
from view_export.exporters import (
    normalize,
    build_grid,
    to_csv,
    to_xlsx,
    resolve_filename,
    default_basename,
    MappingRow,
    SequenceRow,
    TabularExporter,
    get_tabular_exporter,
)

__version__ = "0.3.0"

__all__ = [
    'ViewExportException',
    'NoDataError',
    'MissingSelectionError',
    'SerializationError',
    'UnsupportedFormatError',
    'Column',
    'ExportFormat',
    'ExportGrid',
    'ExportRequest',
    'ExportResult',
    'normalize',
    'build_grid',
    'to_csv',
    'to_xlsx',
    'resolve_filename',
    'default_basename',
    'MappingRow',
    'SequenceRow',
    'TabularExporter',
    'get_tabular_exporter',
]
