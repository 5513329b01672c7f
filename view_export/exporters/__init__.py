"""
Export utilities for tabular host data.

Provides:
- normalize / CellNormalizer: flatten raw cell values to strings
- build_grid: (columns, rows) -> ExportGrid
- CSVWriter / to_csv: fully quoted CSV text
- ExcelTableExporter / to_xlsx: single-sheet XLSX bytes
- resolve_filename / default_basename: suggested filenames
- TabularExporter: the whole pipeline
"""

from view_export.exporters.normalizer import normalize, CellNormalizer
from view_export.exporters.rows import (
    MappingRow,
    SequenceRow,
    rows_from_records,
    rows_from_dataframe,
    columns_from_dataframe,
)
from view_export.exporters.grid_builder import build_grid
from view_export.exporters.csv_writer import CSVWriter, to_csv, get_csv_writer
from view_export.exporters.excel_exporter import (
    ExcelTableExporter,
    to_xlsx,
    get_excel_exporter,
    reset_excel_exporter,
)
from view_export.exporters.filename_resolver import (
    resolve_filename,
    default_basename,
    sanitize_filename,
    format_export_date,
)
from view_export.exporters.tabular_exporter import (
    TabularExporter,
    get_tabular_exporter,
    reset_tabular_exporter,
)

__all__ = [
    'normalize',
    'CellNormalizer',
    'MappingRow',
    'SequenceRow',
    'rows_from_records',
    'rows_from_dataframe',
    'columns_from_dataframe',
    'build_grid',
    'CSVWriter',
    'to_csv',
    'get_csv_writer',
    'ExcelTableExporter',
    'to_xlsx',
    'get_excel_exporter',
    'reset_excel_exporter',
    'resolve_filename',
    'default_basename',
    'sanitize_filename',
    'format_export_date',
    'TabularExporter',
    'get_tabular_exporter',
    'reset_tabular_exporter',
]
