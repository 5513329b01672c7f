"""
Tests for tabular_exporter.py.

End-to-end core behavior: payload, filename, MIME type, record count and
the empty-export policy.
"""

import io
from datetime import date

import pytest
from openpyxl import load_workbook

from view_export.core.exceptions import (
    MissingSelectionError,
    NoDataError,
    UnsupportedFormatError,
)
from view_export.domain.entities import ExportFormat, ExportRequest
from view_export.exporters.tabular_exporter import (
    TabularExporter,
    get_tabular_exporter,
    reset_tabular_exporter,
)
from view_export.utils.constants import CSV_MIME_TYPE, XLSX_MIME_TYPE


TODAY = date(2024, 1, 1)


class TestCsvExport:
    """CSV payloads."""

    def test_scenario(self, scenario_rows):
        result = TabularExporter().export(
            ["Name", "Tags"], scenario_rows,
            ExportRequest(format="csv"),
            table_name="Table", view_name="View", today=TODAY,
        )
        assert result.content.decode("utf-8") == (
            '"Name","Tags"\n"Alice","VIP, New"\n"Bob",""'
        )
        assert result.suggested_filename == "Table_View_2024-01-01.csv"
        assert result.mime_type == CSV_MIME_TYPE
        assert result.record_count == 2
        assert result.format is ExportFormat.CSV

    def test_custom_filename(self, scenario_rows):
        result = TabularExporter().export(
            ["Name", "Tags"], scenario_rows,
            ExportRequest(format="csv", filename="people"),
            today=TODAY,
        )
        assert result.suggested_filename == "people.csv"

    def test_zero_rows_allowed_by_default(self):
        result = TabularExporter().export(["Name", "Tags"], [], ExportRequest(format="csv"))
        assert result.content == b'"Name","Tags"'
        assert result.record_count == 0


class TestXlsxExport:
    """XLSX payloads."""

    def test_workbook_payload(self, scenario_rows):
        result = TabularExporter().export(
            ["Name", "Tags"], scenario_rows,
            ExportRequest(format="xlsx"),
            table_name="Tasks", view_name="Grid view", today=TODAY,
        )
        assert result.mime_type == XLSX_MIME_TYPE
        assert result.suggested_filename == "Tasks_Grid view_2024-01-01.xlsx"
        wb = load_workbook(io.BytesIO(result.content))
        # View name doubles as the sheet name
        assert wb.sheetnames == ["Grid view"]
        assert wb.active["B2"].value == "VIP, New"

    def test_explicit_sheet_name_wins(self, scenario_rows):
        result = TabularExporter().export(
            ["Name", "Tags"], scenario_rows,
            ExportRequest(format="excel", sheet_name="People"),
            view_name="Grid view",
        )
        wb = load_workbook(io.BytesIO(result.content))
        assert wb.sheetnames == ["People"]

    def test_zero_rows_workbook(self):
        result = TabularExporter().export(["Name", "Tags"], [], ExportRequest(format="xlsx"))
        ws = load_workbook(io.BytesIO(result.content)).active
        assert ws.max_row == 1
        assert result.record_count == 0


class TestPolicies:
    """Caller-selected policies and precondition failures."""

    def test_require_rows(self):
        with pytest.raises(NoDataError):
            TabularExporter().export(
                ["Name"], [], ExportRequest(format="csv", require_rows=True)
            )

    def test_missing_columns(self, scenario_rows):
        with pytest.raises(MissingSelectionError):
            TabularExporter().export(None, scenario_rows, ExportRequest())

    def test_unsupported_format(self):
        with pytest.raises(UnsupportedFormatError):
            ExportRequest(format="pdf")

    def test_default_request_is_csv(self, scenario_rows):
        result = TabularExporter().export(["Name"], scenario_rows)
        assert result.format is ExportFormat.CSV


class TestExporterSingleton:
    """Singleton accessor."""

    def test_returns_instance(self):
        assert isinstance(get_tabular_exporter(), TabularExporter)

    def test_singleton(self):
        assert get_tabular_exporter() is get_tabular_exporter()

    def test_reset(self):
        first = get_tabular_exporter()
        reset_tabular_exporter()
        assert get_tabular_exporter() is not first
