"""
Integration tests: snapshot -> selection -> query -> export -> file.

Covers the export step and the command line.
"""

import io
from datetime import date

from openpyxl import load_workbook
from typer.testing import CliRunner

from view_export.domain.entities import ExportFormat, ExportRequest, ExportResult
from view_export.host.selection import (
    CursorTrackingSelectionProvider,
    ManualSelectionProvider,
)
from view_export.main import app
from view_export.pipeline.base import StepStatus
from view_export.pipeline.export_step import ExportContext, ExportStep, write_export

runner = CliRunner()

TODAY = date(2024, 1, 1)


class TestExportStep:
    """The export step end to end."""

    def test_cursor_export_to_xlsx(self, snapshot, tmp_path):
        step = ExportStep(CursorTrackingSelectionProvider(), ExportRequest(format="xlsx"))
        result = step.execute(ExportContext(snapshot, output_dir=str(tmp_path), today=TODAY))

        assert result.status == StepStatus.SUCCESS
        assert result.message == "Successfully exported 2 records to Excel"
        assert result.metadata["table"] == "Tasks"
        assert result.metadata["view"] == "Open/Active"

        path = tmp_path / "Tasks_Open-Active_2024-01-01.xlsx"
        assert result.metadata["path"] == str(path)
        ws = load_workbook(path).active
        assert ws.title == "OpenActive"
        assert [c.value for c in ws[1]] == ["Name", "Tags"]
        assert [c.value for c in ws[2]] == ["Alice", "VIP, New"]

    def test_manual_export_to_csv(self, snapshot, tmp_path):
        provider = ManualSelectionProvider("tblTasks", "viwAll")
        step = ExportStep(provider, ExportRequest(format="csv", filename="tasks"))
        result = step.execute(ExportContext(snapshot, output_dir=str(tmp_path), today=TODAY))

        assert result.success
        assert result.message == "Successfully exported 2 records to CSV"
        text = (tmp_path / "tasks.csv").read_text(encoding="utf-8")
        assert text == (
            '"Name","Tags","Owner","Estimate"\n'
            '"Alice","VIP, New","Dana","3"\n'
            '"Bob","","",""'
        )

    def test_empty_view_blocked(self, snapshot, tmp_path):
        provider = ManualSelectionProvider("tblArchive")
        step = ExportStep(provider, ExportRequest(format="xlsx", require_rows=True))
        result = step.execute(ExportContext(snapshot, output_dir=str(tmp_path)))

        assert result.failed
        assert result.error.startswith("Excel export failed: No records to export")
        assert not any(tmp_path.iterdir())

    def test_empty_view_allowed(self, snapshot, tmp_path):
        provider = ManualSelectionProvider("tblArchive")
        step = ExportStep(provider, ExportRequest(format="csv", require_rows=False))
        result = step.execute(ExportContext(snapshot, output_dir=str(tmp_path), today=TODAY))

        assert result.success
        assert result.message == "Successfully exported 0 records to CSV"
        assert (tmp_path / "Archive_Grid view_2024-01-01.csv").read_text() == '"Title"'

    def test_selection_failure_captured(self, snapshot, tmp_path):
        step = ExportStep(ManualSelectionProvider(None), ExportRequest(format="csv"))
        result = step.execute(ExportContext(snapshot, output_dir=str(tmp_path)))
        assert result.failed
        assert result.error == "CSV export failed: Please select a table and view"

    def test_missing_snapshot(self, tmp_path):
        step = ExportStep(CursorTrackingSelectionProvider(), ExportRequest())
        result = step.execute(ExportContext(None, output_dir=str(tmp_path)))
        assert result.failed

    def test_step_statuses(self):
        """Only the outcomes the export step reports exist."""
        assert {s.value for s in StepStatus} == {"success", "failed"}

    def test_step_info(self):
        step = ExportStep(CursorTrackingSelectionProvider(), ExportRequest(format="xlsx"))
        info = step.get_step_info()
        assert info["selection_strategy"] == "cursor"
        assert info["format"] == "xlsx"

    def test_write_export_creates_directory(self, tmp_path):
        result = ExportResult(
            content=b"abc",
            suggested_filename="out.csv",
            mime_type="text/csv",
            record_count=0,
            format=ExportFormat.CSV,
        )
        path = write_export(result, str(tmp_path / "nested" / "dir"))
        assert path.read_bytes() == b"abc"


class TestCli:
    """Command line behavior."""

    def test_export_xlsx(self, snapshot_file, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(
            app, ["export", str(snapshot_file), "-o", str(out), "-n", "report"]
        )
        assert result.exit_code == 0, result.output
        assert "Successfully exported 2 records to Excel" in result.output
        wb = load_workbook(io.BytesIO((out / "report.xlsx").read_bytes()))
        assert wb.active.max_row == 3

    def test_export_csv_manual(self, snapshot_file, tmp_path):
        result = runner.invoke(app, [
            "export", str(snapshot_file),
            "--format", "csv",
            "--strategy", "manual",
            "--table", "tblTasks",
            "--view", "viwOpen",
            "--filename", "open.csv",
            "--output-dir", str(tmp_path),
        ])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "open.csv").read_text(encoding="utf-8").startswith('"Name","Tags"')

    def test_empty_view_requires_flag(self, snapshot_file, tmp_path):
        args = [
            "export", str(snapshot_file), "-s", "manual", "-t", "tblArchive",
            "-f", "csv", "-n", "archive", "-o", str(tmp_path),
        ]
        blocked = runner.invoke(app, args + ["--require-records"])
        assert blocked.exit_code == 1
        assert "No records to export" in blocked.output

        allowed = runner.invoke(app, args + ["--allow-empty"])
        assert allowed.exit_code == 0, allowed.output
        assert (tmp_path / "archive.csv").exists()

    def test_bad_format(self, snapshot_file):
        result = runner.invoke(app, ["export", str(snapshot_file), "--format", "pdf"])
        assert result.exit_code == 1

    def test_bad_strategy(self, snapshot_file):
        result = runner.invoke(app, ["export", str(snapshot_file), "--strategy", "random"])
        assert result.exit_code == 1

    def test_missing_snapshot(self, tmp_path):
        result = runner.invoke(app, ["export", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Snapshot not found" in result.output

    def test_invalid_snapshot(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"tables": [{"id": 1}]}', encoding="utf-8")
        result = runner.invoke(app, ["inspect", str(path)])
        assert result.exit_code == 1

    def test_inspect(self, snapshot_file):
        result = runner.invoke(app, ["inspect", str(snapshot_file)])
        assert result.exit_code == 0, result.output
        assert "Tasks" in result.output
        assert "Archive" in result.output
        assert "Cursor: table=tblTasks view=viwOpen" in result.output
