"""
Export Step - resolve selection, query records, export, save.

This is the collaborator around the pure export core: it owns the host query
lifetime, the empty-export policy, the file write and the user-facing message.
"""

import time
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

from view_export.config.settings import settings
from view_export.core.exceptions import ViewExportException
from view_export.core.interfaces import ActiveSelectionProvider
from view_export.domain.entities import ExportRequest, ExportResult
from view_export.exporters.tabular_exporter import TabularExporter, get_tabular_exporter
from view_export.host.models import BaseSnapshot
from view_export.host.query import select_records
from view_export.pipeline.base import StepInterface, StepResult, StepStatus
from view_export.utils import get_logger, set_correlation_id

logger = get_logger(__name__)


@dataclass
class ExportContext:
    """Inputs for one export run."""

    snapshot: Optional[BaseSnapshot]
    output_dir: Optional[str] = None
    today: Optional[date] = None


class ExportStep(StepInterface):
    """
    Export the active view of a snapshot to a file.

    Reads: context.snapshot, context.output_dir
    Writes: one CSV/XLSX file named by the resolved filename
    """

    name = "export"

    def __init__(
        self,
        provider: ActiveSelectionProvider,
        request: ExportRequest,
        exporter: Optional[TabularExporter] = None
    ):
        self.provider = provider
        self.request = request
        self.exporter = exporter or get_tabular_exporter()

    def validate(self, context: ExportContext) -> bool:
        """Validate a snapshot is loaded."""
        if context.snapshot is None:
            logger.error("No base snapshot provided for export")
            return False
        return True

    def get_step_info(self) -> Dict[str, Any]:
        """Get step metadata."""
        return {
            "name": self.name,
            "description": "Export the selected table view to CSV or Excel",
            "reads": ["context.snapshot", "context.output_dir"],
            "writes": [f"{self.request.format.value.upper()} file"],
            "selection_strategy": getattr(self.provider, "name", type(self.provider).__name__),
            "format": self.request.format.value,
        }

    def execute(self, context: ExportContext) -> StepResult:
        """Run the export and capture any failure in the result."""
        set_correlation_id()
        started = time.perf_counter()

        if not self.validate(context):
            return StepResult(
                step_name=self.name,
                status=StepStatus.FAILED,
                error="No base snapshot loaded",
            )

        try:
            selection = self.provider.resolve(context.snapshot)
            logger.info(f"Exporting {selection.table_name} -> {selection.view_name}")

            with select_records(selection.table, selection.view) as query:
                result = self.exporter.export(
                    query.columns,
                    query.records,
                    self.request,
                    table_name=selection.table_name,
                    view_name=selection.view_name,
                    today=context.today,
                )

            path = write_export(result, context.output_dir)
        except ViewExportException as e:
            logger.error(f"{self.request.format.label} export failed: {e}")
            return StepResult(
                step_name=self.name,
                status=StepStatus.FAILED,
                error=f"{self.request.format.label} export failed: {e}",
                duration_ms=(time.perf_counter() - started) * 1000,
            )
        except OSError as e:
            logger.error(f"Failed to save export file: {e}")
            return StepResult(
                step_name=self.name,
                status=StepStatus.FAILED,
                error=f"Failed to save file: {e}",
                duration_ms=(time.perf_counter() - started) * 1000,
            )

        message = (
            f"Successfully exported {result.record_count} records "
            f"to {result.format.label}"
        )
        logger.info(f"{message}: {path}")

        return StepResult(
            step_name=self.name,
            status=StepStatus.SUCCESS,
            data=result,
            message=message,
            metadata={
                "path": str(path),
                "table": selection.table_name,
                "view": selection.view_name,
                "record_count": result.record_count,
                "mime_type": result.mime_type,
                "size_bytes": result.size_bytes,
            },
            duration_ms=(time.perf_counter() - started) * 1000,
        )


def write_export(result: ExportResult, output_dir: Optional[str] = None) -> Path:
    """
    Save an export payload under its suggested filename.

    Args:
        result: Export payload
        output_dir: Target directory (default: settings.EXPORT_OUTPUT_DIR)

    Returns:
        Path of the written file
    """
    directory = Path(output_dir or settings.EXPORT_OUTPUT_DIR)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / result.suggested_filename
    path.write_bytes(result.content)
    logger.debug(f"Wrote {result.size_bytes} bytes to {path}")
    return path
