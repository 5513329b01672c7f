"""Pipeline steps driving the export core from a host snapshot."""

from view_export.pipeline.base import StepInterface, StepResult, StepStatus
from view_export.pipeline.export_step import ExportContext, ExportStep, write_export

__all__ = [
    'StepInterface',
    'StepResult',
    'StepStatus',
    'ExportContext',
    'ExportStep',
    'write_export',
]
