"""
Filename Resolver.

Default names follow ``{table}_{view}_{YYYY-MM-DD}``; custom names are
sanitized and given exactly one extension matching the export format.
"""

import re
from datetime import date
from typing import Optional, Union

from view_export.config.settings import settings
from view_export.domain.entities import ExportFormat
from view_export.utils.constants import (
    CSV_EXTENSION,
    FILENAME_INVALID_CHARS,
    FILENAME_REPLACEMENT,
    UNKNOWN_NAME,
    XLSX_EXTENSION,
)


def format_export_date(today: Optional[date] = None) -> str:
    """Export date as YYYY-MM-DD (zero-padded)."""
    return (today or date.today()).strftime(settings.EXPORT_DATE_FORMAT)


def default_basename(
    table_name: Optional[str],
    view_name: Optional[str],
    today: Optional[date] = None
) -> str:
    """
    Default filename base for a table/view export.

    Examples:
        default_basename("Tasks", "Grid view", date(2024, 1, 1))
        -> "Tasks_Grid view_2024-01-01"
    """
    table = table_name or UNKNOWN_NAME
    view = view_name or UNKNOWN_NAME
    return f"{table}_{view}_{format_export_date(today)}"


def sanitize_filename(name: str) -> str:
    """Replace each run of / \\ ? % * : | \" < > with '-'."""
    return re.sub(FILENAME_INVALID_CHARS, FILENAME_REPLACEMENT, name)


def resolve_filename(
    custom_name: Optional[str],
    default_base: Optional[str],
    fmt: Union[ExportFormat, str]
) -> str:
    """
    Resolve the suggested filename for an export.

    Args:
        custom_name: User-supplied name; blank means "use the default"
        default_base: Caller-built default (see default_basename)
        fmt: Export format

    Returns:
        Sanitized filename ending in exactly one .csv/.xlsx extension
    """
    export_format = ExportFormat.from_value(fmt)

    name = (custom_name or "").strip()
    if not name:
        name = (default_base or "").strip()
    if not name:
        name = settings.EXPORT_FALLBACK_BASENAME

    name = sanitize_filename(name)

    extension = export_format.extension
    lowered = name.lower()
    if lowered.endswith(extension):
        return name

    # A valid-but-wrong extension is swapped rather than stacked
    for other in (CSV_EXTENSION, XLSX_EXTENSION):
        if other != extension and lowered.endswith(other) and len(name) > len(other):
            return name[:-len(other)] + extension

    return name + extension
