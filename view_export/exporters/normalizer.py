"""
Cell Value Normalizer.

Flattens heterogeneous host cell values (single values, multi-selects, linked
records, lookups) into one human-readable string. Never raises.

Rules, first match wins:
1. None                      -> ''
2. list / tuple              -> elements through rule 3, joined with ', '
3. object with truthy name   -> str(name)
4. anything else             -> natural string form
"""

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from view_export.utils.constants import MULTI_VALUE_SEPARATOR


def _named_value(value: Any) -> Any:
    """Return the truthy ``name`` of a mapping or object, else None."""
    if isinstance(value, Mapping):
        try:
            name = value.get("name")
        except Exception:
            return None
        return name if name else None

    try:
        name = getattr(value, "name", None)
    except Exception:
        return None
    if name and not callable(name):
        return name
    return None


def _scalar_to_string(value: Any) -> str:
    """Natural string form of a scalar."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        # 2024.0 -> '2024'
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    try:
        return str(value)
    except Exception:
        return repr(value)


def _element_to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return normalize(value)
    name = _named_value(value)
    if name is not None:
        return _scalar_to_string(name)
    return _scalar_to_string(value)


def normalize(value: Any) -> str:
    """
    Normalize a raw cell value to its export string.

    Args:
        value: Raw host value (None, scalar, object with ``name``, or list of such)

    Returns:
        Flattened string; '' for absent values
    """
    if value is None:
        return ""

    if isinstance(value, (list, tuple)):
        return MULTI_VALUE_SEPARATOR.join(_element_to_string(item) for item in value)

    name = _named_value(value)
    if name is not None:
        return _scalar_to_string(name)

    return _scalar_to_string(value)


class CellNormalizer:
    """
    Normalizes cells read from a row handle.

    Prefers the host string accessor when ``prefer_host_strings`` is set, since
    it already carries host formatting (dates, currency, linked-record text).
    """

    def __init__(self, prefer_host_strings: bool = True):
        self.prefer_host_strings = prefer_host_strings

    def cell(self, row, column) -> str:
        if self.prefer_host_strings and hasattr(row, "cell_value_as_string"):
            text = row.cell_value_as_string(column)
            if text is None:
                return ""
            return text if isinstance(text, str) else normalize(text)
        return normalize(row.cell_value_raw(column))
