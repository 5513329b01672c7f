"""
Tests for the cell value normalizer.

Covers the four rules in order and totality over every host value shape.
"""

from datetime import date, datetime
from types import SimpleNamespace

import pytest

from view_export.domain.entities import Column
from view_export.exporters.normalizer import CellNormalizer, normalize
from view_export.exporters.rows import MappingRow


class TestNormalizeRules:
    """Rule order: None, list, named object, string coercion."""

    def test_none_is_empty(self):
        """None renders as empty string."""
        assert normalize(None) == ""

    def test_list_of_named_objects_joined(self):
        """Multi-selects join their names with comma-space."""
        assert normalize([{"name": "VIP"}, {"name": "New"}]) == "VIP, New"

    def test_list_of_scalars_joined(self):
        """Plain list elements are stringified."""
        assert normalize([1, "two", 3.5]) == "1, two, 3.5"

    def test_empty_list(self):
        """Empty multi-value cell is empty string."""
        assert normalize([]) == ""

    def test_named_mapping(self):
        """Collaborator-like objects render their name."""
        assert normalize({"id": "usr1", "name": "Dana"}) == "Dana"

    def test_named_attribute_object(self):
        """Objects with a name attribute render it."""
        assert normalize(SimpleNamespace(name="Linked record")) == "Linked record"

    def test_falsy_name_falls_through(self):
        """An empty name is not used; the object is stringified instead."""
        value = {"name": "", "id": "x"}
        assert normalize(value) == str(value)

    def test_whole_float_drops_decimal(self):
        """2024.0 renders like an integer."""
        assert normalize(2024.0) == "2024"

    def test_fractional_float(self):
        assert normalize(2.5) == "2.5"

    def test_int(self):
        assert normalize(42) == "42"

    def test_bool(self):
        assert normalize(True) == "True"

    def test_date_isoformat(self):
        """Dates use their ISO form."""
        assert normalize(date(2024, 1, 5)) == "2024-01-05"

    def test_datetime_isoformat(self):
        assert normalize(datetime(2024, 1, 5, 9, 30)) == "2024-01-05T09:30:00"

    def test_string_unchanged(self):
        """Strings pass through, including quotes and commas."""
        assert normalize('He said "hi", twice') == 'He said "hi", twice'


class TestNormalizeTotality:
    """normalize() never raises for any host value shape."""

    @pytest.mark.parametrize("value", [
        None,
        0,
        -1.25,
        "",
        "text",
        False,
        {"name": "named"},
        {"id": "no-name"},
        [None, 1, "a", {"name": "b"}, {"id": "c"}],
        [[1, 2], [{"name": "x"}]],
        (1, 2),
        object(),
    ])
    def test_never_raises(self, value):
        """Every value produces a string."""
        assert isinstance(normalize(value), str)

    def test_nested_list_flattened(self):
        """Nested lists recurse through the list rule."""
        assert normalize([[1, 2], {"name": "x"}]) == "1, 2, x"

    def test_none_element_in_list(self):
        """None elements render empty."""
        assert normalize(["a", None, "b"]) == "a, , b"

    def test_broken_name_property(self):
        """A name property that raises does not break normalization."""

        class Broken:
            @property
            def name(self):
                raise RuntimeError("boom")

            def __str__(self):
                return "broken"

        assert normalize(Broken()) == "broken"


class TestCellNormalizer:
    """Host string accessor preference."""

    def test_prefers_host_string(self):
        """Host-formatted strings win over raw values."""

        class Row:
            def cell_value_as_string(self, column):
                return "$1,000.00"

            def cell_value_raw(self, column):
                return 1000

        col = Column("Amount", 0)
        assert CellNormalizer().cell(Row(), col) == "$1,000.00"
        assert CellNormalizer(prefer_host_strings=False).cell(Row(), col) == "1000"

    def test_host_string_none_becomes_empty(self):
        """A host accessor returning None still yields ''."""

        class Row:
            def cell_value_as_string(self, column):
                return None

            def cell_value_raw(self, column):
                return None

        assert CellNormalizer().cell(Row(), Column("X", 0)) == ""

    def test_mapping_row(self):
        """MappingRow looks values up by column name."""
        row = MappingRow({"Tags": [{"name": "A"}, {"name": "B"}]})
        assert CellNormalizer().cell(row, Column("Tags", 0)) == "A, B"
