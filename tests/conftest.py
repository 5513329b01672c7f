"""Shared fixtures: a small host base snapshot and plain rows."""

import json

import pytest

from view_export.exporters.rows import MappingRow
from view_export.host.models import BaseSnapshot


SNAPSHOT_DATA = {
    "name": "Project Tracker",
    "active_table_id": "tblTasks",
    "active_view_id": "viwOpen",
    "tables": [
        {
            "id": "tblTasks",
            "name": "Tasks",
            "fields": [
                {"id": "fldName", "name": "Name", "type": "singleLineText"},
                {"id": "fldTags", "name": "Tags", "type": "multipleSelects"},
                {"id": "fldOwner", "name": "Owner", "type": "singleCollaborator"},
                {"id": "fldEst", "name": "Estimate", "type": "number"},
            ],
            "views": [
                {"id": "viwAll", "name": "All tasks", "visible_field_ids": []},
                {"id": "viwOpen", "name": "Open/Active", "visible_field_ids": ["fldName", "fldTags"]},
            ],
            "records": [
                {
                    "id": "rec1",
                    "cells": {
                        "fldName": "Alice",
                        "fldTags": [{"name": "VIP"}, {"name": "New"}],
                        "fldOwner": {"id": "usr1", "name": "Dana"},
                        "fldEst": 3.0,
                    },
                },
                {"id": "rec2", "cells": {"fldName": "Bob", "fldTags": None}},
            ],
        },
        {
            "id": "tblArchive",
            "name": "Archive",
            "fields": [{"id": "fldTitle", "name": "Title"}],
            "views": [{"id": "viwGrid", "name": "Grid view"}],
            "records": [],
        },
    ],
}


@pytest.fixture
def snapshot_data():
    """Raw snapshot dict (deep copy per test)."""
    return json.loads(json.dumps(SNAPSHOT_DATA))


@pytest.fixture
def snapshot(snapshot_data):
    return BaseSnapshot.model_validate(snapshot_data)


@pytest.fixture
def snapshot_file(tmp_path, snapshot_data):
    path = tmp_path / "base.json"
    path.write_text(json.dumps(snapshot_data), encoding="utf-8")
    return path


@pytest.fixture
def scenario_rows():
    """Rows of the Name/Tags example."""
    return [
        MappingRow({"Name": "Alice", "Tags": [{"name": "VIP"}, {"name": "New"}]}),
        MappingRow({"Name": "Bob", "Tags": None}),
    ]
