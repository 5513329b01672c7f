"""Data models for a host base snapshot (tables, fields, views, records)."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from view_export.domain.entities import Column


class FieldModel(BaseModel):
    """One table field."""

    id: str = Field(..., description="Host field ID")
    name: str = Field(..., description="Display name (may repeat)")
    type: Optional[str] = Field(None, description="Host field type, e.g. singleSelect")


class ViewModel(BaseModel):
    """A view over a table: which fields are visible, in which order."""

    id: str = Field(..., description="Host view ID")
    name: str = Field(..., description="View display name")
    visible_field_ids: List[str] = Field(
        default_factory=list,
        description="Visible fields in display order; empty means all table fields"
    )

    def visible_fields(self, table: "TableModel") -> List[FieldModel]:
        """Fields shown by this view, falling back to all table fields."""
        if not self.visible_field_ids:
            return list(table.fields)
        by_id = {f.id: f for f in table.fields}
        return [by_id[fid] for fid in self.visible_field_ids if fid in by_id]


class RecordModel(BaseModel):
    """One record: raw cell values keyed by field ID."""

    id: str = Field(..., description="Host record ID")
    cells: Dict[str, Any] = Field(default_factory=dict)


class TableModel(BaseModel):
    """A table with its fields, views and records."""

    id: str
    name: str
    fields: List[FieldModel] = Field(default_factory=list)
    views: List[ViewModel] = Field(default_factory=list)
    records: List[RecordModel] = Field(default_factory=list)

    def get_view_by_id_if_exists(self, view_id: Optional[str]) -> Optional[ViewModel]:
        if not view_id:
            return None
        for view in self.views:
            if view.id == view_id:
                return view
        return None

    def columns_for(self, view: ViewModel) -> List[Column]:
        """Export columns for a view, addressed by field ID."""
        return [
            Column(name=f.name, position=idx, field_id=f.id)
            for idx, f in enumerate(view.visible_fields(self))
        ]


class BaseSnapshot(BaseModel):
    """
    Snapshot of a host base.

    ``active_table_id``/``active_view_id`` record where the user's cursor was
    when the snapshot was taken.
    """

    name: Optional[str] = None
    tables: List[TableModel] = Field(default_factory=list)
    active_table_id: Optional[str] = None
    active_view_id: Optional[str] = None

    def get_table_by_id_if_exists(self, table_id: Optional[str]) -> Optional[TableModel]:
        if not table_id:
            return None
        for table in self.tables:
            if table.id == table_id:
                return table
        return None


def load_snapshot(path: Union[str, Path]) -> BaseSnapshot:
    """
    Load a base snapshot from a JSON file.

    Raises:
        FileNotFoundError: if the file does not exist
        pydantic.ValidationError: if the JSON does not match the schema
    """
    text = Path(path).read_text(encoding="utf-8")
    return BaseSnapshot.model_validate_json(text)
