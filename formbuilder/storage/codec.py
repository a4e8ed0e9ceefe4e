"""Serialize form documents to and from persisted JSON blobs.

The blob is a JSON list of rows in display order::

    [{"id": "...", "rowData": [{"id": "...", "fieldName": "...", "fieldType": "singleLine"}]}]

Undo/redo history is never part of the blob.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from formbuilder.model.document import EMPTY_DOCUMENT, FormDocument, Row
from formbuilder.model.field import Field, FieldType


class CorruptPersistedForm(ValueError):
    """Raised when a persisted blob does not parse into a form document."""


class LoadStatus(str, Enum):
    LOADED = "loaded"
    NO_SAVED_FORM = "no_saved_form"


@dataclass(frozen=True, slots=True)
class LoadResult:
    document: FormDocument
    status: LoadStatus

    @property
    def found(self) -> bool:
        return self.status is LoadStatus.LOADED


class PersistedField(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    field_name: str
    field_type: FieldType


class PersistedRow(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    row_data: list[PersistedField]


_ROWS_ADAPTER = TypeAdapter(list[PersistedRow])


def dump_document(document: FormDocument) -> str:
    rows = [
        PersistedRow(
            id=row.id,
            row_data=[
                PersistedField(id=field.id, field_name=field.field_name, field_type=field.field_type)
                for field in row.fields
            ],
        )
        for row in document.rows
    ]
    return _ROWS_ADAPTER.dump_json(rows, by_alias=True).decode("utf-8")


def load_document(blob: str | bytes | None) -> LoadResult:
    if blob is None or not blob.strip():
        return LoadResult(EMPTY_DOCUMENT, LoadStatus.NO_SAVED_FORM)

    try:
        persisted = _ROWS_ADAPTER.validate_json(blob)
    except ValidationError as exc:
        raise CorruptPersistedForm("Persisted form data is malformed") from exc

    if not persisted:
        return LoadResult(EMPTY_DOCUMENT, LoadStatus.NO_SAVED_FORM)

    document = FormDocument(
        rows=tuple(
            Row(
                id=row.id,
                fields=tuple(
                    Field(id=item.id, field_name=item.field_name, field_type=item.field_type)
                    for item in row.row_data
                ),
            )
            for row in persisted
        )
    )

    duplicates = document.duplicate_ids()
    if duplicates:
        raise CorruptPersistedForm(f"Persisted form repeats ids: {sorted(duplicates)}")
    return LoadResult(document, LoadStatus.LOADED)
