"""Tests for persisted form blob encoding."""

from __future__ import annotations

import json

import pytest

from formbuilder.layout.edits import delete_field
from formbuilder.layout.placement import DROP_AREA_ID, resolve_drop
from formbuilder.model.document import EMPTY_DOCUMENT
from formbuilder.model.field import FieldType
from formbuilder.storage.codec import (
    CorruptPersistedForm,
    LoadStatus,
    dump_document,
    load_document,
)


def test_blob_layout(two_row_document):
    assert json.loads(dump_document(two_row_document)) == [
        {
            "id": "row-1",
            "rowData": [{"id": "field-name", "fieldName": "Full name", "fieldType": "singleLine"}],
        },
        {
            "id": "row-2",
            "rowData": [
                {"id": "field-agree", "fieldName": "Agree", "fieldType": "checkbox"},
                {"id": "field-date", "fieldName": "Signed on", "fieldType": "date"},
            ],
        },
    ]


def test_round_trip(two_row_document):
    result = load_document(dump_document(two_row_document))
    assert result.status is LoadStatus.LOADED
    assert result.found
    assert result.document == two_row_document


def test_round_trip_of_generated_document():
    document = EMPTY_DOCUMENT
    for field_type in FieldType:
        document = resolve_drop(document, DROP_AREA_ID, field_type)
        document = resolve_drop(document, document.rows[-1].id, FieldType.MULTI_LINE)

    assert load_document(dump_document(document)).document == document


def test_round_trip_keeps_empty_rows(two_row_document):
    document = delete_field(two_row_document, "row-1", "field-name")
    assert load_document(dump_document(document)).document == document


@pytest.mark.parametrize("blob", [None, "", "   ", "[]"])
def test_nothing_saved(blob):
    result = load_document(blob)
    assert result.status is LoadStatus.NO_SAVED_FORM
    assert result.document == EMPTY_DOCUMENT


def test_accepts_bytes(two_row_document):
    blob = dump_document(two_row_document).encode("utf-8")
    assert load_document(blob).document == two_row_document


@pytest.mark.parametrize(
    "blob",
    [
        "{not json",
        '{"id": "row-1"}',
        '[{"id": "row-1"}]',
        '[{"id": "row-1", "rowData": [{"id": "f", "fieldName": "A", "fieldType": "slider"}]}]',
        '[{"id": "row-1", "rowData": [{"id": 7, "fieldName": "A", "fieldType": "date"}]}]',
    ],
)
def test_malformed_blob(blob):
    with pytest.raises(CorruptPersistedForm):
        load_document(blob)


def test_duplicate_ids_are_corrupt():
    blob = json.dumps(
        [
            {"id": "row-1", "rowData": [{"id": "f", "fieldName": "A", "fieldType": "date"}]},
            {"id": "row-2", "rowData": [{"id": "f", "fieldName": "B", "fieldType": "date"}]},
        ]
    )
    with pytest.raises(CorruptPersistedForm):
        load_document(blob)
