"""Tests for drop placement resolution."""

from __future__ import annotations

import pytest

from formbuilder.layout.placement import (
    DROP_AREA_ID,
    DropEvent,
    UnknownDropTarget,
    apply_drop,
    resolve_drop,
)
from formbuilder.model.document import EMPTY_DOCUMENT
from formbuilder.model.field import DEFAULT_FIELD_NAME, FieldType


def test_drop_on_surface_of_empty_document():
    document = resolve_drop(EMPTY_DOCUMENT, DROP_AREA_ID, FieldType.SINGLE_LINE)

    assert len(document.rows) == 1
    (field,) = document.rows[0].fields
    assert field.field_type is FieldType.SINGLE_LINE
    assert field.field_name == DEFAULT_FIELD_NAME


def test_drop_on_surface_appends_row_last(two_row_document):
    document = resolve_drop(two_row_document, DROP_AREA_ID, FieldType.MULTI_LINE)

    assert len(document.rows) == 3
    assert document.rows[:2] == two_row_document.rows
    assert [field.field_type for field in document.rows[2].fields] == [FieldType.MULTI_LINE]


def test_drop_on_row_appends_field(two_row_document, name_field):
    document = resolve_drop(two_row_document, "row-1", FieldType.CHECKBOX)

    assert len(document.rows) == 2
    row = document.find_row("row-1")
    assert len(row.fields) == 2
    assert row.fields[0] == name_field
    assert row.fields[1].field_type is FieldType.CHECKBOX
    assert document.rows[1] is two_row_document.rows[1]


def test_input_document_is_left_unchanged(two_row_document):
    before = two_row_document.rows
    resolve_drop(two_row_document, "row-2", FieldType.RADIO)
    resolve_drop(two_row_document, DROP_AREA_ID, FieldType.RADIO)
    assert two_row_document.rows is before
    assert len(two_row_document.find_row("row-2").fields) == 2


def test_unknown_target_raises(two_row_document):
    with pytest.raises(UnknownDropTarget) as excinfo:
        resolve_drop(two_row_document, "row-gone", FieldType.DATE)

    assert excinfo.value.container_id == "row-gone"
    assert two_row_document.field_count == 3


def test_unknown_type_fails_fast():
    with pytest.raises(ValueError):
        resolve_drop(EMPTY_DOCUMENT, DROP_AREA_ID, "slider")


def test_ids_stay_unique_across_placements():
    document = EMPTY_DOCUMENT
    for index, field_type in enumerate(list(FieldType) * 4):
        if index % 3 == 0 or not document.rows:
            target = DROP_AREA_ID
        else:
            target = document.rows[index % len(document.rows)].id
        document = resolve_drop(document, target, field_type)

    ids = document.ids()
    assert len(ids) == len(set(ids))
    assert document.field_count == len(FieldType) * 4


def test_apply_drop_uses_event_payload():
    event = DropEvent(target_container_id=DROP_AREA_ID, field_type=FieldType.ITEM_SELECT)
    document = apply_drop(EMPTY_DOCUMENT, event)
    assert document.rows[0].fields[0].field_type is FieldType.ITEM_SELECT
