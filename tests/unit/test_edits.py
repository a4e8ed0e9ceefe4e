"""Tests for field and row edit operations."""

from __future__ import annotations

from formbuilder.layout.edits import delete_field, delete_row, rename_field


class TestRenameField:
    def test_renames_only_target(self, two_row_document):
        document = rename_field(two_row_document, "row-2", "field-date", "Date of birth")

        row = document.find_row("row-2")
        assert row.find_field("field-date").field_name == "Date of birth"
        assert row.find_field("field-agree").field_name == "Agree"
        assert document.rows[0] is two_row_document.rows[0]
        assert two_row_document.find_row("row-2").find_field("field-date").field_name == "Signed on"

    def test_unknown_row_is_noop(self, two_row_document):
        assert rename_field(two_row_document, "row-x", "field-date", "X") is two_row_document

    def test_field_in_other_row_is_noop(self, two_row_document):
        assert rename_field(two_row_document, "row-1", "field-date", "X") is two_row_document


class TestDeleteField:
    def test_removes_field_and_keeps_order(self, two_row_document):
        document = delete_field(two_row_document, "row-2", "field-agree")
        assert [field.id for field in document.find_row("row-2").fields] == ["field-date"]

    def test_row_kept_when_emptied(self, two_row_document):
        document = delete_field(two_row_document, "row-1", "field-name")
        assert len(document.rows) == 2
        assert document.find_row("row-1").fields == ()

    def test_stale_ids_are_noops(self, two_row_document):
        assert delete_field(two_row_document, "row-1", "field-agree") is two_row_document
        assert delete_field(two_row_document, "row-9", "field-name") is two_row_document


class TestDeleteRow:
    def test_leaves_remaining_row(self, two_row_document):
        document = delete_row(two_row_document, "row-1")
        assert document.rows == (two_row_document.rows[1],)

    def test_unknown_row_is_noop(self, two_row_document):
        assert delete_row(two_row_document, "row-9") is two_row_document

    def test_repeated_delete_is_idempotent(self, two_row_document):
        once = delete_row(two_row_document, "row-2")
        assert delete_row(once, "row-2") is once
