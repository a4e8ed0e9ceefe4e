"""Field and row edit operations.

Each operation is pure and total. Ids that no longer exist in the document
return the input document itself, so callers can detect a no-op with ``is``.
"""

from __future__ import annotations

from dataclasses import replace

from formbuilder.model.document import FormDocument, Row


def rename_field(
    document: FormDocument,
    row_id: str,
    field_id: str,
    new_name: str,
) -> FormDocument:
    row = document.find_row(row_id)
    if row is None:
        return document
    field = row.find_field(field_id)
    if field is None:
        return document

    renamed = replace(field, field_name=new_name)
    fields = tuple(renamed if item.id == field_id else item for item in row.fields)
    return _replace_row(document, replace(row, fields=fields))


def delete_field(document: FormDocument, row_id: str, field_id: str) -> FormDocument:
    # Rows left empty stay in place until deleted explicitly.
    row = document.find_row(row_id)
    if row is None or row.find_field(field_id) is None:
        return document

    fields = tuple(item for item in row.fields if item.id != field_id)
    return _replace_row(document, replace(row, fields=fields))


def delete_row(document: FormDocument, row_id: str) -> FormDocument:
    if document.find_row(row_id) is None:
        return document
    return FormDocument(rows=tuple(row for row in document.rows if row.id != row_id))


def _replace_row(document: FormDocument, updated: Row) -> FormDocument:
    return FormDocument(
        rows=tuple(updated if row.id == updated.id else row for row in document.rows)
    )
