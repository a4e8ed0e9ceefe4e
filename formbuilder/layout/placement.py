"""Resolve a field drop into the next form document."""

from __future__ import annotations

from dataclasses import dataclass, replace

from formbuilder.model.document import FormDocument, new_row
from formbuilder.model.field import FieldType, new_field

DROP_AREA_ID = "drop-area"


class UnknownDropTarget(LookupError):
    """Raised when a drop names a container that is not in the document."""

    def __init__(self, container_id: str) -> None:
        super().__init__(f"Unknown drop target: {container_id}")
        self.container_id = container_id


@dataclass(frozen=True, slots=True)
class DropEvent:
    target_container_id: str
    field_type: FieldType


def resolve_drop(
    document: FormDocument,
    target_container_id: str,
    field_type: FieldType | str,
) -> FormDocument:
    """Return the document that results from dropping ``field_type``.

    ``target_container_id`` must already be the nearest enclosing container:
    either ``DROP_AREA_ID`` for the top-level surface or the id of an
    existing row. The input document is never modified.
    """
    field = new_field(field_type)

    if target_container_id == DROP_AREA_ID:
        return FormDocument(rows=document.rows + (new_row(field),))

    rows = list(document.rows)
    for index, row in enumerate(rows):
        if row.id == target_container_id:
            rows[index] = replace(row, fields=row.fields + (field,))
            return FormDocument(rows=tuple(rows))

    raise UnknownDropTarget(target_container_id)


def apply_drop(document: FormDocument, event: DropEvent) -> FormDocument:
    return resolve_drop(document, event.target_container_id, event.field_type)
