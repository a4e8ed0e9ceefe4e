"""Row and form document models."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from formbuilder.model.field import Field, new_id


@dataclass(frozen=True, slots=True)
class Row:
    id: str
    fields: tuple[Field, ...] = ()

    def find_field(self, field_id: str) -> Field | None:
        for field in self.fields:
            if field.id == field_id:
                return field
        return None


@dataclass(frozen=True, slots=True)
class FormDocument:
    rows: tuple[Row, ...] = ()

    @property
    def field_count(self) -> int:
        return sum(len(row.fields) for row in self.rows)

    def find_row(self, row_id: str) -> Row | None:
        for row in self.rows:
            if row.id == row_id:
                return row
        return None

    def all_fields(self) -> list[Field]:
        merged: list[Field] = []
        for row in self.rows:
            merged.extend(row.fields)
        return merged

    def ids(self) -> list[str]:
        collected = [row.id for row in self.rows]
        collected.extend(field.id for field in self.all_fields())
        return collected

    def duplicate_ids(self) -> set[str]:
        return {value for value, count in Counter(self.ids()).items() if count > 1}


EMPTY_DOCUMENT = FormDocument()


def new_row(initial_field: Field) -> Row:
    return Row(id=new_id(), fields=(initial_field,))
