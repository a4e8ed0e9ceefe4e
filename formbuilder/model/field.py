"""Form field model definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re
import uuid

DEFAULT_FIELD_NAME = "Field"


class FieldType(str, Enum):
    SINGLE_LINE = "singleLine"
    MULTI_LINE = "multiLine"
    ITEM_SELECT = "itemSelect"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    DATE = "date"

    @property
    def label(self) -> str:
        words = re.sub(r"([A-Z])", r" \1", self.value).strip()
        return words[:1].upper() + words[1:]


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class Field:
    id: str
    field_name: str
    field_type: FieldType


def new_field(field_type: FieldType | str) -> Field:
    """Create a field of ``field_type`` with a fresh id and the default label.

    Raises ``ValueError`` for anything outside the ``FieldType`` enumeration.
    """
    return Field(id=new_id(), field_name=DEFAULT_FIELD_NAME, field_type=FieldType(field_type))
