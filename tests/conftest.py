"""
Pytest configuration and fixtures for form builder tests.
"""

from __future__ import annotations

import os

import pytest

from formbuilder.model.document import FormDocument, Row
from formbuilder.model.field import Field, FieldType
from formbuilder.state.session import EditorSession
from formbuilder.storage.blob_store import MemoryBlobStore


@pytest.fixture
def name_field() -> Field:
    return Field(id="field-name", field_name="Full name", field_type=FieldType.SINGLE_LINE)


@pytest.fixture
def two_row_document(name_field: Field) -> FormDocument:
    """Two rows: a single text field, then a checkbox next to a date."""
    return FormDocument(
        rows=(
            Row(id="row-1", fields=(name_field,)),
            Row(
                id="row-2",
                fields=(
                    Field(id="field-agree", field_name="Agree", field_type=FieldType.CHECKBOX),
                    Field(id="field-date", field_name="Signed on", field_type=FieldType.DATE),
                ),
            ),
        )
    )


@pytest.fixture
def store() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def session(store: MemoryBlobStore) -> EditorSession:
    return EditorSession(store=store)


@pytest.fixture(scope="session")
def qapp():
    """Headless QApplication shared by widget and image tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
