"""In-memory editing session for a form layout."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from formbuilder.layout.edits import delete_field, delete_row, rename_field
from formbuilder.layout.placement import DropEvent, UnknownDropTarget, apply_drop
from formbuilder.model.document import EMPTY_DOCUMENT, FormDocument
from formbuilder.model.field import FieldType
from formbuilder.pdf.writer import write_form_pdf
from formbuilder.state.history import HistoryManager
from formbuilder.storage.blob_store import BlobStore
from formbuilder.storage.codec import (
    CorruptPersistedForm,
    LoadStatus,
    dump_document,
    load_document,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EditorSession:
    """Owns the current document, its history and the preview flag.

    Placements and deletions snapshot the current document before they
    apply; renames do not, so they cannot be undone.
    """

    store: BlobStore
    storage_key: str = "formData"
    document: FormDocument = EMPTY_DOCUMENT
    history: HistoryManager = field(default_factory=HistoryManager)
    is_preview: bool = False

    def drop(self, target_container_id: str, field_type: FieldType | str) -> FormDocument:
        event = DropEvent(target_container_id, FieldType(field_type))
        try:
            updated = apply_drop(self.document, event)
        except UnknownDropTarget:
            logger.warning("Rejected drop on unknown container %s", target_container_id)
            raise
        logger.debug("Placed %s on %s", event.field_type.value, target_container_id)
        return self._commit(updated)

    def rename_field(self, row_id: str, field_id: str, new_name: str) -> FormDocument:
        self.document = rename_field(self.document, row_id, field_id, new_name)
        return self.document

    def delete_field(self, row_id: str, field_id: str) -> FormDocument:
        updated = delete_field(self.document, row_id, field_id)
        if updated is self.document:
            logger.debug("Ignored delete of stale field %s in row %s", field_id, row_id)
            return self.document
        logger.debug("Deleted field %s from row %s", field_id, row_id)
        return self._commit(updated)

    def delete_row(self, row_id: str) -> FormDocument:
        updated = delete_row(self.document, row_id)
        if updated is self.document:
            logger.debug("Ignored delete of stale row %s", row_id)
            return self.document
        logger.debug("Deleted row %s", row_id)
        return self._commit(updated)

    def undo(self) -> FormDocument | None:
        previous = self.history.undo(self.document)
        if previous is not None:
            self.document = previous
        return previous

    def redo(self) -> FormDocument | None:
        following = self.history.redo(self.document)
        if following is not None:
            self.document = following
        return following

    def toggle_preview(self) -> bool:
        self.is_preview = not self.is_preview
        return self.is_preview

    def new_form(self) -> FormDocument:
        self.document = EMPTY_DOCUMENT
        self.history.clear()
        return self.document

    def save(self) -> None:
        self.store.set(self.storage_key, dump_document(self.document))
        logger.info(
            "Saved form with %d row(s) and %d field(s)",
            len(self.document.rows),
            self.document.field_count,
        )

    def load(self) -> LoadStatus:
        try:
            result = load_document(self.store.get(self.storage_key))
        except CorruptPersistedForm:
            logger.warning("Saved form under key %s is corrupt", self.storage_key)
            raise
        if not result.found:
            logger.info("No saved form under key %s", self.storage_key)
            return result.status

        self.document = result.document
        logger.info("Loaded form with %d row(s)", len(self.document.rows))
        return result.status

    def export_pdf(self, output_path: str | Path, title: str = "Form") -> None:
        write_form_pdf(self.document, output_path, title=title)
        logger.info("Exported form PDF to %s", output_path)

    def _commit(self, updated: FormDocument) -> FormDocument:
        self.history.begin_mutation(self.document)
        self.document = updated
        return updated
