"""Main application window for building, previewing, and saving forms."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QSplitter,
    QToolBar,
)

from formbuilder import config
from formbuilder.layout.placement import UnknownDropTarget
from formbuilder.model.document import FormDocument
from formbuilder.pdf.renderer import PdfRenderError, render_preview_pages
from formbuilder.pdf.writer import PdfExportError
from formbuilder.state.session import EditorSession
from formbuilder.storage.blob_store import BlobStoreError, FileBlobStore
from formbuilder.storage.codec import CorruptPersistedForm, LoadStatus
from formbuilder.ui.preview_dialog import PdfPreviewDialog
from formbuilder.viewer.canvas import FormCanvas
from formbuilder.viewer.palette import FieldPalette


class MainWindow(QMainWindow):
    def __init__(self, session: EditorSession | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Form Builder")
        self.resize(1300, 850)

        self._session = session or EditorSession(
            store=FileBlobStore(config.STORE_DIR),
            storage_key=config.STORAGE_KEY,
        )

        self.palette_panel = FieldPalette()

        self.canvas = FormCanvas()
        self.canvas.field_dropped.connect(self._on_field_dropped)
        self.canvas.field_renamed.connect(self._on_field_renamed)
        self.canvas.field_deleted.connect(self._on_field_deleted)
        self.canvas.row_deleted.connect(self._on_row_deleted)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.scroll_area.setWidget(self.canvas)

        splitter = QSplitter()
        splitter.addWidget(self.palette_panel)
        splitter.addWidget(self.scroll_area)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 4)
        self.setCentralWidget(splitter)

        self._build_toolbar()
        self._render(self._session.document)
        self.statusBar().showMessage("Ready")

    def _build_toolbar(self) -> None:
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self._preview_action = QAction("Preview Form", self)
        self._preview_action.triggered.connect(self.toggle_preview)
        toolbar.addAction(self._preview_action)

        toolbar.addSeparator()

        new_action = QAction("New Form", self)
        new_action.setShortcut(QKeySequence.StandardKey.New)
        new_action.triggered.connect(self.new_form)
        toolbar.addAction(new_action)

        save_action = QAction("Save Form", self)
        save_action.setShortcut(QKeySequence.StandardKey.Save)
        save_action.triggered.connect(self.save_form)
        toolbar.addAction(save_action)

        load_action = QAction("Load Form", self)
        load_action.setShortcut(QKeySequence.StandardKey.Open)
        load_action.triggered.connect(self.load_form)
        toolbar.addAction(load_action)

        toolbar.addSeparator()

        self._undo_action = QAction("Undo", self)
        self._undo_action.setShortcut(QKeySequence.StandardKey.Undo)
        self._undo_action.triggered.connect(self.undo)
        toolbar.addAction(self._undo_action)

        self._redo_action = QAction("Redo", self)
        self._redo_action.setShortcut(QKeySequence.StandardKey.Redo)
        self._redo_action.triggered.connect(self.redo)
        toolbar.addAction(self._redo_action)

        toolbar.addSeparator()

        export_action = QAction("Export PDF", self)
        export_action.triggered.connect(self.export_pdf)
        toolbar.addAction(export_action)

        pdf_preview_action = QAction("PDF Preview", self)
        pdf_preview_action.triggered.connect(self.show_pdf_preview)
        toolbar.addAction(pdf_preview_action)

    def toggle_preview(self) -> None:
        preview = self._session.toggle_preview()
        self._preview_action.setText("Edit Form" if preview else "Preview Form")
        self._render(self._session.document)
        self.statusBar().showMessage("Preview mode" if preview else "Edit mode")

    def new_form(self) -> None:
        self._render(self._session.new_form())
        self.statusBar().showMessage("Started a new form")

    def save_form(self) -> None:
        try:
            self._session.save()
        except BlobStoreError as exc:
            QMessageBox.critical(self, "Save Failed", str(exc))
            return
        QMessageBox.information(self, "Save Form", "Form saved successfully!")

    def load_form(self) -> None:
        try:
            status = self._session.load()
        except (BlobStoreError, CorruptPersistedForm) as exc:
            QMessageBox.critical(self, "Load Failed", str(exc))
            return

        if status is LoadStatus.NO_SAVED_FORM:
            QMessageBox.information(self, "Load Form", "No saved form found!")
            return
        self._render(self._session.document)
        QMessageBox.information(self, "Load Form", "Form loaded successfully!")

    def undo(self) -> None:
        document = self._session.undo()
        if document is None:
            self.statusBar().showMessage("Nothing to undo.")
            return
        self._render(document)

    def redo(self) -> None:
        document = self._session.redo()
        if document is None:
            self.statusBar().showMessage("Nothing to redo.")
            return
        self._render(document)

    def export_pdf(self) -> None:
        output_path, _ = QFileDialog.getSaveFileName(
            self,
            "Export Form PDF",
            str(Path.home() / "form.pdf"),
            "PDF Files (*.pdf)",
        )
        if not output_path:
            return

        try:
            self._session.export_pdf(output_path, title=config.EXPORT_TITLE)
        except PdfExportError as exc:
            QMessageBox.critical(self, "Export Failed", str(exc))
            return
        self.statusBar().showMessage(f"Exported: {output_path}")

    def show_pdf_preview(self) -> None:
        try:
            pages = render_preview_pages(
                self._session.document,
                zoom=config.PREVIEW_ZOOM,
                title=config.EXPORT_TITLE,
            )
        except (PdfExportError, PdfRenderError) as exc:
            QMessageBox.critical(self, "Render Failed", str(exc))
            return
        PdfPreviewDialog(pages, self).exec()

    def _on_field_dropped(self, container_id: str, field_type: str) -> None:
        try:
            document = self._session.drop(container_id, field_type)
        except UnknownDropTarget:
            self.statusBar().showMessage("Drop target no longer exists.")
            return
        self._render(document)

    def _on_field_renamed(self, row_id: str, field_id: str, text: str) -> None:
        # The editor already shows the new text; re-rendering would drop focus.
        self._session.rename_field(row_id, field_id, text)

    def _on_field_deleted(self, row_id: str, field_id: str) -> None:
        self._render(self._session.delete_field(row_id, field_id))

    def _on_row_deleted(self, row_id: str) -> None:
        self._render(self._session.delete_row(row_id))

    def _render(self, document: FormDocument) -> None:
        self.canvas.set_document(document, preview=self._session.is_preview)
        self._undo_action.setEnabled(self._session.history.can_undo)
        self._redo_action.setEnabled(self._session.history.can_redo)
        self.statusBar().showMessage(
            f"{len(document.rows)} row(s), {document.field_count} field(s)"
        )
