"""Sidebar of draggable field types."""

from __future__ import annotations

from PySide6.QtCore import QMimeData, Qt
from PySide6.QtGui import QDrag
from PySide6.QtWidgets import QApplication, QLabel, QPushButton, QVBoxLayout, QWidget

from formbuilder.model.field import FieldType

FIELD_TYPE_MIME = "application/x-formbuilder-field-type"


def field_type_mime_data(field_type: FieldType) -> QMimeData:
    """Drag payload for a palette item.

    Carries only the custom format, never text, so editors inside a row
    cannot take the drop.
    """
    mime = QMimeData()
    mime.setData(FIELD_TYPE_MIME, field_type.value.encode("utf-8"))
    return mime


class FieldTypeButton(QPushButton):
    def __init__(self, field_type: FieldType) -> None:
        super().__init__(field_type.label)
        self.field_type = field_type
        self._press_pos = None
        self.setCursor(Qt.CursorShape.OpenHandCursor)

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position().toPoint()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:  # type: ignore[override]
        if self._press_pos is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            return
        distance = (event.position().toPoint() - self._press_pos).manhattanLength()
        if distance < QApplication.startDragDistance():
            return

        drag = QDrag(self)
        drag.setMimeData(field_type_mime_data(self.field_type))
        drag.setPixmap(self.grab())
        self._press_pos = None
        self.setDown(False)
        drag.exec(Qt.DropAction.CopyAction)

    def mouseReleaseEvent(self, event) -> None:  # type: ignore[override]
        self._press_pos = None
        super().mouseReleaseEvent(event)


class FieldPalette(QWidget):
    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)

        title = QLabel("Form Components")
        title.setStyleSheet("font-size: 15px; font-weight: 600;")
        layout.addWidget(title)

        for field_type in FieldType:
            layout.addWidget(FieldTypeButton(field_type))
        layout.addStretch(1)
        self.setMinimumWidth(220)
