"""Interactive form canvas: drop surface, rows and field editors."""

from __future__ import annotations

from PySide6.QtCore import QDate, Qt, Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDateEdit,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLayout,
    QLineEdit,
    QPlainTextEdit,
    QRadioButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from formbuilder.layout.placement import DROP_AREA_ID
from formbuilder.model.document import EMPTY_DOCUMENT, FormDocument, Row
from formbuilder.model.field import Field, FieldType
from formbuilder.pdf.writer import SELECT_OPTIONS
from formbuilder.viewer.containers import CONTAINER_PROPERTY, nearest_container_id
from formbuilder.viewer.palette import FIELD_TYPE_MIME


class FormCanvas(QWidget):
    field_dropped = Signal(str, str)
    field_renamed = Signal(str, str, str)
    field_deleted = Signal(str, str)
    row_deleted = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self._document = EMPTY_DOCUMENT
        self._preview = False

        self.setProperty(CONTAINER_PROPERTY, DROP_AREA_ID)
        self.setAcceptDrops(True)
        self.setMinimumSize(500, 600)
        self.setStyleSheet("FormCanvas { background: #f9fafb; }")

        self._rows_layout = QVBoxLayout(self)
        self._rows_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self._rows_layout.setSpacing(16)
        self._rebuild()

    def set_document(self, document: FormDocument, preview: bool = False) -> None:
        self._document = document
        self._preview = preview
        self._rebuild()

    def dragEnterEvent(self, event) -> None:  # type: ignore[override]
        if not self._preview and event.mimeData().hasFormat(FIELD_TYPE_MIME):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event) -> None:  # type: ignore[override]
        self.dragEnterEvent(event)

    def dropEvent(self, event) -> None:  # type: ignore[override]
        mime = event.mimeData()
        if self._preview or not mime.hasFormat(FIELD_TYPE_MIME):
            event.ignore()
            return

        target = self.childAt(event.position().toPoint()) or self
        container_id = nearest_container_id(target)
        if container_id is None:
            event.ignore()
            return

        field_type = bytes(mime.data(FIELD_TYPE_MIME)).decode("utf-8")
        event.acceptProposedAction()
        self.field_dropped.emit(container_id, field_type)

    def _rebuild(self) -> None:
        _clear_layout(self._rows_layout)

        if not self._document.rows:
            hint = QLabel("Drag components here to start building the form.")
            hint.setStyleSheet("color: #6b7280; padding: 24px;")
            self._rows_layout.addWidget(hint)
            return

        for row in self._document.rows:
            self._rows_layout.addWidget(self._build_row(row))

    def _build_row(self, row: Row) -> QFrame:
        frame = QFrame()
        frame.setObjectName("formRow")
        frame.setProperty(CONTAINER_PROPERTY, row.id)
        frame.setFrameShape(QFrame.Shape.StyledPanel)
        frame.setStyleSheet("QFrame#formRow { background: white; border-radius: 8px; }")

        layout = QHBoxLayout(frame)
        layout.setSpacing(16)
        for field in row.fields:
            layout.addWidget(self._build_field(row.id, field), stretch=1)

        if not self._preview:
            delete_row = QToolButton()
            delete_row.setText("✕")
            delete_row.setToolTip("Delete Row")
            delete_row.clicked.connect(lambda _checked=False: self.row_deleted.emit(row.id))
            layout.addWidget(delete_row, alignment=Qt.AlignmentFlag.AlignTop)
        return frame

    def _build_field(self, row_id: str, field: Field) -> QWidget:
        cell = QWidget()
        outer = QHBoxLayout(cell)
        outer.setContentsMargins(0, 0, 0, 0)

        column = QVBoxLayout()
        if self._preview:
            column.addWidget(QLabel(field.field_name))
        else:
            name_editor = QLineEdit(field.field_name)
            name_editor.setAcceptDrops(False)
            name_editor.textEdited.connect(
                lambda text: self.field_renamed.emit(row_id, field.id, text)
            )
            column.addWidget(name_editor)
        input_widget = build_input_widget(field)
        input_widget.setAcceptDrops(False)
        column.addWidget(input_widget)
        outer.addLayout(column, stretch=1)

        if not self._preview:
            delete_field = QToolButton()
            delete_field.setText("✕")
            delete_field.setToolTip("Delete Component")
            delete_field.clicked.connect(
                lambda _checked=False: self.field_deleted.emit(row_id, field.id)
            )
            outer.addWidget(delete_field)
        return cell


def build_input_widget(field: Field) -> QWidget:
    if field.field_type is FieldType.SINGLE_LINE:
        widget = QLineEdit()
        widget.setPlaceholderText("Single Line Input")
        return widget
    if field.field_type is FieldType.MULTI_LINE:
        widget = QPlainTextEdit()
        widget.setPlaceholderText("Multi Line Input")
        widget.setFixedHeight(64)
        widget.viewport().setAcceptDrops(False)
        return widget
    if field.field_type is FieldType.ITEM_SELECT:
        widget = QComboBox()
        widget.addItems(SELECT_OPTIONS)
        return widget
    if field.field_type is FieldType.CHECKBOX:
        return QCheckBox("Checkbox")
    if field.field_type is FieldType.RADIO:
        return QRadioButton("Radio Option")
    widget = QDateEdit(QDate.currentDate())
    widget.setCalendarPopup(True)
    return widget


def _clear_layout(layout: QLayout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.hide()
            widget.deleteLater()
        elif item.layout() is not None:
            _clear_layout(item.layout())
