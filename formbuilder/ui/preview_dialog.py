"""Dialog showing the exported PDF rendering of the current form."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QDialog, QLabel, QScrollArea, QVBoxLayout, QWidget


class PdfPreviewDialog(QDialog):
    def __init__(self, pages: list[QImage], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("PDF Preview")
        self.resize(820, 900)

        content = QWidget()
        pages_layout = QVBoxLayout(content)
        pages_layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        for image in pages:
            page_label = QLabel()
            page_label.setPixmap(QPixmap.fromImage(image))
            pages_layout.addWidget(page_label)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setAlignment(Qt.AlignmentFlag.AlignCenter)
        scroll_area.setWidget(content)

        layout = QVBoxLayout(self)
        layout.addWidget(scroll_area)
