"""Form preview rendering helpers using PyMuPDF."""

from __future__ import annotations

import fitz
from PySide6.QtGui import QImage

from formbuilder.model.document import FormDocument
from formbuilder.pdf.writer import build_form_pdf


class PdfRenderError(RuntimeError):
    """Raised when a form preview cannot be rendered."""


def render_preview_pages(
    document: FormDocument,
    zoom: float = 1.25,
    title: str = "Form",
) -> list[QImage]:
    pdf_bytes = build_form_pdf(document, title=title)

    try:
        handle = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as exc:  # pragma: no cover - defensive for PyMuPDF errors
        raise PdfRenderError("Failed to open generated form PDF") from exc

    images: list[QImage] = []
    try:
        matrix = fitz.Matrix(zoom, zoom)
        for page_index in range(handle.page_count):
            try:
                pix = handle.load_page(page_index).get_pixmap(matrix=matrix, alpha=False)
            except Exception as exc:  # pragma: no cover - defensive for PyMuPDF errors
                raise PdfRenderError(f"Failed to render page {page_index + 1}") from exc

            image = QImage(pix.samples, pix.width, pix.height, pix.stride, QImage.Format_RGB888)
            images.append(image.copy())
    finally:
        handle.close()
    return images
