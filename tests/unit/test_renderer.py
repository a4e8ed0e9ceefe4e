"""Tests for the PDF preview renderer."""

from __future__ import annotations

from formbuilder.layout.placement import DROP_AREA_ID, resolve_drop
from formbuilder.model.document import EMPTY_DOCUMENT
from formbuilder.model.field import FieldType
from formbuilder.pdf.renderer import render_preview_pages


def test_renders_one_image_per_page(qapp, two_row_document):
    images = render_preview_pages(two_row_document, zoom=1.0)

    assert len(images) == 1
    assert not images[0].isNull()
    # US letter at 72 dpi
    assert (images[0].width(), images[0].height()) == (612, 792)


def test_zoom_scales_pages(qapp, two_row_document):
    (image,) = render_preview_pages(two_row_document, zoom=2.0)
    assert image.width() == 1224


def test_long_form_renders_every_page(qapp):
    document = EMPTY_DOCUMENT
    for _ in range(30):
        document = resolve_drop(document, DROP_AREA_ID, FieldType.MULTI_LINE)

    assert len(render_preview_pages(document, zoom=0.5)) > 1
