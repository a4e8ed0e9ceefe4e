"""Fillable PDF export of a form layout using reportlab widgets + pypdf."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

from pypdf import PdfReader, PdfWriter
from pypdf.generic import ArrayObject, DictionaryObject, NameObject, NumberObject
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from formbuilder.model.document import FormDocument, Row
from formbuilder.model.field import Field, FieldType

PAGE_MARGIN = 48.0
COLUMN_GAP = 16.0
ROW_GAP = 18.0
LABEL_HEIGHT = 14.0
SELECT_OPTIONS = ["Option A", "Option B", "Option C"]
RADIO_OPTIONS = ["Option A", "Option B"]

_WIDGET_HEIGHTS = {
    FieldType.SINGLE_LINE: 22.0,
    FieldType.MULTI_LINE: 54.0,
    FieldType.ITEM_SELECT: 22.0,
    FieldType.CHECKBOX: 14.0,
    FieldType.RADIO: 14.0,
    FieldType.DATE: 22.0,
}


class PdfExportError(RuntimeError):
    """Raised when a form layout cannot be exported."""


def write_form_pdf(
    document: FormDocument,
    output_path: str | Path,
    title: str = "Form",
) -> None:
    output = Path(output_path)
    data = build_form_pdf(document, title=title)
    try:
        with output.open("wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise PdfExportError(f"Failed to write output PDF: {output}") from exc


def build_form_pdf(document: FormDocument, title: str = "Form") -> bytes:
    try:
        reader = PdfReader(_build_widget_pdf(document, title))
        writer = PdfWriter(clone_from=reader)
        _hide_widget_borders(writer)
        writer.set_need_appearances_writer(True)
        writer.add_metadata({"/Title": title})

        buffer = BytesIO()
        writer.write(buffer)
    except Exception as exc:
        raise PdfExportError(f"Failed to build PDF for form: {title}") from exc
    return buffer.getvalue()


def row_height(row: Row) -> float:
    if not row.fields:
        return 0.0
    return LABEL_HEIGHT + max(_WIDGET_HEIGHTS[field.field_type] for field in row.fields)


def _build_widget_pdf(document: FormDocument, title: str) -> BytesIO:
    buffer = BytesIO()
    page_w, page_h = letter
    report = canvas.Canvas(buffer, pagesize=letter)
    report.setTitle(title)

    report.setFont("Helvetica-Bold", 16)
    report.drawString(PAGE_MARGIN, page_h - PAGE_MARGIN, title)
    cursor = page_h - PAGE_MARGIN - 16.0 - ROW_GAP
    usable_w = page_w - 2 * PAGE_MARGIN

    for row in document.rows:
        height = row_height(row)
        if height == 0.0:
            continue
        if cursor - height < PAGE_MARGIN:
            report.showPage()
            cursor = page_h - PAGE_MARGIN

        count = len(row.fields)
        width = (usable_w - COLUMN_GAP * (count - 1)) / count
        for index, field in enumerate(row.fields):
            x = PAGE_MARGIN + index * (width + COLUMN_GAP)
            _draw_field(report, field, x, cursor, width)
        cursor -= height + ROW_GAP

    report.showPage()
    report.save()
    buffer.seek(0)
    return buffer


def _draw_field(report: canvas.Canvas, field: Field, x: float, top: float, width: float) -> None:
    report.setFont("Helvetica", 10)
    report.setFillColor(colors.black)
    report.drawString(x, top - 10.0, field.field_name)

    widget_h = _WIDGET_HEIGHTS[field.field_type]
    y = top - LABEL_HEIGHT - widget_h

    if field.field_type in (FieldType.SINGLE_LINE, FieldType.DATE):
        report.acroForm.textfield(
            name=field.id,
            tooltip="YYYY-MM-DD" if field.field_type is FieldType.DATE else field.field_name,
            x=x,
            y=y,
            width=width,
            height=widget_h,
            borderWidth=0,
            fillColor=None,
            borderColor=None,
            textColor=colors.black,
        )
    elif field.field_type is FieldType.MULTI_LINE:
        report.acroForm.textfield(
            name=field.id,
            tooltip=field.field_name,
            x=x,
            y=y,
            width=width,
            height=widget_h,
            fieldFlags="multiline",
            borderWidth=0,
            fillColor=None,
            borderColor=None,
            textColor=colors.black,
        )
    elif field.field_type is FieldType.ITEM_SELECT:
        report.acroForm.choice(
            name=field.id,
            tooltip=field.field_name,
            value=SELECT_OPTIONS[0],
            options=SELECT_OPTIONS,
            x=x,
            y=y,
            width=width,
            height=widget_h,
            fieldFlags="combo",
            borderWidth=0,
            fillColor=None,
            borderColor=None,
            textColor=colors.black,
        )
    elif field.field_type is FieldType.CHECKBOX:
        report.acroForm.checkbox(
            name=field.id,
            tooltip=field.field_name,
            x=x,
            y=y,
            size=widget_h,
            checked=False,
            buttonStyle="check",
            borderWidth=0,
            fillColor=None,
            borderColor=None,
        )
        report.drawString(x + widget_h + 4.0, y + 3.0, "Checkbox")
    else:
        # Each radio field becomes a two-button group.
        option_w = width / len(RADIO_OPTIONS)
        for index, option in enumerate(RADIO_OPTIONS):
            option_x = x + index * option_w
            report.acroForm.radio(
                name=field.id,
                tooltip=field.field_name,
                value=option.replace(" ", "_").lower(),
                selected=False,
                x=option_x,
                y=y,
                size=widget_h,
                buttonStyle="circle",
                shape="circle",
                borderWidth=0,
                fillColor=None,
                borderColor=None,
            )
            report.drawString(option_x + widget_h + 4.0, y + 3.0, option)

    # Text widgets are borderless; outline them on the page.
    if field.field_type not in (FieldType.CHECKBOX, FieldType.RADIO):
        report.setStrokeColor(colors.grey)
        report.rect(x, y, width, widget_h, stroke=1, fill=0)


def _hide_widget_borders(writer: PdfWriter) -> None:
    zero_border = ArrayObject([NumberObject(0), NumberObject(0), NumberObject(0)])
    for page in writer.pages:
        annots = page.get("/Annots")
        if not annots:
            continue
        for annot_ref in annots:
            annot = annot_ref.get_object()
            if annot.get("/Subtype") != "/Widget":
                continue
            annot[NameObject("/Border")] = zero_border
            _clear_widget_background(annot)


def _clear_widget_background(widget_annot: DictionaryObject) -> None:
    mk = widget_annot.get("/MK")
    if mk is None:
        return
    mk_dict = mk.get_object()
    if "/BG" in mk_dict:
        del mk_dict["/BG"]
