from __future__ import annotations

import io

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def make_text_pdf(
    pages: list[list[str]],
    *,
    pagesize: tuple[float, float] = letter,
    title: str | None = None,
    encrypt=None,
) -> bytes:
    """
    Synthetic PDF: one page per entry, each line drawn top-down in Helvetica.
    An empty line list produces an image-free, text-free page.
    """

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=pagesize, invariant=1, encrypt=encrypt)
    if title is not None:
        c.setTitle(title)
    for lines in pages:
        c.setFont("Helvetica", 12)
        y = pagesize[1] - 72
        for line in lines:
            c.drawString(72, y, line)
            y -= 16
        c.showPage()
    c.save()
    return buf.getvalue()


def page_texts(pdf_bytes: bytes) -> list[str]:
    import pypdfium2 as pdfium

    doc = pdfium.PdfDocument(pdf_bytes)
    out = []
    for i in range(len(doc)):
        out.append(doc[i].get_textpage().get_text_range())
    return out


def page_sizes(pdf_bytes: bytes) -> list[tuple[float, float]]:
    import pypdfium2 as pdfium

    doc = pdfium.PdfDocument(pdf_bytes)
    return [tuple(doc[i].get_size()) for i in range(len(doc))]


def with_first_page_boxes(
    pdf_bytes: bytes,
    *,
    cropbox: tuple[float, float, float, float] | None = None,
    rotation: int | None = None,
) -> bytes:
    """
    Re-save `pdf_bytes` with a CropBox and/or /Rotate set on page 0.
    """

    import pypdfium2 as pdfium

    doc = pdfium.PdfDocument(pdf_bytes)
    page = doc[0]
    if cropbox is not None:
        page.set_cropbox(*cropbox)
    if rotation is not None:
        page.set_rotation(rotation)
    buf = io.BytesIO()
    doc.save(buf)
    doc.close()
    return buf.getvalue()
