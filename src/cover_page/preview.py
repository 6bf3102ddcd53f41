from __future__ import annotations

import io

from contracts.errors import UnreadableDocument

from .contracts import PagePreview, PreviewConfig


def _require_pdfium():
    try:
        import pypdfium2 as pdfium  # type: ignore

        return pdfium
    except ImportError as e:
        raise RuntimeError("Missing dependency: pypdfium2 is required for page previews.") from e


def render_page_previews(*, pdf_bytes: bytes, config: PreviewConfig | None = None) -> list[PagePreview]:
    """
    Rasterize the leading pages into JPEG thumbnails, ascending by page number.
    """

    config = config or PreviewConfig()
    pdfium = _require_pdfium()

    try:
        doc = pdfium.PdfDocument(pdf_bytes)
    except pdfium.PdfiumError as e:
        raise UnreadableDocument(
            "Could not open PDF for preview.",
            code="INGEST_PARSE_FAILED",
            detail={"error": repr(e)},
        ) from e

    previews: list[PagePreview] = []
    try:
        for page_num in range(1, min(len(doc), config.max_pages) + 1):
            page = doc[page_num - 1]
            bitmap = page.render(scale=config.scale)

            pil_img = bitmap.to_pil().convert("RGB")
            width_px, height_px = pil_img.size
            out = io.BytesIO()
            pil_img.save(out, format="JPEG", quality=config.jpeg_quality)

            previews.append(
                PagePreview(
                    page_num=page_num,
                    image_bytes=out.getvalue(),
                    width_px=int(width_px),
                    height_px=int(height_px),
                )
            )
    finally:
        doc.close()

    return previews
