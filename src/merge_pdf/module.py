from __future__ import annotations

import io
import logging
from typing import Any

from contracts.errors import MergeError

from .contracts import MergedDocument, PageSize

logger = logging.getLogger(__name__)


def _require_pdfium():
    try:
        import pypdfium2 as pdfium  # type: ignore

        return pdfium
    except ImportError as e:
        raise RuntimeError("Missing dependency: pypdfium2 is required for merging.") from e


def load_source_document(pdf_bytes: bytes) -> Any:
    """
    Open the original document permissively.

    pdfium does not enforce permission flags, so documents that are encrypted
    only with an owner password (read-only, no-copy, ...) load and copy fine.
    Documents that need a user password, or are not PDFs at all, raise MergeError.
    """

    pdfium = _require_pdfium()
    try:
        doc = pdfium.PdfDocument(pdf_bytes)
    except pdfium.PdfiumError as e:
        raise MergeError(
            "Original document could not be loaded.",
            code="MERGE_SOURCE_UNREADABLE",
            detail={"error": repr(e)},
        ) from e

    if len(doc) == 0:
        doc.close()
        raise MergeError("Original document has no pages.", code="MERGE_SOURCE_EMPTY")
    return doc


def first_page_size(doc: Any) -> PageSize:
    # Visible size: CropBox applied, /Rotate 90 or 270 swaps width and height.
    page = doc[0]
    width, height = page.get_size()
    page.close()
    return PageSize(width=float(width), height=float(height))


def merge_cover(*, source: Any, cover_pdf: bytes) -> MergedDocument:
    """
    Build a new document: page 0 of `cover_pdf`, then every page of `source`
    in index order. Original pages are imported as-is (content untouched).
    """

    pdfium = _require_pdfium()
    source_page_count = len(source)

    cover = pdfium.PdfDocument(cover_pdf)
    merged = pdfium.PdfDocument.new()
    try:
        merged.import_pages(cover, [0])
        merged.import_pages(source, list(range(source_page_count)))

        page_count = len(merged)
        if page_count != source_page_count + 1:
            raise MergeError(
                "Merged page count does not match cover + original pages.",
                code="MERGE_PAGE_COUNT_MISMATCH",
                detail={"expected": source_page_count + 1, "actual": page_count},
            )

        out = io.BytesIO()
        merged.save(out)
    except pdfium.PdfiumError as e:
        raise MergeError("Failed to merge cover page.", code="MERGE_FAILED", detail={"error": repr(e)}) from e
    finally:
        merged.close()
        cover.close()

    logger.debug("merge_complete", extra={"source_pages": source_page_count, "pages": page_count})
    return MergedDocument(pdf_bytes=out.getvalue(), page_count=page_count, source_page_count=source_page_count)
