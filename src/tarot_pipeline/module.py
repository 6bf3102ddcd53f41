from __future__ import annotations

import logging
from typing import Any

from contracts.errors import ValidationError
from contracts.reading import Card, CardPosition, Reading, validate_reading_dict
from cover_page import DEFAULT_STYLE, CoverStyle, PagePreview, PreviewConfig, compose_cover_page, render_page_previews
from ingest_pdf import IngestConfig, extract_text
from lexical import LexicalConfig, analyze_text
from merge_pdf import first_page_size, load_source_document, merge_cover
from reading import ReadingConfig, synthesize_reading

logger = logging.getLogger(__name__)


def _require_pdf_bytes(pdf_bytes: Any) -> bytes:
    if not isinstance(pdf_bytes, (bytes, bytearray, memoryview)) or len(pdf_bytes) == 0:
        raise ValidationError("No PDF data provided.", code="VALIDATION_MISSING_INPUT")
    return bytes(pdf_bytes)


def _typed_shape_problems(reading: Reading) -> list[str]:
    # Reading.to_dict assumes these container and enum types.
    if not isinstance(reading.keywords, (list, tuple)):
        return ["keywords must be a list of strings"]
    if not isinstance(reading.cards, (list, tuple)):
        return ["cards must be a list"]
    return [
        f"cards[{i}] must be a Card with a CardPosition position"
        for i, card in enumerate(reading.cards)
        if not isinstance(card, Card) or not isinstance(card.position, CardPosition)
    ]


def coerce_reading(reading: Reading | dict[str, Any] | None) -> Reading:
    """
    Validate a caller-carried Reading (typed or JSON-shaped) before any render work.
    """

    if reading is None:
        raise ValidationError("No reading provided.", code="VALIDATION_MISSING_INPUT")
    if isinstance(reading, Reading):
        # Typed records can still be built with a bad shape; check the same schema.
        problems = _typed_shape_problems(reading) or validate_reading_dict(reading.to_dict())
        if problems:
            raise ValidationError(
                "Invalid reading: " + "; ".join(problems),
                code="VALIDATION_BAD_READING",
                detail={"problems": problems},
            )
        return reading
    return Reading.from_dict(reading)


def analyze_pdf_bytes(
    pdf_bytes: bytes,
    *,
    ingest_config: IngestConfig | None = None,
    lexical_config: LexicalConfig | None = None,
    reading_config: ReadingConfig | None = None,
) -> Reading:
    """
    Phase 1: bytes -> text + title -> keywords + category -> Reading.

    Pure function of its inputs; nothing is retained after it returns.
    Raises `UnreadableDocument` or `ValidationError`.
    """

    data = _require_pdf_bytes(pdf_bytes)

    extracted = extract_text(pdf_bytes=data, config=ingest_config)
    keyword_set = analyze_text(extracted.text, config=lexical_config)
    reading = synthesize_reading(
        title=extracted.title,
        text=extracted.text,
        keywords=keyword_set.keywords,
        category=keyword_set.category,
        config=reading_config,
    )

    logger.info(
        "analyze_complete",
        extra={
            "page_count": extracted.page_count,
            "pages_sampled": extracted.pages_sampled,
            "category": reading.category,
            "keywords": len(reading.keywords),
        },
    )
    return reading


def render_pdf_bytes(
    pdf_bytes: bytes,
    reading: Reading | dict[str, Any],
    *,
    style: CoverStyle = DEFAULT_STYLE,
) -> bytes:
    """
    Phase 2: original bytes + caller-carried Reading -> merged PDF bytes.

    The Reading is validated first; an invalid shape fails before the original
    is opened or anything is drawn. The cover takes the exact size of the
    original's first page and becomes page 0; all original pages follow.
    Raises `ValidationError` or `MergeError`; never returns a partial document.
    """

    data = _require_pdf_bytes(pdf_bytes)
    validated = coerce_reading(reading)

    source = load_source_document(data)
    try:
        size = first_page_size(source)
        cover_pdf = compose_cover_page(
            reading=validated,
            page_width=size.width,
            page_height=size.height,
            style=style,
        )
        merged = merge_cover(source=source, cover_pdf=cover_pdf)
    finally:
        source.close()

    logger.info(
        "render_complete",
        extra={"page_count": merged.page_count, "bytes": len(merged.pdf_bytes)},
    )
    return merged.pdf_bytes


def preview_pdf_bytes(pdf_bytes: bytes, *, config: PreviewConfig | None = None) -> list[PagePreview]:
    """
    JPEG thumbnails of the leading pages (e.g. of a rendered document, cover first).
    """

    return render_page_previews(pdf_bytes=_require_pdf_bytes(pdf_bytes), config=config)
