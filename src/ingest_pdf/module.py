from __future__ import annotations

import logging
import re

from contracts.errors import UnreadableDocument
from contracts.reading import UNTITLED_DOCUMENT

from .contracts import ExtractedText, IngestConfig, IngestEngineName
from .engines import Pypdfium2TextEngine

logger = logging.getLogger(__name__)

# Allow-list: ASCII word characters, whitespace and a small punctuation set.
_TITLE_DISALLOWED_RE = re.compile(r"""[^A-Za-z0-9_\s\-.,!?'"()]""")
_WHITESPACE_RE = re.compile(r"\s+")


def _get_engine(engine: IngestEngineName):
    if engine == IngestEngineName.PYPDFIUM2:
        return Pypdfium2TextEngine()
    raise ValueError(f"Unsupported ingest engine: {engine}")


def clean_title(title: str, *, max_chars: int = 80) -> str:
    """
    Strip characters outside the allow-list, collapse whitespace, trim and cap.
    An empty result becomes the "Untitled Document" sentinel.
    """

    s = _TITLE_DISALLOWED_RE.sub("", title)
    s = _WHITESPACE_RE.sub(" ", s).strip()
    return s[:max_chars] or UNTITLED_DOCUMENT


def resolve_title(*, metadata_title: str | None, text: str, fallback_chars: int = 100) -> str:
    """
    Prefer the document metadata title; otherwise the first non-empty line of text.
    Returned value is raw (not yet cleaned).
    """

    if metadata_title:
        return metadata_title
    for line in text.split("\n"):
        line = line.strip()
        if line:
            return line[:fallback_chars]
    return UNTITLED_DOCUMENT


def extract_text(*, pdf_bytes: bytes, config: IngestConfig | None = None) -> ExtractedText:
    """
    Decode PDF bytes into bounded plain text plus a cleaned title.

    Raises `UnreadableDocument` when the bytes cannot be parsed or when fewer
    than `config.min_text_chars` characters of text come out (scanned heuristic).
    """

    config = config or IngestConfig()
    engine = _get_engine(config.engine)

    sample = engine.sample_text(pdf_bytes=pdf_bytes, max_pages=config.max_pages)
    if sample.page_count == 0:
        raise UnreadableDocument("PDF contains no pages.", code="INGEST_NO_PAGES")

    text = "\n\n".join(sample.page_texts)[: config.max_text_chars].strip()
    if len(text) < config.min_text_chars:
        raise UnreadableDocument(
            "Could not extract text from PDF. The document may be scanned or encrypted.",
            code="INGEST_TEXT_TOO_SHORT",
            detail={"text_length": len(text), "min_text_chars": config.min_text_chars},
        )

    raw_title = resolve_title(
        metadata_title=sample.metadata_title,
        text=text,
        fallback_chars=config.title_fallback_chars,
    )
    title = clean_title(raw_title, max_chars=config.title_max_chars)

    logger.debug(
        "ingest_complete",
        extra={
            "backend": engine.backend_id(),
            "backend_version": engine.backend_version(),
            "text_length": len(text),
            "pages_sampled": len(sample.page_texts),
        },
    )
    return ExtractedText(
        text=text,
        title=title,
        page_count=sample.page_count,
        pages_sampled=len(sample.page_texts),
    )
