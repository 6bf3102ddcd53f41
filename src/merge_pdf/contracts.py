from __future__ import annotations

from dataclasses import dataclass

DEFAULT_OUTPUT_FILENAME = "tarot_reading.pdf"


@dataclass(frozen=True, slots=True)
class PageSize:
    width: float  # PDF points
    height: float


@dataclass(frozen=True, slots=True)
class MergedDocument:
    """
    Cover page at index 0 followed by every original page in original order.
    Invariant: page_count == 1 + source_page_count.
    """

    pdf_bytes: bytes
    page_count: int
    source_page_count: int
