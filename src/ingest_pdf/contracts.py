from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IngestEngineName(str, Enum):
    """
    Text extraction backend identifiers.
    """

    PYPDFIUM2 = "pypdfium2"


@dataclass(frozen=True, slots=True)
class ExtractedText:
    text: str  # bounded by IngestConfig.max_text_chars, trimmed
    title: str  # cleaned; never empty ("Untitled Document" sentinel)
    page_count: int  # total pages in the source document
    pages_sampled: int  # pages actually read (<= IngestConfig.max_pages)


@dataclass(frozen=True, slots=True)
class IngestConfig:
    """
    Text ingest parameters.

    Sampling is pre-bounded so a single call has a bounded worst case; there is
    no mid-extraction cancellation. No environment variable reads in this module.
    """

    engine: IngestEngineName = IngestEngineName.PYPDFIUM2
    max_pages: int = 5
    max_text_chars: int = 3000
    min_text_chars: int = 10  # below this the document is treated as scanned/unreadable
    title_fallback_chars: int = 100
    title_max_chars: int = 80

    def __post_init__(self) -> None:
        if self.max_pages <= 0:
            raise ValueError("max_pages must be a positive integer")
        if self.max_text_chars <= 0:
            raise ValueError("max_text_chars must be a positive integer")
        if self.min_text_chars < 0:
            raise ValueError("min_text_chars must be >= 0")
        if self.title_fallback_chars <= 0 or self.title_max_chars <= 0:
            raise ValueError("title limits must be positive integers")
