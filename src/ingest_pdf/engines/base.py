from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineTextSample:
    page_texts: list[str]  # one entry per sampled page, in page order
    page_count: int
    metadata_title: str | None


class PdfTextEngine(ABC):
    """
    Text ingest engine abstraction.

    Engines must:
    - Read PDF bytes held in memory (no file I/O)
    - Read only the first `max_pages` pages
    - Raise `UnreadableDocument` when the byte stream cannot be parsed
    - Perform NO OCR; image-only pages simply contribute empty text
    """

    @abstractmethod
    def backend_id(self) -> str:
        raise NotImplementedError

    def backend_version(self) -> str | None:
        return None

    @abstractmethod
    def sample_text(self, *, pdf_bytes: bytes, max_pages: int) -> EngineTextSample:
        raise NotImplementedError
