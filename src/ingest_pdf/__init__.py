"""
Text ingest: PDF bytes -> bounded plain text + cleaned title.

- Reads only the first few pages (bounded latency).
- Performs NO OCR; image-only documents are reported as unreadable.
"""

from .contracts import ExtractedText, IngestConfig, IngestEngineName
from .module import clean_title, extract_text, resolve_title

__all__ = [
    "ExtractedText",
    "IngestConfig",
    "IngestEngineName",
    "clean_title",
    "extract_text",
    "resolve_title",
]
