"""
Two-phase document tarot pipeline.

- analyze: PDF bytes -> Reading (returned to the caller)
- render: PDF bytes + the same Reading -> PDF with a cover page prepended

Both phases are pure functions of their inputs; no state is kept between them.
"""

from .artifacts import load_reading_json, serialize_reading, write_reading_json
from .module import analyze_pdf_bytes, coerce_reading, preview_pdf_bytes, render_pdf_bytes

__all__ = [
    "analyze_pdf_bytes",
    "coerce_reading",
    "load_reading_json",
    "preview_pdf_bytes",
    "render_pdf_bytes",
    "serialize_reading",
    "write_reading_json",
]
