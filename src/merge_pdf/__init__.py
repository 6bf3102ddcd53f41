"""
Document merge: composed cover page + all original pages, in order.
"""

from .contracts import DEFAULT_OUTPUT_FILENAME, MergedDocument, PageSize
from .module import first_page_size, load_source_document, merge_cover

__all__ = [
    "DEFAULT_OUTPUT_FILENAME",
    "MergedDocument",
    "PageSize",
    "first_page_size",
    "load_source_document",
    "merge_cover",
]
