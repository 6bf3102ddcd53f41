"""
Cover page composition: the reading drawn as one page sized to the source
document's first page, plus raster previews for inspecting the result.
"""

from .compose import DEFAULT_STYLE, compose_cover_page
from .contracts import PALETTE, CoverStyle, PagePreview, PreviewConfig
from .layout import truncate_text, wrap_text
from .preview import render_page_previews

__all__ = [
    "DEFAULT_STYLE",
    "PALETTE",
    "CoverStyle",
    "PagePreview",
    "PreviewConfig",
    "compose_cover_page",
    "render_page_previews",
    "truncate_text",
    "wrap_text",
]
