from __future__ import annotations

from dataclasses import dataclass
from typing import Any

RGB = tuple[float, float, float]

# Design-system palette (0..1 RGB).
PALETTE: dict[str, RGB] = {
    "background": (26 / 255, 32 / 255, 44 / 255),
    "card_fill": (0.15, 0.18, 0.25),
    "primary": (107 / 255, 70 / 255, 193 / 255),
    "gold": (246 / 255, 173 / 255, 85 / 255),
    "white": (1.0, 1.0, 1.0),
    "muted": (160 / 255, 174 / 255, 192 / 255),
    "past": (104 / 255, 211 / 255, 145 / 255),
    "present": (66 / 255, 153 / 255, 225 / 255),
    "future": (237 / 255, 100 / 255, 166 / 255),
}


@dataclass(frozen=True, slots=True)
class CoverStyle:
    """
    Fixed cover geometry and typography, in PDF points.

    Vertical offsets are relative to the running cursor, which starts at the
    top of the page and moves down block by block. Only the page size varies
    between documents; it is always taken from the source document.
    """

    font_regular: str = "Helvetica"
    font_bold: str = "Helvetica-Bold"

    heading_text: str = "PDF TAROT READING"
    heading_size: float = 28
    heading_top_offset: float = 60

    separator_gap: float = 15
    separator_width: float = 200
    separator_height: float = 2

    title_gap: float = 30
    title_size: float = 14
    title_max_chars: int = 50

    cards_gap_above: float = 50
    card_width: float = 140
    card_height: float = 180
    card_gap: float = 20
    card_border_width: float = 2
    card_label_offset: float = 25
    card_label_size: float = 10
    card_name_offset: float = 50
    card_name_size: float = 12
    card_name_max_chars: int = 18
    card_meaning_offset: float = 75
    card_meaning_size: float = 8
    card_meaning_leading: float = 12
    card_meaning_wrap_chars: int = 22
    card_meaning_max_lines: int = 5
    card_text_inset: float = 10

    aura_gap_below_cards: float = 50
    aura_prefix: str = "AURA: "
    aura_size: float = 14
    aura_padding: float = 15
    aura_height: float = 30
    aura_rect_drop: float = 25
    aura_text_drop: float = 17

    stamp_gap: float = 70
    stamp_size: float = 12
    stamp_padding: float = 30
    stamp_height: float = 40
    stamp_shadow_offset: float = 2
    stamp_shadow_alpha: float = 0.5
    stamp_text_drop: float = 5

    footer_text: str = "pdftarot.app"
    footer_size: float = 10
    footer_y: float = 40


@dataclass(frozen=True, slots=True)
class PreviewConfig:
    max_pages: int = 5
    scale: float = 0.3
    jpeg_quality: int = 70

    def __post_init__(self) -> None:
        if self.max_pages <= 0:
            raise ValueError("max_pages must be a positive integer")
        if self.scale <= 0:
            raise ValueError("scale must be > 0")
        if not (1 <= self.jpeg_quality <= 95):
            raise ValueError("jpeg_quality must be within [1, 95]")


@dataclass(frozen=True, slots=True)
class PagePreview:
    page_num: int  # 1-indexed
    image_bytes: bytes  # JPEG
    width_px: int
    height_px: int

    def to_dict(self) -> dict[str, Any]:
        return {"page_num": self.page_num, "width_px": self.width_px, "height_px": self.height_px}
