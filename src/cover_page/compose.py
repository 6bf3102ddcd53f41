from __future__ import annotations

import io
import logging

from reportlab.pdfgen import canvas

from contracts.reading import UNTITLED_DOCUMENT, CardPosition, Reading

from .contracts import PALETTE, CoverStyle
from .layout import truncate_text, wrap_text

logger = logging.getLogger(__name__)

DEFAULT_STYLE = CoverStyle()

_POSITION_LABELS = {
    CardPosition.PAST: "PAST",
    CardPosition.PRESENT: "PRESENT",
    CardPosition.FUTURE: "FUTURE",
}


def compose_cover_page(
    *,
    reading: Reading,
    page_width: float,
    page_height: float,
    style: CoverStyle = DEFAULT_STYLE,
) -> bytes:
    """
    Draw the reading as a single page sized exactly `page_width` x `page_height`.

    Single centred column, top to bottom: heading, separator bar, document
    title, three card panels (past/present/future), aura badge, certification
    stamp, footer. Returns the one-page PDF as bytes.
    """

    if page_width <= 0 or page_height <= 0:
        raise ValueError(f"page size must be positive, got {page_width}x{page_height}")

    buffer = io.BytesIO()
    # invariant=1: no timestamps or random IDs, identical input -> identical bytes
    pdf = canvas.Canvas(buffer, pagesize=(page_width, page_height), invariant=1)
    pdf.setTitle("PDF Tarot Reading")

    center_x = page_width / 2

    pdf.setFillColorRGB(*PALETTE["background"])
    pdf.rect(0, 0, page_width, page_height, stroke=0, fill=1)

    y = page_height - style.heading_top_offset
    pdf.setFillColorRGB(*PALETTE["gold"])
    pdf.setFont(style.font_bold, style.heading_size)
    pdf.drawCentredString(center_x, y, style.heading_text)

    y -= style.separator_gap
    pdf.setFillColorRGB(*PALETTE["primary"])
    pdf.rect(
        center_x - style.separator_width / 2,
        y,
        style.separator_width,
        style.separator_height,
        stroke=0,
        fill=1,
    )

    y -= style.title_gap
    pdf.setFillColorRGB(*PALETTE["muted"])
    pdf.setFont(style.font_regular, style.title_size)
    pdf.drawCentredString(center_x, y, truncate_text(reading.title or UNTITLED_DOCUMENT, style.title_max_chars))

    y -= style.cards_gap_above
    _draw_cards(pdf, reading=reading, top=y, center_x=center_x, style=style)

    y -= style.card_height + style.aura_gap_below_cards
    _draw_aura_badge(pdf, aura=reading.aura, top=y, center_x=center_x, style=style)

    y -= style.stamp_gap
    _draw_certification_stamp(pdf, certification=reading.certification, center_y=y, center_x=center_x, style=style)

    pdf.setFillColorRGB(*PALETTE["muted"])
    pdf.setFont(style.font_regular, style.footer_size)
    pdf.drawCentredString(center_x, style.footer_y, style.footer_text)

    pdf.showPage()
    pdf.save()

    data = buffer.getvalue()
    logger.debug("cover_composed", extra={"width": page_width, "height": page_height, "bytes": len(data)})
    return data


def _draw_cards(pdf: canvas.Canvas, *, reading: Reading, top: float, center_x: float, style: CoverStyle) -> None:
    total_width = style.card_width * 3 + style.card_gap * 2
    card_x = center_x - total_width / 2
    card_center_offset = style.card_width / 2

    for position in CardPosition:
        card = reading.card_at(position)
        color = PALETTE[position.value]

        pdf.saveState()
        pdf.setFillColorRGB(*PALETTE["card_fill"])
        pdf.setStrokeColorRGB(*color)
        pdf.setLineWidth(style.card_border_width)
        pdf.rect(card_x, top - style.card_height, style.card_width, style.card_height, stroke=1, fill=1)
        pdf.restoreState()

        pdf.setFillColorRGB(*color)
        pdf.setFont(style.font_bold, style.card_label_size)
        pdf.drawCentredString(card_x + card_center_offset, top - style.card_label_offset, _POSITION_LABELS[position])

        pdf.setFillColorRGB(*PALETTE["white"])
        pdf.setFont(style.font_bold, style.card_name_size)
        pdf.drawCentredString(
            card_x + card_center_offset,
            top - style.card_name_offset,
            truncate_text(card.name, style.card_name_max_chars),
        )

        pdf.setFillColorRGB(*PALETTE["muted"])
        pdf.setFont(style.font_regular, style.card_meaning_size)
        line_y = top - style.card_meaning_offset
        for line in wrap_text(card.meaning, style.card_meaning_wrap_chars)[: style.card_meaning_max_lines]:
            pdf.drawString(card_x + style.card_text_inset, line_y, line)
            line_y -= style.card_meaning_leading

        card_x += style.card_width + style.card_gap


def _draw_aura_badge(pdf: canvas.Canvas, *, aura: str, top: float, center_x: float, style: CoverStyle) -> None:
    text = style.aura_prefix + aura
    text_width = pdf.stringWidth(text, style.font_bold, style.aura_size)
    badge_width = text_width + style.aura_padding * 2

    pdf.saveState()
    pdf.setFillColorRGB(*PALETTE["primary"])
    pdf.setStrokeColorRGB(*PALETTE["gold"])
    pdf.setLineWidth(1)
    pdf.roundRect(
        center_x - badge_width / 2,
        top - style.aura_rect_drop,
        badge_width,
        style.aura_height,
        radius=style.aura_height / 2,
        stroke=1,
        fill=1,
    )
    pdf.restoreState()

    pdf.setFillColorRGB(*PALETTE["white"])
    pdf.setFont(style.font_bold, style.aura_size)
    pdf.drawString(center_x - text_width / 2, top - style.aura_text_drop, text)


def _draw_certification_stamp(
    pdf: canvas.Canvas, *, certification: str, center_y: float, center_x: float, style: CoverStyle
) -> None:
    text_width = pdf.stringWidth(certification, style.font_bold, style.stamp_size)
    stamp_width = text_width + style.stamp_padding
    x = center_x - stamp_width / 2
    y = center_y - style.stamp_height / 2
    offset = style.stamp_shadow_offset

    pdf.saveState()
    pdf.setStrokeColorRGB(*PALETTE["primary"])
    pdf.setStrokeAlpha(style.stamp_shadow_alpha)
    pdf.setLineWidth(2)
    pdf.rect(x + offset, y - offset, stamp_width, style.stamp_height, stroke=1, fill=0)
    pdf.restoreState()

    pdf.saveState()
    pdf.setStrokeColorRGB(*PALETTE["primary"])
    pdf.setLineWidth(3)
    pdf.rect(x, y, stamp_width, style.stamp_height, stroke=1, fill=0)
    pdf.restoreState()

    pdf.setFillColorRGB(*PALETTE["primary"])
    pdf.setFont(style.font_bold, style.stamp_size)
    pdf.drawCentredString(center_x, center_y - style.stamp_text_drop, certification)
