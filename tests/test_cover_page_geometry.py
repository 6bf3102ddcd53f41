from __future__ import annotations

import unittest

from contracts.reading import Card, CardPosition, Reading
from cover_page import CoverStyle, compose_cover_page
from pdf_fixtures import page_sizes, page_texts


def _reading(**overrides) -> Reading:
    base = dict(
        title="Quarterly Budget Review",
        keywords=["budget", "revenue"],
        category="business",
        aura="Focus Goblin",
        certification="Perfectly Pending",
        cards=[
            Card(CardPosition.FUTURE, "The Rebirth", "This document will be repurposed."),
            Card(CardPosition.PAST, "The Midnight Oil", "Born from late-night inspiration."),
            Card(CardPosition.PRESENT, "The Open Tab", "Living in a browser tab among dozens of others."),
        ],
    )
    base.update(overrides)
    return Reading(**base)


class TestCoverPageGeometry(unittest.TestCase):
    def test_single_page_with_exact_size(self) -> None:
        for width, height in ((612.0, 792.0), (595.28, 841.89), (500.0, 700.0)):
            pdf = compose_cover_page(reading=_reading(), page_width=width, page_height=height)
            sizes = page_sizes(pdf)
            self.assertEqual(len(sizes), 1)
            self.assertAlmostEqual(sizes[0][0], width, places=1)
            self.assertAlmostEqual(sizes[0][1], height, places=1)

    def test_expected_text_is_drawn(self) -> None:
        pdf = compose_cover_page(reading=_reading(), page_width=612, page_height=792)
        text = page_texts(pdf)[0]
        for expected in (
            "PDF TAROT READING",
            "Quarterly Budget Review",
            "PAST",
            "PRESENT",
            "FUTURE",
            "The Midnight Oil",
            "AURA: Focus Goblin",
            "Perfectly Pending",
            "pdftarot.app",
        ):
            self.assertIn(expected, text)

    def test_long_title_and_card_name_are_truncated(self) -> None:
        long_title = "A" * 49 + "BBBBBBBB"
        reading = _reading(
            title=long_title,
            cards=[
                Card(CardPosition.PAST, "The Reply All Catastrophe", "Danger ahead!"),
                Card(CardPosition.PRESENT, "The Open Tab", "Living in a tab."),
                Card(CardPosition.FUTURE, "The Rebirth", "Repurposed."),
            ],
        )
        text = page_texts(compose_cover_page(reading=reading, page_width=612, page_height=792))[0]
        self.assertIn("A" * 47 + "...", text)
        self.assertNotIn("BBBB", text)
        self.assertIn("The Reply All C...", text)
        self.assertNotIn("Catastrophe", text)

    def test_meaning_clipped_to_max_lines(self) -> None:
        meaning = " ".join(f"w{i:02d}" for i in range(60))
        reading = _reading(
            cards=[
                Card(CardPosition.PAST, "The Midnight Oil", meaning),
                Card(CardPosition.PRESENT, "The Open Tab", "short"),
                Card(CardPosition.FUTURE, "The Rebirth", "short"),
            ]
        )
        style = CoverStyle()
        text = page_texts(compose_cover_page(reading=reading, page_width=612, page_height=792, style=style))[0]
        # 22-char lines hold five 3-char words each; five lines -> w00..w24 only.
        self.assertIn("w24", text)
        self.assertNotIn("w25", text)

    def test_rejects_non_positive_size(self) -> None:
        with self.assertRaises(ValueError):
            compose_cover_page(reading=_reading(), page_width=0, page_height=792)


if __name__ == "__main__":
    unittest.main()
