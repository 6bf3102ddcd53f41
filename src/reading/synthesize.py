from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from contracts.reading import Card, CardPosition, Reading

from .decks import AURA_DECK, CERTIFICATION_DECK, FUTURE_DECK, PAST_DECK, PRESENT_DECK
from .seed import seed_for, select_index


class SlotOffset(IntEnum):
    """
    Fixed seed offsets; one seed drives all five selections.
    """

    PAST = 0
    PRESENT = 1
    FUTURE = 2
    AURA = 3
    CERTIFICATION = 4


_CARD_SLOTS = (
    (CardPosition.PAST, PAST_DECK, SlotOffset.PAST),
    (CardPosition.PRESENT, PRESENT_DECK, SlotOffset.PRESENT),
    (CardPosition.FUTURE, FUTURE_DECK, SlotOffset.FUTURE),
)


@dataclass(frozen=True, slots=True)
class ReadingConfig:
    seed_text_chars: int = 500

    def __post_init__(self) -> None:
        if self.seed_text_chars < 0:
            raise ValueError("seed_text_chars must be >= 0")


def synthesize_reading(
    *,
    title: str,
    text: str,
    keywords: list[str],
    category: str,
    config: ReadingConfig | None = None,
) -> Reading:
    """
    Deterministically draw three cards, an aura and a certification.

    The draw depends only on (leading text, title); keywords and category are
    carried through untouched. Distinct documents may draw the same reading.
    """

    config = config or ReadingConfig()
    seed = seed_for(text=text, title=title, seed_text_chars=config.seed_text_chars)

    cards = []
    for position, deck, offset in _CARD_SLOTS:
        drawn = deck[select_index(seed, offset, len(deck))]
        cards.append(Card(position=position, name=drawn.name, meaning=drawn.meaning))

    aura = AURA_DECK[select_index(seed, SlotOffset.AURA, len(AURA_DECK))]
    certification = CERTIFICATION_DECK[select_index(seed, SlotOffset.CERTIFICATION, len(CERTIFICATION_DECK))]

    return Reading(
        title=title,
        keywords=list(keywords),
        category=category,
        aura=aura.name,
        certification=certification,
        cards=cards,
    )
