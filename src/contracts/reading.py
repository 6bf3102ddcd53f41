from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ValidationError

UNTITLED_DOCUMENT = "Untitled Document"
GENERAL_CATEGORY = "general"


class CardPosition(str, Enum):
    """
    Spread positions, in layout order (left to right on the cover page).
    """

    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"


@dataclass(frozen=True, slots=True)
class Card:
    position: CardPosition
    name: str
    meaning: str

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Card":
        return Card(position=CardPosition(d["position"]), name=str(d["name"]), meaning=str(d["meaning"]))

    def to_dict(self) -> dict[str, Any]:
        return {"position": self.position.value, "name": self.name, "meaning": self.meaning}


@dataclass(frozen=True, slots=True)
class Reading:
    """
    Output of the analyze phase and input of the render phase.

    The pipeline keeps no session: callers carry this object (usually as the
    JSON produced by `to_dict`) from one phase to the other verbatim.
    Identical (title, leading text) always yields an identical Reading.
    """

    title: str
    keywords: list[str]
    category: str
    aura: str
    certification: str
    cards: list[Card]  # exactly 3, one per CardPosition

    def card_at(self, position: CardPosition) -> Card:
        for card in self.cards:
            if card.position == position:
                return card
        raise KeyError(position.value)

    @staticmethod
    def from_dict(d: Any) -> "Reading":
        """
        Validate a caller-supplied Reading and build the typed record.

        All structural violations are collected and reported together in one
        `ValidationError`; nothing is constructed unless the shape is valid.
        """

        problems = validate_reading_dict(d)
        if problems:
            raise ValidationError(
                "Invalid reading: " + "; ".join(problems),
                code="VALIDATION_BAD_READING",
                detail={"problems": problems},
            )

        title = d.get("title")
        category = d.get("category")
        return Reading(
            title=str(title) if title else UNTITLED_DOCUMENT,
            keywords=[str(k) for k in (d.get("keywords") or [])],
            category=str(category) if category else GENERAL_CATEGORY,
            aura=str(d["aura"]),
            certification=str(d["certification"]),
            cards=[Card.from_dict(c) for c in d["cards"]],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "keywords": list(self.keywords),
            "category": self.category,
            "aura": self.aura,
            "certification": self.certification,
            "cards": [c.to_dict() for c in self.cards],
        }


def _is_nonempty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def validate_reading_dict(d: Any) -> list[str]:
    """
    Structural check of a Reading payload. Returns a list of problems (empty if valid).

    Required: exactly 3 cards, each position present exactly once, non-empty
    card names/meanings, non-empty aura and certification strings.
    Optional: title/category (str), keywords (list[str]).
    """

    if not isinstance(d, dict):
        return ["reading must be an object"]

    problems: list[str] = []

    for key in ("aura", "certification"):
        if not _is_nonempty_str(d.get(key)):
            problems.append(f"{key} must be a non-empty string")

    for key in ("title", "category"):
        if d.get(key) is not None and not isinstance(d.get(key), str):
            problems.append(f"{key} must be a string")

    keywords = d.get("keywords")
    if keywords is not None and (not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords)):
        problems.append("keywords must be a list of strings")

    cards = d.get("cards")
    if not isinstance(cards, list):
        problems.append("cards must be a list")
        return problems
    if len(cards) != 3:
        problems.append(f"cards must contain exactly 3 entries, got {len(cards)}")

    valid_positions = {p.value for p in CardPosition}
    seen: list[str] = []
    for i, card in enumerate(cards):
        if not isinstance(card, dict):
            problems.append(f"cards[{i}] must be an object")
            continue
        position = card.get("position")
        if position not in valid_positions:
            problems.append(f"cards[{i}].position must be one of past/present/future")
        else:
            seen.append(position)
        for key in ("name", "meaning"):
            if not _is_nonempty_str(card.get(key)):
                problems.append(f"cards[{i}].{key} must be a non-empty string")

    for p in CardPosition:
        count = seen.count(p.value)
        if count == 0:
            problems.append(f"missing card for position {p.value!r}")
        elif count > 1:
            problems.append(f"duplicate card for position {p.value!r}")

    return problems
