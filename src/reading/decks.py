"""
Fixed, ordered decks. Immutable process-wide data; index order is part of the
reproducibility contract (a seed always maps to the same entry).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeckCard:
    name: str
    meaning: str


@dataclass(frozen=True, slots=True)
class Aura:
    name: str
    description: str


PAST_DECK: tuple[DeckCard, ...] = (
    DeckCard(
        "The Procrastinator",
        "This document began its journey in the depths of someone's 'to-do later' pile. It has known neglect, yet persevered.",
    ),
    DeckCard(
        "The Midnight Oil",
        "Born from late-night inspiration and questionable coffee decisions. This document carries the energy of deadlines past.",
    ),
    DeckCard(
        "The Copy-Paste Sage",
        "Much wisdom here was borrowed from documents that came before. Standing on the shoulders of templates.",
    ),
    DeckCard(
        "The Revision Maze",
        "This document has seen many versions, each one slightly different, none quite right. Version 17 remembers.",
    ),
    DeckCard(
        "The Abandoned Draft",
        "Once begun with great enthusiasm, then forgotten for weeks. Its early paragraphs still echo with optimism.",
    ),
    DeckCard(
        "The Meeting Minutes",
        "This document was birthed in a conference room. It carries the collective indecision of many voices.",
    ),
    DeckCard(
        "The Inherited Legacy",
        "Someone else started this. The original author has moved on, leaving only cryptic comments behind.",
    ),
    DeckCard(
        "The Scope Creeper",
        "What began as a simple task grew into something far more complex. Feature creep left its mark.",
    ),
)

PRESENT_DECK: tuple[DeckCard, ...] = (
    DeckCard(
        "The Attention Seeker",
        "Right now, this document desperately wants to be read. It yearns for someone to actually make it to page 2.",
    ),
    DeckCard(
        "The Hopeful Attachment",
        "Currently sitting in an inbox, waiting to be opened. It believes today could be the day.",
    ),
    DeckCard(
        "The Polished Facade",
        "Presenting its best self with clean formatting and professional fonts. But we know the tracked changes it hides.",
    ),
    DeckCard(
        "The Meeting Survivor",
        "This document has been projected onto screens and scrutinized by many. It seeks validation.",
    ),
    DeckCard(
        "The Urgent Flag",
        "Marked as important! High priority! But is anyone actually reading it? The document wonders.",
    ),
    DeckCard(
        "The Circling Approval",
        "Currently making rounds through the approval chain. Each signature brings it closer to its destiny.",
    ),
    DeckCard(
        "The Open Tab",
        "Living in a browser tab among dozens of others. Occasionally glimpsed but never fully absorbed.",
    ),
    DeckCard(
        "The Desktop Dweller",
        'Saved to the desktop for "quick access." Now buried under 47 other files with similar intentions.',
    ),
)

FUTURE_DECK: tuple[DeckCard, ...] = (
    DeckCard(
        "The Forgotten Archive",
        "Beware! This document's destiny leads to a folder called 'Old Stuff' where it will languish for eternity.",
    ),
    DeckCard(
        "The Scope Creep",
        "Warning: Additional requirements approach. This document will grow to twice its intended size.",
    ),
    DeckCard(
        "The Reply All Catastrophe",
        "Danger ahead! This document may be accidentally sent to people who should never see it.",
    ),
    DeckCard(
        "The Printer Nemesis",
        'A formatting disaster awaits. Margins will shift, fonts will change, and someone will say "it looked fine on my screen."',
    ),
    DeckCard(
        "The Endless Revision",
        'More feedback is coming. Version numbers will climb. The "final" version will spawn many children.',
    ),
    DeckCard(
        "The Deadline Demon",
        "A hard deadline approaches. Corners will be cut. Sleep will be lost. The document will ship anyway.",
    ),
    DeckCard(
        "The Silent Archive",
        "After much fanfare, this document will be filed away and never opened again. Such is the cycle.",
    ),
    DeckCard(
        "The Rebirth",
        "This document will be repurposed. Its content will live on in presentations, emails, and other forms.",
    ),
)

AURA_DECK: tuple[Aura, ...] = (
    Aura("Focus Goblin", "Highly concentrated content, dense with purpose"),
    Aura("Deadline Phantom", "Created under pressure, radiates urgency"),
    Aura("Meeting Magnet", "Will spawn many discussions and calendar invites"),
    Aura("Inbox Specter", "Destined to haunt email threads"),
    Aura("Revision Wraith", "Will undergo many transformations"),
    Aura("Approval Seeker", "Craves validation from stakeholders"),
    Aura("Scope Creeper", "Tends to expand beyond original boundaries"),
    Aura("Format Warrior", "Fights valiantly against inconsistent styling"),
    Aura("Archive Wanderer", "Seeks a final resting place in the file system"),
    Aura("Tab Haunter", "Will live in browser tabs indefinitely"),
)

CERTIFICATION_DECK: tuple[str, ...] = (
    "Certified Chaotic Neutral",
    "Professionally Procrastinated",
    "Officially Overthought",
    "Beautifully Bureaucratic",
    "Delightfully Disorganized",
    "Strategically Ambiguous",
    "Carefully Cluttered",
    "Magnificently Meandering",
    "Perfectly Pending",
    "Blissfully Bloated",
)

_AURAS_BY_NAME = {a.name: a for a in AURA_DECK}


def describe_aura(name: str) -> str | None:
    aura = _AURAS_BY_NAME.get(name)
    return None if aura is None else aura.description
