"""
Reading synthesis: a deterministic 32-bit seed indexes into fixed decks.

No external randomness; identical inputs always produce identical readings.
"""

from .decks import AURA_DECK, CERTIFICATION_DECK, FUTURE_DECK, PAST_DECK, PRESENT_DECK, describe_aura
from .seed import hash_code, seed_for, select_index
from .synthesize import ReadingConfig, SlotOffset, synthesize_reading

__all__ = [
    "AURA_DECK",
    "CERTIFICATION_DECK",
    "FUTURE_DECK",
    "PAST_DECK",
    "PRESENT_DECK",
    "ReadingConfig",
    "SlotOffset",
    "describe_aura",
    "hash_code",
    "seed_for",
    "select_index",
    "synthesize_reading",
]
