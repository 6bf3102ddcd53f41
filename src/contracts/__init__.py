"""
Canonical contracts shared by every stage of the tarot pipeline.

The Reading schema is the only object that crosses the analyze -> render
boundary, and it crosses it through the caller (no server-side session).
Stage code should consume/produce these contract objects (not ad-hoc dicts).
"""

from .errors import MergeError, TarotPipelineError, UnreadableDocument, ValidationError
from .reading import (
    GENERAL_CATEGORY,
    UNTITLED_DOCUMENT,
    Card,
    CardPosition,
    Reading,
    validate_reading_dict,
)

__all__ = [
    "GENERAL_CATEGORY",
    "UNTITLED_DOCUMENT",
    "Card",
    "CardPosition",
    "Reading",
    "validate_reading_dict",
    "TarotPipelineError",
    "UnreadableDocument",
    "ValidationError",
    "MergeError",
]
