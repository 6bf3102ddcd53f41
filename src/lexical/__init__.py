"""
Lexical analysis: frequency-ranked keywords and a coarse category label.

Deterministic and table-driven; no stemming, no semantic models.
"""

from .config import LexicalConfig
from .keywords import KeywordSet, analyze_text, categorize, extract_keywords, tokenize
from .tables import CATEGORY_TABLE, STOP_WORDS

__all__ = [
    "CATEGORY_TABLE",
    "STOP_WORDS",
    "KeywordSet",
    "LexicalConfig",
    "analyze_text",
    "categorize",
    "extract_keywords",
    "tokenize",
]
