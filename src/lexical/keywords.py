from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable

from contracts.reading import GENERAL_CATEGORY

from .config import LexicalConfig
from .tables import CATEGORY_TABLE, STOP_WORDS

_NON_TOKEN_RE = re.compile(r"[^a-z0-9\s]")


@dataclass(frozen=True, slots=True)
class KeywordSet:
    keywords: list[str]  # descending frequency, ties in first-seen order
    category: str

    def to_dict(self) -> dict[str, Any]:
        return {"keywords": list(self.keywords), "category": self.category}


def tokenize(text: str, *, min_token_length: int = 4) -> list[str]:
    """
    Lowercase, blank out everything but [a-z0-9] and whitespace, split, and drop
    short tokens and stop words. Order of appearance is preserved.
    """

    words = _NON_TOKEN_RE.sub(" ", text.lower()).split()
    return [w for w in words if len(w) >= min_token_length and w not in STOP_WORDS]


def extract_keywords(text: str, *, max_keywords: int = 10, min_token_length: int = 4) -> list[str]:
    # Counter keeps first-seen order and sorted() is stable, so equal counts
    # stay in order of first appearance.
    counts = Counter(tokenize(text, min_token_length=min_token_length))
    ranked = sorted(counts.items(), key=lambda kv: -kv[1])
    return [word for word, _ in ranked[:max_keywords]]


def categorize(keywords: Iterable[str]) -> str:
    """
    Highest nonzero overlap with a category word list wins; ties go to the
    earlier table entry; no overlap at all resolves to "general".
    """

    keyword_set = {k.lower() for k in keywords}
    best_name, best_score = GENERAL_CATEGORY, 0
    for name, words in CATEGORY_TABLE:
        score = len(words & keyword_set)
        if score > best_score:
            best_name, best_score = name, score
    return best_name


def analyze_text(text: str, *, config: LexicalConfig | None = None) -> KeywordSet:
    config = config or LexicalConfig()
    config.validate()
    keywords = extract_keywords(
        text,
        max_keywords=config.max_keywords,
        min_token_length=config.min_token_length,
    )
    return KeywordSet(keywords=keywords, category=categorize(keywords))
