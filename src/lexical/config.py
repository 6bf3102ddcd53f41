from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexicalConfig:
    """
    Keyword extraction parameters.

    Frequency ranking only: no stemming, no ML, no corpus statistics.
    """

    max_keywords: int = 10
    min_token_length: int = 4  # tokens of length <= 3 are dropped

    def validate(self) -> None:
        if self.max_keywords <= 0:
            raise ValueError("max_keywords must be > 0")
        if self.min_token_length <= 0:
            raise ValueError("min_token_length must be > 0")
