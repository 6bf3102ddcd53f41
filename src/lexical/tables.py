"""
Read-only lexical configuration, loaded once at import and never mutated.
"""

from __future__ import annotations

# Common English function words plus generic document vocabulary.
STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "from", "as", "is", "was", "are", "were", "been", "be", "have",
        "has", "had", "do", "does", "did", "will", "would", "could", "should", "may",
        "might", "must", "shall", "can", "need", "dare", "ought", "used", "this",
        "that", "these", "those", "it", "its", "they", "them", "their", "we", "us",
        "our", "you", "your", "i", "me", "my", "he", "him", "his", "she", "her",
        "which", "who", "whom", "what", "where", "when", "why", "how", "all", "each",
        "every", "both", "few", "more", "most", "other", "some", "such", "no", "not",
        "only", "same", "so", "than", "too", "very", "just", "also", "now", "here",
        "there", "then", "once", "page", "document", "file", "version", "date", "new",
        "one", "two", "three", "first", "last", "next", "any", "many", "much", "own",
    }
)

# Table order is the tie-break order for categorization.
CATEGORY_TABLE: tuple[tuple[str, frozenset[str]], ...] = (
    ("technical", frozenset({"code", "software", "system", "data", "api", "function", "error", "debug"})),
    ("business", frozenset({"revenue", "sales", "market", "customer", "strategy", "growth", "budget"})),
    ("legal", frozenset({"agreement", "contract", "terms", "party", "clause", "liability", "law"})),
    ("academic", frozenset({"research", "study", "analysis", "hypothesis", "methodology", "results"})),
    ("creative", frozenset({"design", "concept", "creative", "brand", "visual", "story", "content"})),
    ("administrative", frozenset({"meeting", "agenda", "minutes", "action", "review", "report", "status"})),
)
