from __future__ import annotations

ELLIPSIS = "..."


def truncate_text(text: str, max_chars: int) -> str:
    """
    Cap `text` at `max_chars`, the ellipsis counting against the budget.
    """

    if len(text) <= max_chars:
        return text
    return text[: max(0, max_chars - len(ELLIPSIS))] + ELLIPSIS


def wrap_text(text: str, max_chars: int) -> list[str]:
    """
    Greedy word wrap.

    A word joins the current line while len(line) + len(word) + 1 <= max_chars;
    otherwise the line is flushed and the word starts a new one. Words longer
    than `max_chars` are emitted unbroken on their own line.
    """

    lines: list[str] = []
    current = ""
    for word in text.split():
        if len(current) + len(word) + 1 <= max_chars:
            current = f"{current} {word}" if current else word
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines
