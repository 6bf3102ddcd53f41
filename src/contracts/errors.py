from __future__ import annotations

from typing import Any


class TarotPipelineError(Exception):
    """
    Base class for every failure surfaced by the pipeline.

    Each error carries a stable machine-readable `code`, a human message and an
    optional `detail` mapping. Errors are fatal for the call that raised them;
    nothing is retried and no partial artifact accompanies them.
    """

    code: str = "TAROT_PIPELINE_ERROR"

    def __init__(self, message: str, *, code: str | None = None, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


class UnreadableDocument(TarotPipelineError):
    """Document bytes could not be parsed, or yielded too little text (scanned/encrypted)."""

    code = "INGEST_PARSE_FAILED"


class ValidationError(TarotPipelineError):
    """Caller-supplied input (document bytes or Reading) is missing or structurally invalid."""

    code = "VALIDATION_BAD_READING"


class MergeError(TarotPipelineError):
    """The original document cannot be loaded, even permissively, for merging."""

    code = "MERGE_SOURCE_UNREADABLE"
