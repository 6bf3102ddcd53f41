from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from contracts.errors import ValidationError
from contracts.reading import Reading


def serialize_reading(reading: Reading) -> str:
    payload: dict[str, Any] = reading.to_dict()
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_reading_json(*, reading: Reading, out_file: Path) -> None:
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(serialize_reading(reading), encoding="utf-8")


def load_reading_json(raw: str) -> Reading:
    """
    Parse and validate a Reading carried back by the caller.
    """

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError("Invalid reading JSON.", code="VALIDATION_BAD_READING", detail={"error": str(e)}) from e
    return Reading.from_dict(payload)
