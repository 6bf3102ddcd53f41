from __future__ import annotations

import struct

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 0x100000000 if value & _INT32_SIGN else value


def hash_code(s: str) -> int:
    """
    Polynomial rolling hash over UTF-16 code units: h = h*31 + unit, wrapped to
    a signed 32-bit integer after every step. Returns the absolute value, so the
    result lies in [0, 2**31] (2**31 only for the int32 minimum).
    """

    h = 0
    for (unit,) in struct.iter_unpack("<H", s.encode("utf-16-le", "surrogatepass")):
        h = _to_int32(h * 31 + unit)
    return abs(h)


def seed_for(*, text: str, title: str, seed_text_chars: int = 500) -> int:
    return hash_code(text[:seed_text_chars] + title)


def select_index(seed: int, offset: int, deck_size: int) -> int:
    return (seed + offset) % deck_size
