# slowness_by_time/core/normalize.py
from __future__ import annotations
import re
from typing import Literal

ParseMode = Literal["lenient", "strict"]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_mode(cfg: dict | None) -> ParseMode:
    mode = str(((cfg or {}).get("parsing", {}) or {}).get("mode", "lenient")).strip().lower()
    if mode not in ("lenient", "strict"):
        raise ValueError(f"unknown parsing mode {mode!r} (expected 'lenient' or 'strict')")
    return mode


def to_int(text: str, mode: ParseMode = "lenient") -> int:
    """
    Integer field parse.
    lenient: use the leading integer prefix ("12.7" -> 12, "12abc" -> 12) and
             silently fall back to 0 when there is none. This masks bad data.
    strict:  the whole field must be an integer, else ValueError.
    """
    if mode == "strict":
        return int(text.strip())
    m = _INT_PREFIX.match(text)
    return int(m.group(1)) if m else 0


def to_float(text: str, mode: ParseMode = "lenient") -> float:
    """Float counterpart of to_int; lenient mode falls back to 0.0."""
    if mode == "strict":
        s = text.strip()
        if not _FLOAT_PREFIX.fullmatch(s):
            raise ValueError(f"could not convert {text!r} to float")
        return float(s)
    m = _FLOAT_PREFIX.match(text)
    return float(m.group(1)) if m else 0.0
