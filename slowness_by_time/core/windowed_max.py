# slowness_by_time/core/windowed_max.py
from __future__ import annotations
from typing import Iterable, Sequence

from .model import AppRecord, Checkpoints


def max_slowness_at(records: Iterable[AppRecord], t: int) -> float:
    """Maximum slowness among records active at t, 0.0 if none is."""
    best = 0.0
    for r in records:
        if r.active_at(t) and r.slowness > best:
            best = r.slowness
    return best


def slowness_by_time(records: Sequence[AppRecord],
                     checkpoints: Checkpoints | None = None) -> list[tuple[int, float]]:
    """One (time, max slowness) pair per checkpoint, ascending."""
    if checkpoints is None:
        checkpoints = Checkpoints()
    return [(t, max_slowness_at(records, t)) for t in checkpoints]


def format_row(t: int, value: float) -> str:
    return f"{int(t)},{float(value)}"
