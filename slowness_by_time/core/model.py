# slowness_by_time/core/model.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

# default checkpoint sweep over a simulation run
DEFAULT_START: int = 0
DEFAULT_END: int = 216000
DEFAULT_STEP: int = 1000


class SlownessError(ValueError):
    """Base class for input problems that abort the report."""


class InputFileError(SlownessError):
    def __init__(self, path, reason: str):
        super().__init__(f"cannot read input file {path}: {reason}")
        self.path = path


class OutputDirError(SlownessError):
    def __init__(self, path, reason: str):
        super().__init__(f"cannot write reports to {path}: {reason}")
        self.path = path


class MalformedLineError(SlownessError):
    def __init__(self, lineno: int, line: str, reason: str):
        super().__init__(f"line {lineno}: {reason}: {line!r}")
        self.lineno = lineno
        self.line = line


@dataclass(frozen=True)
class AppRecord:
    release: int              # release date of the application
    end: int                  # release + JTT
    slowness: float

    def active_at(self, t: int) -> bool:
        # zero-duration records are never active
        return self.release <= t < self.end


@dataclass(frozen=True)
class Checkpoints:
    start: int = DEFAULT_START
    end: int = DEFAULT_END      # inclusive
    step: int = DEFAULT_STEP

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"checkpoint step must be positive, got {self.step}")
        if self.end < self.start:
            raise ValueError(f"checkpoint end {self.end} is before start {self.start}")

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1, self.step))

    def __len__(self) -> int:
        return len(range(self.start, self.end + 1, self.step))

    @classmethod
    def from_config(cls, cfg: dict | None) -> "Checkpoints":
        cp = (cfg or {}).get("checkpoints", {}) or {}
        if not isinstance(cp, dict):
            raise ValueError(f"checkpoints must be a mapping, got {type(cp).__name__}")
        try:
            return cls(
                start=int(cp.get("start", DEFAULT_START)),
                end=int(cp.get("end", DEFAULT_END)),
                step=int(cp.get("step", DEFAULT_STEP)),
            )
        except TypeError as e:
            # e.g. "start: null" in the YAML file
            raise ValueError(f"checkpoints must be integers: {e}") from e
