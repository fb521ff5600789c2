# slowness_by_time/loaders/stat_loader.py
from __future__ import annotations
from pathlib import Path
import logging

from ..core.model import AppRecord, InputFileError, MalformedLineError
from ..core.normalize import ParseMode, parse_mode, to_float, to_int

_LOG = logging.getLogger(__name__)

# ---------- apps.stat columns ----------
# App. ID, src node, num tasks, task size, task mem, task disk,
# release date, deadline, num finished, JTT, sequential time at src, slowness
RELEASE_FIELD = 6
JTT_FIELD = 9
SLOWNESS_FIELD = 11
MIN_FIELDS = SLOWNESS_FIELD + 1


def _is_data_line(line: str) -> bool:
    # whitespace-only lines are skipped as well as empty ones, rather than
    # being rejected as short lines; only a leading "#" marks a comment
    return bool(line.strip()) and not line.startswith("#")


def parse_line(line: str, lineno: int, mode: ParseMode = "lenient") -> AppRecord:
    values = line.rstrip("\r\n").split(",")
    if len(values) < MIN_FIELDS:
        raise MalformedLineError(lineno, line.rstrip("\r\n"),
                                 f"expected at least {MIN_FIELDS} fields, got {len(values)}")
    try:
        release = to_int(values[RELEASE_FIELD], mode)
        duration = to_int(values[JTT_FIELD], mode)
        slowness = to_float(values[SLOWNESS_FIELD], mode)
    except ValueError as e:
        raise MalformedLineError(lineno, line.rstrip("\r\n"), str(e)) from e
    return AppRecord(release=release, end=release + duration, slowness=slowness)


def iter_records(lines, mode: ParseMode = "lenient"):
    for lineno, line in enumerate(lines, start=1):
        if not _is_data_line(line):
            continue
        yield parse_line(line, lineno, mode)


# ---------- public loader ----------
def load(path: Path, cfg: dict | None = None) -> list[AppRecord]:
    """
    Read an apps.stat file into a list of AppRecord, in file order.
    Raises InputFileError when the file cannot be read and
    MalformedLineError on the first bad data line.
    """
    path = Path(path)
    mode = parse_mode(cfg)
    try:
        with path.open("r", encoding="utf-8") as f:
            records = list(iter_records(f, mode))
    except OSError as e:
        raise InputFileError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise InputFileError(path, f"not a text file ({e.reason})") from e
    _LOG.info("loaded %d app record(s) from %s (%s parsing)", len(records), path, mode)
    return records
