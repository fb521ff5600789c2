# slowness_by_time/utils/detect.py
from __future__ import annotations
from pathlib import Path

# file name the simulator uses inside its statistics directory
STAT_FILE_NAME = "apps.stat"


def resolve_input(p: Path) -> Path:
    """
    - a directory  -> <dir>/apps.stat
    - anything else is returned unchanged; the loader reports missing files
    """
    p = Path(p).expanduser()
    if p.is_dir():
        return p / STAT_FILE_NAME
    return p
