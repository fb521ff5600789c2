# slowness_by_time/core/pipeline.py
from __future__ import annotations
from pathlib import Path
from typing import TextIO
import logging
import os
import sys
import pandas as pd

from .model import AppRecord, Checkpoints, OutputDirError
from .windowed_max import slowness_by_time, format_row
from .reports import REPORT_FORMATS, build_dataframe, write_report
from .plotting import save_series_plot

_LOG = logging.getLogger(__name__)


def prepare_output_root(root) -> Path:
    """Create the report directory and make sure it can be written to."""
    out_root = Path(root).expanduser().resolve()
    if out_root.exists() and not out_root.is_dir():
        raise OutputDirError(out_root, "not a directory")
    try:
        out_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirError(out_root, e.strerror or str(e)) from e
    if not os.access(out_root, os.W_OK | os.X_OK):
        raise OutputDirError(out_root, "permission denied")
    return out_root


def run_pipeline(records: list[AppRecord], cfg: dict, out: TextIO | None = None) -> pd.DataFrame:
    out = out if out is not None else sys.stdout
    checkpoints = Checkpoints.from_config(cfg)
    out_cfg = cfg.get("output", {}) or {}
    fmt = str(out_cfg.get("format", "csv")).lower()
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"unknown report format {fmt!r} (expected csv, mat or both)")
    plot = bool(out_cfg.get("plot", False))

    # the report directory is checked before the first row is printed
    root = out_cfg.get("root")
    out_root = prepare_output_root(root) if root else None
    if plot and out_root is None:
        _LOG.warning("plot requested without an output directory; no plot will be saved.")

    _LOG.info("scanning %d record(s) over %d checkpoint(s) [%d..%d step %d]",
              len(records), len(checkpoints), checkpoints.start, checkpoints.end, checkpoints.step)

    series = slowness_by_time(records, checkpoints)
    for t, value in series:
        out.write(format_row(t, value) + "\n")
    out.flush()

    df = build_dataframe(series)

    if out_root is not None:
        mat_var = str(out_cfg.get("mat_variable", "slowness"))
        write_report(df, out_root / "slowness", "slowness by time", fmt=fmt, mat_variable=mat_var)
        if plot:
            save_series_plot(df, out_root)
    return df
