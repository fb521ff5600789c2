# slowness_by_time/core/reports.py
from __future__ import annotations
from pathlib import Path
from typing import Literal, Sequence
import logging
import numpy as np
import pandas as pd
from scipy.io import savemat

ReportFormat = Literal["csv", "mat", "both"]
REPORT_FORMATS: tuple[str, ...] = ("csv", "mat", "both")

# header line the simulator writes on slowness.stat
CSV_HEADER = "# Time, maximum slowness"

_LOG = logging.getLogger(__name__)


def build_dataframe(series: Sequence[tuple[int, float]]) -> pd.DataFrame:
    df = pd.DataFrame(list(series), columns=["time", "max_slowness"])
    return df.astype({"time": "int64", "max_slowness": "float64"})


def _write_csv(df_out: pd.DataFrame, out_csv: Path, title: str) -> None:
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    with out_csv.open("w", encoding="utf-8", newline="") as f:
        f.write(CSV_HEADER + "\n")
        df_out.to_csv(f, index=False, header=False)
    _LOG.info("wrote report: %s → %s", title, out_csv)


def _write_mat(df_out: pd.DataFrame, out_mat: Path, varname: str, title: str) -> None:
    """Store the series as one struct variable holding `time` and `max_slowness` column vectors."""
    out_mat.parent.mkdir(parents=True, exist_ok=True)

    def numcol(name: str) -> np.ndarray:
        return df_out[name].to_numpy(dtype=float).reshape(-1, 1)

    savemat(out_mat, {varname: {"time": numcol("time"), "max_slowness": numcol("max_slowness")}})
    _LOG.info("wrote report: %s → %s", title, out_mat)


def write_report(df_out: pd.DataFrame,
                 out_base: Path,
                 title: str,
                 fmt: ReportFormat = "csv",
                 mat_variable: str = "slowness") -> list[Path]:
    """
    Save the slowness series next to `out_base`: `.csv` (slowness.stat layout),
    `.mat`, or both. Returns the files written, in that order.
    """
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"unknown report format {fmt!r} (expected csv, mat or both)")
    written: list[Path] = []
    if fmt in ("csv", "both"):
        out_csv = out_base.with_suffix(".csv")
        _write_csv(df_out, out_csv, title)
        written.append(out_csv)
    if fmt in ("mat", "both"):
        out_mat = out_base.with_suffix(".mat")
        _write_mat(df_out, out_mat, mat_variable, title)
        written.append(out_mat)
    return written
