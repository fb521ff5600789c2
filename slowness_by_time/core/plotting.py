# slowness_by_time/core/plotting.py
from __future__ import annotations
from pathlib import Path
import logging
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

_LOG = logging.getLogger(__name__)

PLOT_FILE_NAME = "slowness_by_time.png"


def save_series_plot(df: pd.DataFrame, out_dir: Path, title: str = "Maximum slowness vs time") -> Path | None:
    if df.empty:
        _LOG.info("empty series; skipping slowness plot.")
        return None
    out_dir.mkdir(parents=True, exist_ok=True)

    plt.figure(figsize=(11, 5))
    # value holds from one checkpoint until the next
    plt.step(df["time"].to_numpy(), df["max_slowness"].to_numpy(), where="post")
    plt.xlabel("Time")
    plt.ylabel("Maximum slowness")
    plt.title(title)
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    out_path = out_dir / PLOT_FILE_NAME
    plt.savefig(out_path, dpi=160)
    plt.close()
    _LOG.info("%d checkpoints → %s", len(df), out_path)
    return out_path
