# slowness_by_time/main.py
from __future__ import annotations
from pathlib import Path
import argparse
import logging
import sys
import yaml

from .core.model import SlownessError
from .core.pipeline import run_pipeline
from .loaders import stat_loader
from .utils.detect import resolve_input

# fixed name: under "python -m" __name__ would be "__main__"
_LOG = logging.getLogger("slowness_by_time.main")

DEFAULT_CONFIG = Path(__file__).resolve().parent / "config.yaml"
CONFIG_SECTIONS = ("input", "parsing", "checkpoints", "output", "logging")


def load_config(cfg_path: Path) -> dict:
    with cfg_path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"top level must be a mapping, got {type(cfg).__name__}")
    for key in CONFIG_SECTIONS:
        if cfg.get(key) is not None and not isinstance(cfg[key], dict):
            raise ValueError(f"section '{key}' must be a mapping, got {type(cfg[key]).__name__}")
    return cfg


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="slowness-by-time",
        description="Print the maximum slowness of active applications at each checkpoint.")
    parser.add_argument("input", nargs="?", default=None,
                        help="apps.stat file or simulation result directory (default from config)")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG,
                        help="YAML configuration file")
    parser.add_argument("--start", type=int, help="first checkpoint")
    parser.add_argument("--end", type=int, help="last checkpoint (inclusive)")
    parser.add_argument("--step", type=int, help="checkpoint spacing")
    parser.add_argument("--mode", choices=("lenient", "strict"),
                        help="numeric field parsing mode")
    parser.add_argument("--out", type=Path, help="directory for report files")
    parser.add_argument("--format", choices=("csv", "mat", "both"), help="report file format")
    parser.add_argument("--plot", action="store_true", default=None,
                        help="also save a PNG plot into --out")
    parser.add_argument("-v", "--verbose", action="store_true", default=None,
                        help="log progress to stderr")
    return parser.parse_args(argv)


def apply_overrides(cfg: dict, args) -> dict:
    cfg = dict(cfg)
    sections = {k: dict(cfg.get(k) or {}) for k in CONFIG_SECTIONS}
    if args.input is not None:
        sections["input"]["path"] = args.input
    for key in ("start", "end", "step"):
        if getattr(args, key) is not None:
            sections["checkpoints"][key] = getattr(args, key)
    if args.mode is not None:
        sections["parsing"]["mode"] = args.mode
    if args.out is not None:
        sections["output"]["root"] = str(args.out)
    if args.format is not None:
        sections["output"]["format"] = args.format
    if args.plot:
        sections["output"]["plot"] = True
    if args.verbose:
        sections["logging"]["verbose"] = True
    cfg.update(sections)
    return cfg


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(stream=sys.stderr, format="[%(levelname)s] %(message)s")
    logging.getLogger("slowness_by_time").setLevel(logging.INFO if verbose else logging.WARNING)


def main(argv=None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    # ---------- config ----------
    try:
        cfg = apply_overrides(load_config(args.config), args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        _setup_logging(False)
        _LOG.error("cannot load config %s: %s", args.config, e)
        return 1
    verbose = bool(cfg["logging"].get("verbose", False))
    _setup_logging(verbose)

    in_path = resolve_input(Path(cfg["input"].get("path") or "apps.stat"))
    _LOG.info("[cfg] input=%s mode=%s", in_path, cfg["parsing"].get("mode", "lenient"))

    # ---------- load + report ----------
    # everything is loaded before the first row is printed
    try:
        records = stat_loader.load(in_path, cfg)
        run_pipeline(records, cfg)
    except SlownessError as e:
        _LOG.error("%s", e)
        return 1
    except ValueError as e:
        _LOG.error("invalid configuration: %s", e)
        return 1
    except OSError as e:
        _LOG.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
