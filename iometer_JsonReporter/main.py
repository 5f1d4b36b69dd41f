# iometer_JsonReporter/main.py
from __future__ import annotations
from pathlib import Path
import argparse
import logging
import sys
import yaml

from .core.errors import ConfigError, FieldCoercionError
from .core.pipeline import run_pipeline, section, validate_config
from .utils.detect import discover_inputs

DEFAULT_CONFIG = Path(__file__).resolve().parent / "config.yaml"


def load_config(cfg_path: Path) -> dict:
    with cfg_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iometer-json",
        description="Convert IOMeter result exports into one JSON document.",
    )
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG,
                        help="YAML config file (default: bundled config.yaml)")
    parser.add_argument("--source-directory", help="folder (or single file) to scan")
    parser.add_argument("--file-pattern", help="glob filter, e.g. '*.csv'")
    parser.add_argument("--recurse", action="store_true", default=None, help="scan sub-folders too")
    parser.add_argument("--output", help="JSON file to write")
    parser.add_argument("--layout", choices=["split", "combined"])
    parser.add_argument("--no-processors", action="store_true", help="skip PROCESSOR rows")
    parser.add_argument("--no-workers", action="store_true", help="skip WORKER rows")
    parser.add_argument("--on-error", choices=["row", "file", "abort"],
                        help="what a bad numeric field does")
    parser.add_argument("--report-format", choices=["none", "csv", "mat", "both"])
    parser.add_argument("--plot", action="store_true", default=None, help="write an IOps bar chart")
    parser.add_argument("-q", "--quiet", action="store_true", help="only print warnings and errors")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def apply_overrides(cfg: dict, args: argparse.Namespace) -> dict:
    """Command-line values win over the YAML file."""
    def ensure(name: str) -> dict:
        cfg[name] = cfg.get(name) or {}
        return cfg[name]

    overrides = [
        ("input", "source_directory", args.source_directory),
        ("input", "file_pattern", args.file_pattern),
        ("input", "recurse", args.recurse),
        ("output", "path", args.output),
        ("output", "layout", args.layout),
        ("parsing", "on_coercion_error", args.on_error),
        ("reports", "format", args.report_format),
        ("plots", "enabled", args.plot),
        ("logging", "level", args.log_level),
    ]
    for sec, key, value in overrides:
        if value is not None:
            ensure(sec)[key] = value
    if args.no_processors:
        ensure("parsing")["include_processors"] = False
    if args.no_workers:
        ensure("parsing")["include_workers"] = False
    if args.quiet:
        ensure("logging")["verbose"] = False
    return cfg


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # ---------- config ----------
    try:
        cfg = apply_overrides(load_config(args.config), args)
        validate_config(cfg)
    except (OSError, yaml.YAMLError, ConfigError) as e:
        print(f"[ERROR] config: {e}", file=sys.stderr)
        return 2

    log_cfg = section(cfg, "logging")
    logging.basicConfig(level=str(log_cfg.get("level", "WARNING")).upper(),
                        format="%(levelname)s %(name)s: %(message)s")
    verbose = bool(log_cfg.get("verbose", True))

    in_path = Path(cfg["input"]["source_directory"]).resolve()
    pattern = str(cfg["input"].get("file_pattern", "*.csv"))
    recurse = bool(cfg["input"].get("recurse", False))
    out_path = Path(cfg["output"]["path"]).resolve()
    if verbose:
        print(f"[cfg] input={in_path} pattern={pattern} (recurse={recurse})")
        print(f"[cfg] output={out_path}")

    # ---------- discover ----------
    if not in_path.exists():
        print(f"[WARN] source does not exist: {in_path}")
    detected = discover_inputs(in_path, pattern=pattern, recurse=recurse)
    if verbose:
        if detected:
            kinds: dict[str, int] = {}
            for d in detected:
                kinds[d.kind] = kinds.get(d.kind, 0) + 1
            print(f"[detector] found {len(detected)} inputs → {kinds}")
        else:
            print(f"[INFO] No files matching '{pattern}' under: {in_path}")

    # ---------- parse + write ----------
    try:
        records = run_pipeline([d.path for d in detected], cfg, out_path)
    except FieldCoercionError as e:
        print(f"[ERROR] aborting batch: {e}", file=sys.stderr)
        return 1

    if verbose:
        print(f"[summary] {len(records)} record(s) from {len(detected)} file(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
