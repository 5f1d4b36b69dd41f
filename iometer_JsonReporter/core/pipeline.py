# iometer_JsonReporter/core/pipeline.py
from __future__ import annotations
import logging
from pathlib import Path

from ..loaders import text_loader
from .assemble import assemble_record
from .errors import ConfigError, LoaderError, MissingFileError
from .model import TestRecord
from .plotting import save_iops_plot
from .reports import write_json, write_report

_LOG = logging.getLogger(__name__)

_POLICIES = ("row", "file", "abort")
_LAYOUTS = ("split", "combined")
_REPORT_FORMATS = ("none", "csv", "mat", "both")


def section(cfg: dict, name: str) -> dict:
    """Config section as a dict; an empty YAML section (``parsing:``) reads as None."""
    return cfg.get(name) or {}


def validate_config(cfg: dict) -> None:
    """Fail early on missing required keys or unknown enum values."""
    if not section(cfg, "input").get("source_directory"):
        raise ConfigError("input.source_directory is required")
    if not section(cfg, "output").get("path"):
        raise ConfigError("output.path is required")

    checks = [
        ("parsing.on_coercion_error", section(cfg, "parsing").get("on_coercion_error", "row"), _POLICIES),
        ("output.layout", section(cfg, "output").get("layout", "split"), _LAYOUTS),
        ("reports.format", str(section(cfg, "reports").get("format", "none")).lower(), _REPORT_FORMATS),
    ]
    for key, value, allowed in checks:
        if value not in allowed:
            raise ConfigError(f"{key}={value!r}; expected one of {', '.join(allowed)}")

    level = str(section(cfg, "logging").get("level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"logging.level={level!r} is not a logging level")


def collect_records(paths: list[Path], cfg: dict) -> list[TestRecord]:
    """
    Load and assemble every export in order. Files that are missing or
    cannot be read are reported and skipped; coercion errors follow
    ``parsing.on_coercion_error``.
    """
    parsing = section(cfg, "parsing")
    include_processors = bool(parsing.get("include_processors", True))
    include_workers = bool(parsing.get("include_workers", True))
    policy = parsing.get("on_coercion_error", "row")
    verbose = bool(section(cfg, "logging").get("verbose", True))

    records: list[TestRecord] = []
    for path in paths:
        if verbose:
            print(f"  [load] {path.name}")
        try:
            exports = text_loader.load(path)
        except (MissingFileError, LoaderError) as e:
            print(f"[WARN] {e}; skipping.")
            continue

        for file_name, lines in exports:
            result = assemble_record(
                file_name, lines,
                include_processors=include_processors,
                include_workers=include_workers,
                on_error=policy,
            )
            for err in result.errors:
                print(f"[WARN] {err}")
            if result.truncated:
                print(f"[WARN] {file_name}: scan stopped at line {result.errors[-1].line_no}; "
                      f"keeping partial record.")

            rec = result.record
            _LOG.info("%s: %d access spec(s), rows all=%d managers=%d processors=%d workers=%d",
                      rec.file_name, len(rec.access_specifications), len(rec.all),
                      len(rec.managers), len(rec.processors), len(rec.workers))
            records.append(rec)
    return records


def run_pipeline(paths: list[Path], cfg: dict, out_path: Path) -> list[TestRecord]:
    """Parse ``paths`` and write the JSON document plus any configured extras."""
    records = collect_records(paths, cfg)

    out_cfg = section(cfg, "output")
    layout = out_cfg.get("layout", "split")
    indent = out_cfg.get("indent", 2)
    write_json(records, out_path, layout=layout, indent=indent)
    print(f"[OK] wrote {len(records)} record(s) → {out_path}")

    # reports
    rep_cfg = section(cfg, "reports")
    fmt = str(rep_cfg.get("format", "none")).lower()
    mat_var = str(rep_cfg.get("mat_variable", "iometer"))
    out_base = out_path.with_name(out_path.stem + "_summary")
    write_report(records, out_base, f"{out_path.stem} summary", fmt=fmt, mat_variable=mat_var)

    if bool(section(cfg, "plots").get("enabled", False)):
        save_iops_plot(records, out_path.with_name(out_path.stem + "_iops.png"))

    return records
