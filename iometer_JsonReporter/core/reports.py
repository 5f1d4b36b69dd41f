# iometer_JsonReporter/core/reports.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Literal
import numpy as np
import pandas as pd
from scipy.io import savemat

from .metrics import SUMMARY_COLUMNS, SUMMARY_METRICS, summary_rows, total_metrics
from .model import OutputLayout, TestRecord

ReportFormat = Literal["none", "csv", "mat", "both"]


def records_to_document(records: list[TestRecord], layout: OutputLayout = "split") -> list[dict]:
    return [rec.to_dict(layout) for rec in records]


def write_json(records: list[TestRecord], out_path: Path,
               layout: OutputLayout = "split", indent: int | None = 2) -> Path:
    """
    Serialize the whole collection as one JSON array (UTF-8).
    Key order and element order follow the records, so identical input
    gives identical bytes.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)
    doc = records_to_document(records, layout)
    with out_path.open("w", encoding="utf-8", newline="\n") as f:
        json.dump(doc, f, ensure_ascii=False, indent=indent, allow_nan=False)
        f.write("\n")
    return out_path


def _build_dataframe(records: list[TestRecord]) -> pd.DataFrame:
    """Per-ALL-row summary + TOTAL row."""
    rows = summary_rows(records)
    df_out = pd.DataFrame(rows + [total_metrics(rows)], columns=SUMMARY_COLUMNS)
    df_out["Test Type"] = df_out["Test Type"].astype("Int64")
    return df_out


def _write_csv(df_out: pd.DataFrame, out_csv: Path, title: str) -> None:
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    df_out.to_csv(out_csv, index=False, encoding="utf-8")
    print(f"[OK] wrote report: {title} → {out_csv}")


def _to_mat_cellstr(seq: list) -> np.ndarray:
    """Make a MATLAB column cell array from a list of strings."""
    seq2 = [("" if s is None else str(s)) for s in seq]
    arr = np.empty((len(seq2), 1), dtype=object)
    arr[:, 0] = seq2
    return arr


def _mat_field(name: str) -> str:
    """MATLAB struct field names: letters, digits, underscores, leading letter."""
    import re
    s = re.sub(r"[^A-Za-z0-9]+", "_", name).strip("_")
    if not s or not s[0].isalpha():
        s = "f_" + s
    return s[:63]


def _write_mat(df_out: pd.DataFrame, out_mat: Path, varname: str, title: str) -> None:
    """
    Save a MATLAB struct with fields matching the CSV columns.
    Strings become cell arrays (Nx1), numerics become double (Nx1).
    """
    out_mat.parent.mkdir(parents=True, exist_ok=True)

    def numcol(name: str) -> np.ndarray:
        return pd.to_numeric(df_out[name], errors="coerce").to_numpy(dtype=float, na_value=np.nan).reshape(-1, 1)

    def strcol(name: str) -> np.ndarray:
        return _to_mat_cellstr(df_out[name].tolist())

    mat_struct = {}
    for col in SUMMARY_COLUMNS:
        numeric = col == "Test Type" or col in SUMMARY_METRICS
        mat_struct[_mat_field(col)] = numcol(col) if numeric else strcol(col)

    savemat(out_mat, {varname: mat_struct})
    print(f"[OK] wrote report: {title} → {out_mat}")


def write_report(records: list[TestRecord],
                 out_base: Path,
                 title: str,
                 fmt: ReportFormat = "csv",
                 mat_variable: str = "iometer") -> None:
    """
    Write the ALL-row summary in the requested format.
    - out_base is a *base path without extension* (e.g., .../results_summary)
    - fmt: "none" | "csv" | "mat" | "both"
    - mat_variable: MATLAB variable name of the struct
    """
    if fmt == "none" or not records:
        return
    df_out = _build_dataframe(records)

    if fmt in ("csv", "both"):
        _write_csv(df_out, out_base.with_suffix(".csv"), title)
    if fmt in ("mat", "both"):
        _write_mat(df_out, out_base.with_suffix(".mat"), mat_variable, title)
