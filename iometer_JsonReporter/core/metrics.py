# iometer_JsonReporter/core/metrics.py
from __future__ import annotations
import numpy as np

from .model import ResultRow, TestRecord

SUMMARY_METRICS: tuple[str, ...] = (
    "IOps", "MBps (Decimal)", "Average Response Time",
    "Maximum Response Time", "% CPU Utilization", "Errors",
)

SUMMARY_COLUMNS: list[str] = [
    "File Name", "Test Type", "Test Description", "Time Stamp",
    "Access Specification Name", *SUMMARY_METRICS,
]


def row_metrics(record: TestRecord, row: ResultRow) -> dict:
    out = {
        "File Name": record.file_name,
        "Test Type": record.test_type,
        "Test Description": record.test_description or "",
        "Time Stamp": record.time_stamp or "",
        "Access Specification Name": row["Access Specification Name"],
    }
    for name in SUMMARY_METRICS:
        value = row[name]
        out[name] = round(float(value), 6) if isinstance(value, float) else value
    return out


def total_metrics(rows: list[dict]) -> dict:
    """
    TOTAL line of the summary: rates and errors are summed, response times
    are averaged / maxed, CPU load averaged.
    """
    def col(name: str) -> np.ndarray:
        return np.asarray([r[name] for r in rows], dtype=float)

    if not rows:
        return {"File Name": "TOTAL", "Test Type": None, "Test Description": "", "Time Stamp": "",
                "Access Specification Name": "", "IOps": 0.0, "MBps (Decimal)": 0.0,
                "Average Response Time": 0.0, "Maximum Response Time": 0.0,
                "% CPU Utilization": 0.0, "Errors": 0}
    return {
        "File Name": "TOTAL",
        "Test Type": None,
        "Test Description": "",
        "Time Stamp": "",
        "Access Specification Name": "",
        "IOps": round(float(np.nansum(col("IOps"))), 6),
        "MBps (Decimal)": round(float(np.nansum(col("MBps (Decimal)"))), 6),
        "Average Response Time": round(float(np.nanmean(col("Average Response Time"))), 6),
        "Maximum Response Time": round(float(np.nanmax(col("Maximum Response Time"))), 6),
        "% CPU Utilization": round(float(np.nanmean(col("% CPU Utilization"))), 6),
        "Errors": int(np.nansum(col("Errors"))),
    }


def summary_rows(records: list[TestRecord]) -> list[dict]:
    """One entry per ALL row of every record, in collection order."""
    return [row_metrics(rec, row) for rec in records for row in rec.all]
