# iometer_JsonReporter/core/plotting.py
from __future__ import annotations
from pathlib import Path
import matplotlib.pyplot as plt

from .model import TestRecord


def _label(record: TestRecord, spec_name: str) -> str:
    base = record.test_description or record.file_name
    return f"{base} | {spec_name}" if spec_name else base


def save_iops_plot(records: list[TestRecord], out_path: Path) -> Path | None:
    """
    Bar chart of total IOps (ALL rows), split into read / write share,
    one bar per file and access specification.
    """
    labels, reads, writes = [], [], []
    for rec in records:
        for row in rec.all:
            labels.append(_label(rec, row["Access Specification Name"]))
            reads.append(row["Read IOps"])
            writes.append(row["Write IOps"])

    if not labels:
        print("[INFO] no ALL result rows; skipping IOps plot.")
        return None

    out_path.parent.mkdir(parents=True, exist_ok=True)
    x = range(len(labels))
    plt.figure(figsize=(max(6, 0.6 * len(labels) + 2), 6))
    plt.bar(x, reads, label="Read IOps")
    plt.bar(x, writes, bottom=reads, label="Write IOps")
    plt.xticks(list(x), labels, rotation=60, ha="right", fontsize=8)
    plt.ylabel("IOps")
    plt.title("IOMeter: IOps per test")
    plt.grid(True, axis="y", alpha=0.3)
    plt.legend(fontsize=8, frameon=False)
    plt.tight_layout()
    plt.savefig(out_path, dpi=160)
    plt.close()
    print(f"[OK] IOps plot: {len(labels)} bar(s) → {out_path}")
    return out_path
