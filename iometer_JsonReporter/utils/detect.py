# iometer_JsonReporter/utils/detect.py
from __future__ import annotations
from pathlib import Path
from dataclasses import dataclass
from fnmatch import fnmatch
from typing import Literal

DetectedKind = Literal["csv", "zip", "text"]


@dataclass(frozen=True)
class DetectedItem:
    path: Path        # actual path on disk
    kind: DetectedKind


def detect_kind(p: Path) -> DetectedKind:
    """
    Classify a single path.
    - .csv -> 'csv'
    - .zip -> 'zip' (CSV members are read in archive order)
    else   -> 'text' (anything the pattern selected is treated as a plain export)
    """
    suffix = p.suffix.lower()
    if suffix == ".csv":
        return "csv"
    if suffix == ".zip":
        return "zip"
    return "text"


def discover_inputs(root: Path, pattern: str = "*.csv", recurse: bool = False) -> list[DetectedItem]:
    """
    If 'root' is a file -> return that one item when its name matches 'pattern'.
    If 'root' is a folder -> glob (optionally recursively) for 'pattern'.
    A missing root yields an empty list.
    """
    items: list[DetectedItem] = []
    if root.is_file():
        if fnmatch(root.name, pattern):
            items.append(DetectedItem(root.resolve(), detect_kind(root)))
        return items
    if not root.is_dir():
        return items

    it = root.rglob(pattern) if recurse else root.glob(pattern)
    for p in it:
        if not p.is_file():
            continue
        items.append(DetectedItem(p.resolve(), detect_kind(p)))

    # deterministic ordering
    items.sort(key=lambda x: str(x.path))
    return items
