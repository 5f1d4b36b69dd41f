# iometer_JsonReporter/core/normalize.py
from __future__ import annotations
import re

from .schema import FieldSpec

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

_INT_BOUNDS = {
    "int32": (-(2 ** 31), 2 ** 31 - 1),
    "int64": (-(2 ** 63), 2 ** 63 - 1),
}


def to_int(raw: str, bits: str = "int64") -> int:
    s = raw.strip()
    if not _INT_RE.match(s):
        raise ValueError("not an integer")
    value = int(s)
    lo, hi = _INT_BOUNDS[bits]
    if not lo <= value <= hi:
        raise ValueError(f"out of {bits} range")
    return value


def to_float(raw: str) -> float:
    s = raw.strip()
    if not _FLOAT_RE.match(s):
        raise ValueError("not a number")
    return float(s)


def to_str(raw: str) -> str:
    return raw


def coerce(raw: str, spec: FieldSpec):
    """
    Convert one raw column to the type named by ``spec``.
    Empty values become None only for nullable fields; anything else that
    does not parse raises ValueError.
    """
    if spec.type == "str":
        return to_str(raw)
    if spec.nullable and raw.strip() == "":
        return None
    if spec.type == "float":
        return to_float(raw)
    return to_int(raw, spec.type)
