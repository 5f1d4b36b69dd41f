# iometer_JsonReporter/core/classify.py
from __future__ import annotations
import logging
import re
from enum import Enum
from typing import Sequence

from .model import TargetKind

_LOG = logging.getLogger(__name__)

# ----- literal marker lines of an IOMeter results export -----
TEST_HEADER_MARKER = "'Test Type,Test Description"
TIME_STAMP_MARKER = "'Time Stamp"
ACCESS_SPECS_START_MARKER = "'Access specifications"
ACCESS_SPECS_END_MARKER = "'End access specifications"
ACCESS_SPEC_NAME_MARKER = "'Access specification name,default assignment"

_TEST_HEADER_VALUE_RE = re.compile(r"^(\d+),(.*)$")
_ACCESS_SPEC_NAME_VALUE_RE = re.compile(r"^([^,]+),(\d+)$")
# eight non-negative integers; IOMeter writes a trailing comma, tolerate its absence
_ACCESS_SPEC_ROW_RE = re.compile(r"^" + r",".join([r"(\d+)"] * 8) + r",?$")

_TARGET_TOKENS = {k.value: k for k in TargetKind}


class LineKind(Enum):
    TEST_HEADER = "test_header"
    TIME_STAMP = "time_stamp"
    ACCESS_SPECS_START = "access_specs_start"
    ACCESS_SPECS_END = "access_specs_end"
    ACCESS_SPEC_NAME = "access_spec_name"
    ACCESS_SPEC_ROW = "access_spec_row"
    RESULT_ROW = "result_row"
    NONE = "none"


_MARKERS = {
    TEST_HEADER_MARKER: LineKind.TEST_HEADER,
    TIME_STAMP_MARKER: LineKind.TIME_STAMP,
    ACCESS_SPECS_START_MARKER: LineKind.ACCESS_SPECS_START,
    ACCESS_SPECS_END_MARKER: LineKind.ACCESS_SPECS_END,
}


def classify_line(line: str, in_access_specs: bool) -> LineKind:
    """
    Categorise one trimmed line.

    Order:
      1) Section / header markers (exact, case-sensitive).
      2) Access-spec name marker and data rows, only inside an
         'Access specifications' block.
      3) Result rows, on every line regardless of section.
    """
    kind = _MARKERS.get(line)
    if kind is not None:
        return kind

    if in_access_specs:
        if line == ACCESS_SPEC_NAME_MARKER:
            return LineKind.ACCESS_SPEC_NAME
        if _ACCESS_SPEC_ROW_RE.match(line):
            return LineKind.ACCESS_SPEC_ROW

    if result_kind(line) is not None:
        return LineKind.RESULT_ROW
    return LineKind.NONE


def result_kind(line: str) -> TargetKind | None:
    """Target kind when the first comma field is exactly ALL/MANAGER/PROCESSOR/WORKER."""
    return _TARGET_TOKENS.get(line.split(",", 1)[0])


def peek(lines: Sequence[str], index: int) -> str | None:
    """Trimmed line after ``index`` or None at end of input."""
    nxt = index + 1
    if nxt >= len(lines):
        return None
    return lines[nxt].strip()


def parse_test_header(value_line: str | None) -> tuple[int, str] | None:
    if value_line is None:
        return None
    m = _TEST_HEADER_VALUE_RE.match(value_line)
    if not m:
        _LOG.debug("test header value line did not match: %r", value_line)
        return None
    return int(m.group(1)), m.group(2)


def parse_access_spec_name(value_line: str | None) -> tuple[str, str] | None:
    if value_line is None:
        return None
    m = _ACCESS_SPEC_NAME_VALUE_RE.match(value_line)
    if not m:
        _LOG.debug("access spec name line did not match: %r", value_line)
        return None
    return m.group(1), m.group(2)


def parse_access_spec_row(line: str) -> tuple[int, ...] | None:
    m = _ACCESS_SPEC_ROW_RE.match(line)
    if not m:
        return None
    return tuple(int(g) for g in m.groups())
