# iometer_JsonReporter/core/assemble.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Literal, Sequence

from .classify import (
    LineKind, classify_line, peek, result_kind,
    parse_access_spec_name, parse_access_spec_row, parse_test_header,
)
from .errors import FieldCoercionError
from .model import AccessSpecification, ResultRow, TargetKind, TestRecord
from .normalize import coerce
from .schema import RESULT_COLUMN_COUNT, RESULT_SCHEMA

_LOG = logging.getLogger(__name__)

CoercionPolicy = Literal["row", "file", "abort"]


@dataclass
class ScanState:
    """Mutable state of one file's forward scan."""
    in_access_specs: bool = False
    spec_name: str = ""
    spec_default: str = ""
    block_index: int = 0              # count of 'Access specifications' markers seen
    name_block: int | None = None     # block in which spec_name was last set
    test_type: int | None = None
    test_description: str | None = None
    time_stamp: str | None = None
    access_specs: list[AccessSpecification] = field(default_factory=list)
    rows: dict[TargetKind, list[ResultRow]] = field(
        default_factory=lambda: {k: [] for k in TargetKind})

    def finish(self, file_name: str) -> TestRecord:
        return TestRecord(
            file_name=file_name,
            test_type=self.test_type,
            test_description=self.test_description,
            time_stamp=self.time_stamp,
            access_specifications=tuple(self.access_specs),
            all=tuple(self.rows[TargetKind.ALL]),
            managers=tuple(self.rows[TargetKind.MANAGER]),
            processors=tuple(self.rows[TargetKind.PROCESSOR]),
            workers=tuple(self.rows[TargetKind.WORKER]),
        )


@dataclass(frozen=True)
class AssembleResult:
    record: TestRecord
    errors: tuple[FieldCoercionError, ...] = ()
    truncated: bool = False           # scan stopped early under the "file" policy


def decode_result_row(raw_line: str, kind: TargetKind, file_name: str, line_no: int) -> ResultRow:
    """
    Map the comma-split raw line onto the shared result schema.
    Raises FieldCoercionError on a missing column, a non-empty surplus
    column or a value that does not fit its field type.
    """
    parts = raw_line.split(",")
    if len(parts) > RESULT_COLUMN_COUNT:
        extra = [p for p in parts[RESULT_COLUMN_COUNT:] if p.strip()]
        if extra:
            raise FieldCoercionError(file_name, line_no, raw_line, "<row>", extra[0],
                                     f"{len(parts)} columns, expected {RESULT_COLUMN_COUNT}")

    values = []
    for i, spec in enumerate(RESULT_SCHEMA):
        if i >= len(parts):
            raise FieldCoercionError(file_name, line_no, raw_line, spec.name, None,
                                     f"missing column {i} ({len(parts)} of {RESULT_COLUMN_COUNT} present)")
        try:
            values.append(coerce(parts[i], spec))
        except ValueError as e:
            raise FieldCoercionError(file_name, line_no, raw_line, spec.name, parts[i], str(e)) from e
    return ResultRow(kind=kind, values=tuple(values), line_no=line_no)


def assemble_record(file_name: str,
                    lines: Sequence[str],
                    include_processors: bool = True,
                    include_workers: bool = True,
                    on_error: CoercionPolicy = "row") -> AssembleResult:
    """
    Single forward pass over the lines of one IOMeter export.

    Marker lines are handled first, access-spec rows only while inside an
    access-spec block, result rows anywhere. Lines matching nothing are
    skipped. ``on_error`` decides what a FieldCoercionError does:
    "row" drops the row, "file" stops the scan and keeps what was read,
    "abort" re-raises.
    """
    state = ScanState()
    errors: list[FieldCoercionError] = []
    skipped_kinds = set()
    if not include_processors:
        skipped_kinds.add(TargetKind.PROCESSOR)
    if not include_workers:
        skipped_kinds.add(TargetKind.WORKER)

    for idx, raw in enumerate(lines):
        line = raw.strip()
        kind = classify_line(line, state.in_access_specs)

        if kind is LineKind.NONE:
            continue

        if kind is LineKind.TEST_HEADER:
            header = parse_test_header(peek(lines, idx))
            if header is not None:
                state.test_type, state.test_description = header
            continue

        if kind is LineKind.TIME_STAMP:
            value = peek(lines, idx)
            if value is not None:
                state.time_stamp = value
            continue

        if kind is LineKind.ACCESS_SPECS_START:
            state.in_access_specs = True
            state.block_index += 1
            continue

        if kind is LineKind.ACCESS_SPECS_END:
            state.in_access_specs = False
            continue

        if kind is LineKind.ACCESS_SPEC_NAME:
            pair = parse_access_spec_name(peek(lines, idx))
            if pair is not None:
                state.spec_name, state.spec_default = pair
                state.name_block = state.block_index
            continue

        if kind is LineKind.ACCESS_SPEC_ROW:
            nums = parse_access_spec_row(line)
            if state.name_block != state.block_index:
                _LOG.warning("%s:%d: access specification uses name %r carried from an earlier block",
                             file_name, idx + 1, state.spec_name)
            state.access_specs.append(AccessSpecification(state.spec_name, state.spec_default, *nums))
            continue

        # RESULT_ROW
        target = result_kind(line)
        if target in skipped_kinds:
            continue
        try:
            row = decode_result_row(raw, target, file_name, idx + 1)
        except FieldCoercionError as e:
            if on_error == "abort":
                raise
            errors.append(e)
            if on_error == "file":
                _LOG.debug("stopping %s at line %d: %s", file_name, idx + 1, e)
                return AssembleResult(state.finish(file_name), tuple(errors), truncated=True)
            _LOG.debug("skipping row: %s", e)
            continue
        state.rows[target].append(row)

    return AssembleResult(state.finish(file_name), tuple(errors))
