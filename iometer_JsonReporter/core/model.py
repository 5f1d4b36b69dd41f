# iometer_JsonReporter/core/model.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from .schema import ACCESS_SPEC_KEYS, RESULT_FIELD_INDEX, RESULT_FIELD_NAMES

OutputLayout = Literal["split", "combined"]


class TargetKind(str, Enum):
    ALL = "ALL"
    MANAGER = "MANAGER"
    PROCESSOR = "PROCESSOR"
    WORKER = "WORKER"


@dataclass(frozen=True)
class AccessSpecification:
    name: str                 # carried from the last name pair seen in the file
    default_assignment: str
    size: int
    percent_of_size: int
    percent_reads: int
    percent_random: int
    delay: int
    burst: int
    align: int
    reply: int

    def to_dict(self) -> dict[str, Any]:
        values = (self.name, self.default_assignment, self.size, self.percent_of_size,
                  self.percent_reads, self.percent_random, self.delay, self.burst,
                  self.align, self.reply)
        return dict(zip(ACCESS_SPEC_KEYS, values))


@dataclass(frozen=True)
class ResultRow:
    kind: TargetKind
    values: tuple             # aligned with schema.RESULT_SCHEMA
    line_no: int              # 1-based line in the source file

    def __post_init__(self):
        if len(self.values) != len(RESULT_FIELD_NAMES):
            raise ValueError(f"expected {len(RESULT_FIELD_NAMES)} values, got {len(self.values)}")

    def __getitem__(self, name: str):
        return self.values[RESULT_FIELD_INDEX[name]]

    def to_dict(self) -> dict[str, Any]:
        return dict(zip(RESULT_FIELD_NAMES, self.values))


@dataclass(frozen=True)
class TestRecord:
    file_name: str
    test_type: int | None = None
    test_description: str | None = None
    time_stamp: str | None = None
    access_specifications: tuple[AccessSpecification, ...] = ()
    all: tuple[ResultRow, ...] = ()
    managers: tuple[ResultRow, ...] = ()
    processors: tuple[ResultRow, ...] = ()
    workers: tuple[ResultRow, ...] = ()

    # keep pytest from collecting this as a test class
    __test__ = False

    def rows(self, kind: TargetKind) -> tuple[ResultRow, ...]:
        return {
            TargetKind.ALL: self.all,
            TargetKind.MANAGER: self.managers,
            TargetKind.PROCESSOR: self.processors,
            TargetKind.WORKER: self.workers,
        }[kind]

    def all_rows(self) -> list[ResultRow]:
        """Every result row of the file in source-line order."""
        merged = [*self.all, *self.managers, *self.processors, *self.workers]
        return sorted(merged, key=lambda r: r.line_no)

    def to_dict(self, layout: OutputLayout = "split") -> dict[str, Any]:
        out: dict[str, Any] = {
            "File Name": self.file_name,
            "Test Type": self.test_type,
            "Test Description": self.test_description,
            "Time Stamp": self.time_stamp,
            "Access Specifications": [a.to_dict() for a in self.access_specifications],
        }
        if layout == "combined":
            out["Test Results"] = [r.to_dict() for r in self.all_rows()]
        else:
            out["Test Results All"] = [r.to_dict() for r in self.all]
            out["Test Results Managers"] = [r.to_dict() for r in self.managers]
            out["Test Results Processors"] = [r.to_dict() for r in self.processors]
            out["Test Results Workers"] = [r.to_dict() for r in self.workers]
        return out
