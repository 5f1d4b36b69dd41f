# iometer_JsonReporter/core/schema.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

FieldType = Literal["str", "int32", "int64", "float"]


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: FieldType
    nullable: bool = False


def _fields(type_: FieldType, *names: str) -> list[FieldSpec]:
    return [FieldSpec(n, type_) for n in names]


# Column layout of every IOMeter result row (ALL / MANAGER / PROCESSOR / WORKER).
# Only the three leading counts may be empty; IOMeter leaves them blank on ALL rows.
RESULT_SCHEMA: tuple[FieldSpec, ...] = tuple(
    _fields("str", "Target Type", "Target Name", "Access Specification Name")
    + [FieldSpec(n, "int32", nullable=True) for n in ("# Managers", "# Workers", "# Disks")]
    + _fields(
        "float",
        "IOps", "Read IOps", "Write IOps",
        "MBps (Binary)", "Read MBps (Binary)", "Write MBps (Binary)",
        "MBps (Decimal)", "Read MBps (Decimal)", "Write MBps (Decimal)",
        "Transactions per Second", "Connections per Second",
        "Average Response Time", "Average Read Response Time",
        "Average Write Response Time", "Average Transaction Time",
        "Average Connection Time",
        "Maximum Response Time", "Maximum Read Response Time",
        "Maximum Write Response Time", "Maximum Transaction Time",
        "Maximum Connection Time",
    )
    + _fields("int32", "Errors", "Read Errors", "Write Errors")
    + _fields("int64", "Bytes Read", "Bytes Written", "Read I/Os", "Write I/Os")
    + _fields("int32", "Connections", "Transactions per Connection")
    + _fields(
        "int64",
        "Total Raw Read Response Time", "Total Raw Write Response Time",
        "Total Raw Transaction Time", "Total Raw Connection Time",
        "Maximum Raw Read Response Time", "Maximum Raw Write Response Time",
        "Maximum Raw Transaction Time", "Maximum Raw Connection Time",
        "Total Raw Run Time", "Starting Sector", "Maximum Size",
    )
    + _fields("int32", "Queue Depth")
    + _fields(
        "float",
        "% CPU Utilization", "% User Time", "% Privileged Time",
        "% DPC Time", "% Interrupt Time",
    )
    + _fields("int64", "Processor Speed")
    + _fields("float", "Interrupts per Second", "CPU Effectiveness", "Packets/Second")
    + _fields("int32", "Packet Errors")
    + _fields("float", "Segments Retransmitted/Second")
    + _fields(
        "int32",
        "0 to 50 uS", "50 to 100 uS", "100 to 200 uS", "200 to 500 uS",
        "0.5 to 1 mS", "1 to 2 mS", "2 to 5 mS", "5 to 10 mS",
        "10 to 15 mS", "15 to 20 mS", "20 to 30 mS", "30 to 50 mS",
        "50 to 100 mS", "100 to 200 mS", "200 to 500 mS",
        "0.5 to 1 S", "1 to 2 s", "2 to 4.7 s", "4.7 to 5 s",
        "5 to 10 s", ">= 10 s",
    )
)

RESULT_FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in RESULT_SCHEMA)
RESULT_FIELD_INDEX: dict[str, int] = {name: i for i, name in enumerate(RESULT_FIELD_NAMES)}
RESULT_COLUMN_COUNT = len(RESULT_SCHEMA)  # 80

# JSON keys of an access specification, in output order.
ACCESS_SPEC_KEYS: tuple[str, ...] = (
    "Access Specification Name", "Default Assignment",
    "Size", "% of Size", "% Reads", "% Random",
    "Delay", "Burst", "Align", "Reply",
)

assert RESULT_COLUMN_COUNT == 80, RESULT_COLUMN_COUNT
assert len(RESULT_FIELD_INDEX) == RESULT_COLUMN_COUNT, "duplicate result field name"
