"""Synthetic IOMeter result exports used by the tests."""
from iometer_JsonReporter.core.schema import RESULT_FIELD_INDEX, RESULT_SCHEMA

FLOAT_DEFAULT = "1.5"
INT_DEFAULT = "7"


def result_line(target="ALL", name="All", spec="4K read", counts=("1", "1", "1"), **overrides):
    """80-column result row; ``overrides`` maps schema field names to raw strings."""
    values = [target, name, spec, *counts]
    for field in RESULT_SCHEMA[6:]:
        values.append(FLOAT_DEFAULT if field.type == "float" else INT_DEFAULT)
    for key, raw in overrides.items():
        values[RESULT_FIELD_INDEX[key]] = raw
    return ",".join(values)


def export_lines(rows=None, description="sequential read", test_type="0",
                 spec_name="4K read", spec_default="0",
                 spec_row="4096,100,100,0,0,1,0,0,"):
    if rows is None:
        rows = [
            result_line("ALL", "All", spec_name, counts=("", "", ""), IOps="523.45"),
            result_line("MANAGER", "HOST1", spec_name, counts=("1", "4", "2")),
            result_line("PROCESSOR", "CPU 0", spec_name, counts=("1", "4", "2")),
            result_line("WORKER", "Worker 1", spec_name, counts=("1", "1", "2")),
        ]
    return [
        "'Test Type,Test Description",
        f"{test_type},{description}",
        "'Version",
        "1.1.0",
        "'Time Stamp",
        "2024-03-01 10:15:02:117",
        "'Access specifications",
        "'Access specification name,default assignment",
        f"{spec_name},{spec_default}",
        "'size,% of size,% reads,% random,delay,burst,align,reply",
        spec_row,
        "'End access specifications",
        "'Results",
        "'" + ",".join(f.name for f in RESULT_SCHEMA),
        *rows,
        "'End Results",
    ]


def export_text(**kwargs) -> str:
    return "\n".join(export_lines(**kwargs)) + "\n"
