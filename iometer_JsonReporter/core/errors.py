# iometer_JsonReporter/core/errors.py
from __future__ import annotations
from pathlib import Path


class IOMeterParseError(Exception):
    """Base class for everything the converter raises on purpose."""


class ConfigError(IOMeterParseError):
    pass


class MissingFileError(IOMeterParseError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"file not found: {path}")


class LoaderError(IOMeterParseError):
    """File exists but could not be read (permissions, corrupt archive, ...)."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"loader failed for {path.name}: {cause}")


class FieldCoercionError(IOMeterParseError):
    """
    A matched result row could not be decoded.

    Carries enough context to point an operator at the exact spot:
    file name, 1-based line number, the raw line, the schema field and
    the raw value that failed (``None`` when the column is missing).
    """

    def __init__(self, file_name: str, line_no: int, line: str,
                 field_name: str, raw_value: str | None, reason: str):
        self.file_name = file_name
        self.line_no = line_no
        self.line = line
        self.field_name = field_name
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(
            f"{file_name}:{line_no}: field '{field_name}' "
            f"(value={raw_value!r}): {reason} | {_clip(line)}"
        )


def _clip(line: str, limit: int = 80) -> str:
    return line if len(line) <= limit else line[:limit] + "..."
