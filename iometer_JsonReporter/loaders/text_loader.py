# iometer_JsonReporter/loaders/text_loader.py
from __future__ import annotations
from pathlib import Path
import io, zipfile, logging

from ..core.errors import LoaderError, MissingFileError

_LOG = logging.getLogger(__name__)

# IOMeter on Windows writes ANSI/UTF-8 with an optional BOM
_ENCODING = "utf-8-sig"


def _lines_from_bytes(buff: bytes) -> list[str]:
    text = io.TextIOWrapper(io.BytesIO(buff), encoding=_ENCODING, errors="replace").read()
    return text.splitlines()


def load(path: Path) -> list[tuple[str, list[str]]]:
    """
    Accepts: a loose IOMeter results export (.csv / .txt), or a .zip of exports.
    Returns: one (file name, lines) pair per export, in order. Zip members are
    named ``<archive>/<member>`` so every CSV inside becomes its own record.
    """
    if not path.is_file():
        raise MissingFileError(path)

    try:
        if path.suffix.lower() != ".zip":
            return [(path.name, _lines_from_bytes(path.read_bytes()))]

        exports: list[tuple[str, list[str]]] = []
        with zipfile.ZipFile(path, "r") as zf:
            members = [m for m in zf.namelist() if m.lower().endswith(".csv")]
            for member in members:
                exports.append((f"{path.name}/{member}", _lines_from_bytes(zf.read(member))))
    except (OSError, zipfile.BadZipFile) as e:
        raise LoaderError(path, e) from e

    _LOG.debug("read %d CSV member(s) of %s", len(exports), path.name)
    return exports
