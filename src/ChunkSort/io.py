# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.io",
#   "purpose": "Reading and writing newline-delimited integer files.",
#   "sections": [
#     {
#       "id": "parse-number",
#       "name": "parse_number",
#       "anchor": "function-parse-number",
#       "kind": "function"
#     },
#     {
#       "id": "read-numbers",
#       "name": "read_numbers",
#       "anchor": "function-read-numbers",
#       "kind": "function"
#     },
#     {
#       "id": "atomic-write",
#       "name": "atomic_write",
#       "anchor": "function-atomic-write",
#       "kind": "function"
#     },
#     {
#       "id": "write-numbers",
#       "name": "write_numbers",
#       "anchor": "function-write-numbers",
#       "kind": "function"
#     },
#     {
#       "id": "list-input-files",
#       "name": "list_input_files",
#       "anchor": "function-list-input-files",
#       "kind": "function"
#     },
#     {
#       "id": "output-directory-for",
#       "name": "output_directory_for",
#       "anchor": "function-output-directory-for",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Reading and writing newline-delimited integer files.

Input files hold one decimal integer per line, optionally signed. Surrounding
whitespace is trimmed and blank lines are skipped; any other line that is not
an integer is fatal, including lines that are not valid UTF-8. Output files
are written one integer per line under a :class:`filelock.FileLock` sidecar,
optionally through a temporary file that atomically replaces the destination.

Every ``OSError`` raised here is converted into
:class:`~ChunkSort.errors.IOFailure` with the original error chained.
"""

from __future__ import annotations

import contextlib
import os
import re
import uuid
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from filelock import FileLock, Timeout

from ChunkSort.errors import InvalidDirectory, InvalidNumberFormat, IOFailure

__all__ = [
    "INPUT_SUFFIX",
    "atomic_write",
    "list_input_files",
    "output_directory_for",
    "parse_number",
    "read_numbers",
    "write_numbers",
]

INPUT_SUFFIX = ".txt"
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_number(text: str, *, path: Path | None = None, line_no: int | None = None) -> int:
    """Parse one trimmed line as a signed decimal integer."""

    candidate = text.strip()
    if not _INTEGER_RE.fullmatch(candidate):
        location = ""
        if path is not None:
            location = f" in {path}" + (f" line {line_no}" if line_no is not None else "")
        raise InvalidNumberFormat(
            message=f"Invalid integer {candidate!r}{location}",
            hint="Each non-blank line must hold a single decimal integer",
        )
    return int(candidate)


def read_numbers(path: Path) -> list[int]:
    """Return every integer stored in ``path``, skipping blank lines."""

    numbers: list[int] = []
    try:
        with path.open("r", encoding="utf-8", errors="surrogateescape") as handle:
            for line_no, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                numbers.append(parse_number(line, path=path, line_no=line_no))
    except OSError as exc:
        raise IOFailure(message=f"Could not read {path}: {exc}") from exc
    return numbers


@contextlib.contextmanager
def atomic_write(path: Path) -> Iterator[TextIO]:
    """Write to a temporary file and atomically replace the destination."""

    tmp = path.with_name(f".{path.name}.tmp.{uuid.uuid4().hex}")
    try:
        with tmp.open("w", encoding="utf-8") as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def _lock_path_for(path: Path) -> Path:
    """Return the lock sidecar guarding writes to ``path``."""

    return path.with_name(path.name + ".lock")


def write_numbers(
    path: Path,
    numbers: Iterable[int],
    *,
    atomic: bool = True,
    timeout: float = 60.0,
) -> Path:
    """Write ``numbers`` to ``path`` one per line, overwriting existing content."""

    lock_path = _lock_path_for(path)
    file_lock = FileLock(str(lock_path))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_lock.acquire(timeout=timeout)
    except Timeout as exc:
        raise IOFailure(
            message=f"Could not acquire lock on {path} after {timeout}s",
            hint="Another process may be writing the same output file",
        ) from exc
    except OSError as exc:
        raise IOFailure(message=f"Could not prepare {path}: {exc}") from exc

    try:
        opener = atomic_write(path) if atomic else path.open("w", encoding="utf-8")
        with opener as handle:
            for value in numbers:
                handle.write(f"{value}\n")
    except OSError as exc:
        raise IOFailure(message=f"Could not write {path}: {exc}") from exc
    finally:
        file_lock.release()
        with contextlib.suppress(OSError):
            lock_path.unlink()
    return path


def list_input_files(directory: Path) -> list[Path]:
    """Return the ``.txt`` files directly inside ``directory``, sorted by name."""

    if not directory.is_dir():
        raise InvalidDirectory(
            message=f"Invalid directory: {directory}",
            hint="Pass an existing directory containing .txt files",
        )
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise IOFailure(message=f"Could not list {directory}: {exc}") from exc
    return sorted(
        (entry for entry in entries if entry.name.endswith(INPUT_SUFFIX) and entry.is_file()),
        key=lambda entry: entry.name,
    )


def output_directory_for(directory: Path, suffix: str) -> Path:
    """Return the sibling directory that receives sorted copies of ``directory``."""

    resolved = directory.resolve()
    return resolved.with_name(resolved.name + suffix)
