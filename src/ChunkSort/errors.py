# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.errors",
#   "purpose": "Exception types and formatting helpers shared by ChunkSort entry points.",
#   "sections": [
#     {
#       "id": "chunksorterror",
#       "name": "ChunkSortError",
#       "anchor": "class-chunksorterror",
#       "kind": "class"
#     },
#     {
#       "id": "invalidargument",
#       "name": "InvalidArgument",
#       "anchor": "class-invalidargument",
#       "kind": "class"
#     },
#     {
#       "id": "invaliddirectory",
#       "name": "InvalidDirectory",
#       "anchor": "class-invaliddirectory",
#       "kind": "class"
#     },
#     {
#       "id": "invalidnumberformat",
#       "name": "InvalidNumberFormat",
#       "anchor": "class-invalidnumberformat",
#       "kind": "class"
#     },
#     {
#       "id": "insufficientdata",
#       "name": "InsufficientData",
#       "anchor": "class-insufficientdata",
#       "kind": "class"
#     },
#     {
#       "id": "iofailure",
#       "name": "IOFailure",
#       "anchor": "class-iofailure",
#       "kind": "class"
#     },
#     {
#       "id": "format-error",
#       "name": "format_error",
#       "anchor": "function-format-error",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Exception types and formatting helpers shared by ChunkSort entry points.

Every failure a run can hit (a bad count, a missing directory, a malformed
line, a short file, or a filesystem error) is surfaced through a subclass of
:class:`ChunkSortError`. Each subclass pins a stable ``error_code`` so the CLI
and the structured logger report failures consistently, and an optional hint
carries remediation text for humans.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ChunkSortError",
    "InvalidArgument",
    "InvalidDirectory",
    "InvalidNumberFormat",
    "InsufficientData",
    "IOFailure",
    "format_error",
]


@dataclass(eq=False)
class ChunkSortError(Exception):
    """Base exception capturing a human-friendly message and optional hint."""

    message: str
    hint: Optional[str] = None
    error_code: str = "CHUNKSORT_ERROR"

    def __post_init__(self) -> None:  # pragma: no cover - simple wiring
        """Initialise the ``Exception`` base with the human-readable message."""

        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


class InvalidArgument(ChunkSortError):
    """Raised for rejected option values or a missing run mode."""

    def __post_init__(self) -> None:
        self.error_code = "INVALID_ARGUMENT"
        ChunkSortError.__post_init__(self)


class InvalidDirectory(ChunkSortError):
    """Raised when a batch input path is missing or is not a directory."""

    def __post_init__(self) -> None:
        self.error_code = "INVALID_DIRECTORY"
        ChunkSortError.__post_init__(self)


class InvalidNumberFormat(ChunkSortError):
    """Raised when a non-blank input line does not parse as an integer."""

    def __post_init__(self) -> None:
        self.error_code = "INVALID_NUMBER_FORMAT"
        ChunkSortError.__post_init__(self)


class InsufficientData(ChunkSortError):
    """Raised when fewer numbers than the required minimum are available."""

    def __post_init__(self) -> None:
        self.error_code = "INSUFFICIENT_DATA"
        ChunkSortError.__post_init__(self)


class IOFailure(ChunkSortError):
    """Raised when reading, writing, locking or creating a path fails."""

    def __post_init__(self) -> None:
        self.error_code = "IO_FAILURE"
        ChunkSortError.__post_init__(self)


def format_error(error: ChunkSortError) -> str:
    """Return a consistent error string for CLI consumption."""

    hint = f" Hint: {error.hint}" if error.hint else ""
    return f"[{error.error_code}] {error.message}.{hint}".strip()
