# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.settings",
#   "purpose": "Pydantic settings for logging, execution and output options.",
#   "sections": [
#     {
#       "id": "loglevel",
#       "name": "LogLevel",
#       "anchor": "class-loglevel",
#       "kind": "class"
#     },
#     {
#       "id": "logformat",
#       "name": "LogFormat",
#       "anchor": "class-logformat",
#       "kind": "class"
#     },
#     {
#       "id": "sortsettings",
#       "name": "SortSettings",
#       "anchor": "class-sortsettings",
#       "kind": "class"
#     },
#     {
#       "id": "load-settings",
#       "name": "load_settings",
#       "anchor": "function-load-settings",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""
Pydantic v2 settings for ChunkSort.

Values are layered CLI > ENV (``CHUNKSORT_`` prefix) > defaults. CLI callers
pass their overrides to :func:`load_settings`, which ignores options left
unset so environment values still apply, and converts validation failures into
:class:`~ChunkSort.errors.InvalidArgument`.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ChunkSort.core import ExecutionPolicy, MergeStrategy, SortOptions
from ChunkSort.errors import InvalidArgument

__all__ = [
    "DEFAULT_OUTPUT_SUFFIX",
    "LogFormat",
    "LogLevel",
    "SortSettings",
    "load_settings",
]

DEFAULT_OUTPUT_SUFFIX = "_sorted"


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Supported log output formats."""

    CONSOLE = "console"
    JSON = "json"


class SortSettings(BaseSettings):
    """Application configuration for a ChunkSort run."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKSORT_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(LogLevel.INFO, description="Root logging level")
    log_format: LogFormat = Field(
        LogFormat.CONSOLE, description="Plain console lines or structured JSON"
    )
    policy: ExecutionPolicy = Field(
        ExecutionPolicy.CPU, description="Chunk sort pool (cpu=processes, io=threads)"
    )
    workers: int | None = Field(
        None, description="Max concurrent sort tasks (default: CPU count)", ge=1
    )
    merge_strategy: MergeStrategy = Field(
        MergeStrategy.LINEAR, description="K-way merge implementation (linear/heap)"
    )
    seed: int | None = Field(None, description="Random seed for generated inputs")
    output_suffix: str = Field(
        DEFAULT_OUTPUT_SUFFIX,
        description="Suffix appended to the input directory name for batch outputs",
    )
    atomic_writes: bool = Field(
        True, description="Write outputs via temporary files and atomic os.replace"
    )
    lock_timeout_s: float = Field(
        60.0, description="Seconds to wait for an output file lock", gt=0
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("policy", "merge_strategy", "log_format", mode="before")
    @classmethod
    def normalize_choice(cls, v: Any) -> Any:
        """Accept mixed-case choice values."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("output_suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        """Reject suffixes that would escape the parent directory."""
        if not v:
            raise ValueError("output suffix must not be empty")
        separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
        if any(sep in v for sep in separators):
            raise ValueError(f"output suffix must not contain a path separator, got {v!r}")
        return v

    def sort_options(self) -> SortOptions:
        """Return the pipeline options described by these settings."""

        return SortOptions(
            policy=self.policy,
            workers=self.workers,
            merge_strategy=self.merge_strategy,
        )


def load_settings(**overrides: Any) -> SortSettings:
    """Build settings from the environment with non-``None`` ``overrides`` on top."""

    explicit = {key: value for key, value in overrides.items() if value is not None}
    try:
        return SortSettings(**explicit)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidArgument(
            message=f"Invalid configuration ({problems})",
            hint="Check CHUNKSORT_* environment variables and command-line options",
        ) from exc
