"""Shared pytest fixtures for the ChunkSort test suite."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from ChunkSort.core import ExecutionPolicy, SortOptions


@pytest.fixture(autouse=True)
def _restore_environ() -> None:
    """Snapshot environment variables and restore them after each test."""

    original = os.environ.copy()
    try:
        yield
    finally:
        os.environ.clear()
        os.environ.update(original)


@pytest.fixture(autouse=True)
def _restore_cwd() -> None:
    """Ensure tests leave the current working directory unchanged."""

    original_cwd = Path.cwd()
    try:
        yield
    finally:
        os.chdir(original_cwd)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> None:
    """Drop handlers installed by ``configure_logging`` during a test."""

    logger = logging.getLogger("ChunkSort")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    try:
        yield
    finally:
        for handler in list(logger.handlers):
            if handler not in handlers:
                logger.removeHandler(handler)
        logger.propagate = propagate
        logger.setLevel(level)


@pytest.fixture
def thread_options() -> SortOptions:
    """Pipeline options that keep sorting inside the test process."""

    return SortOptions(policy=ExecutionPolicy.IO, workers=4)


@pytest.fixture
def write_input(tmp_path: Path):
    """Return a helper that writes newline-delimited content under ``tmp_path``."""

    def _write(name: str, lines: list[object], directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
