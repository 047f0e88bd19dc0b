"""Tests for ChunkSort.settings layering and validation."""

from __future__ import annotations

import pytest

from ChunkSort.core import ExecutionPolicy, MergeStrategy
from ChunkSort.errors import InvalidArgument
from ChunkSort.settings import DEFAULT_OUTPUT_SUFFIX, LogFormat, LogLevel, SortSettings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("POLICY", "WORKERS", "MERGE_STRATEGY", "SEED", "OUTPUT_SUFFIX", "LOG_LEVEL"):
        monkeypatch.delenv(f"CHUNKSORT_{key}", raising=False)

    settings = load_settings()

    assert settings.policy is ExecutionPolicy.CPU
    assert settings.workers is None
    assert settings.merge_strategy is MergeStrategy.LINEAR
    assert settings.output_suffix == DEFAULT_OUTPUT_SUFFIX
    assert settings.log_level is LogLevel.INFO
    assert settings.log_format is LogFormat.CONSOLE
    assert settings.atomic_writes is True


def test_environment_is_applied(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHUNKSORT_POLICY", "IO")
    monkeypatch.setenv("CHUNKSORT_WORKERS", "3")
    monkeypatch.setenv("CHUNKSORT_LOG_LEVEL", "debug")
    monkeypatch.setenv("CHUNKSORT_SEED", "42")

    settings = load_settings()

    assert settings.policy is ExecutionPolicy.IO
    assert settings.workers == 3
    assert settings.log_level is LogLevel.DEBUG
    assert settings.seed == 42


def test_cli_overrides_beat_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHUNKSORT_MERGE_STRATEGY", "linear")
    monkeypatch.setenv("CHUNKSORT_WORKERS", "2")

    settings = load_settings(merge_strategy=MergeStrategy.HEAP, workers=None)

    assert settings.merge_strategy is MergeStrategy.HEAP
    assert settings.workers == 2


@pytest.mark.parametrize("suffix", ["", "/escape", "a/b"])
def test_output_suffix_validation(suffix: str) -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        load_settings(output_suffix=suffix)
    assert "output_suffix" in excinfo.value.message


def test_invalid_choice_is_invalid_argument() -> None:
    with pytest.raises(InvalidArgument):
        load_settings(policy="gpu")


def test_sort_options_mirror_settings() -> None:
    settings = SortSettings(policy="io", workers=5, merge_strategy="heap")
    options = settings.sort_options()
    assert options.policy is ExecutionPolicy.IO
    assert options.workers == 5
    assert options.merge_strategy is MergeStrategy.HEAP
