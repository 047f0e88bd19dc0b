"""Tests for ChunkSort.core.sorter and the sort pool helpers."""

from __future__ import annotations

import threading
from concurrent import futures

import pytest

from ChunkSort.concurrency import default_workers, sort_pool
from ChunkSort.concurrency import executors as executors_module
from ChunkSort.core import sorter as sorter_module
from ChunkSort.core.sorter import ExecutionPolicy, sort_chunk, sort_concurrently


def test_sort_pool_policies() -> None:
    with sort_pool("io", 1) as pool:
        assert isinstance(pool, futures.ThreadPoolExecutor)
        assert pool.submit(threading.current_thread).result().name != "MainThread"

    with sort_pool("cpu", 2) as pool:
        assert isinstance(pool, futures.ProcessPoolExecutor)


@pytest.mark.parametrize(("policy", "workers"), [("io", 0), ("gpu", 2)])
def test_sort_pool_rejects_bad_arguments(policy: str, workers: int) -> None:
    with pytest.raises(ValueError):
        with sort_pool(policy, workers):
            pass


def test_default_workers_is_capped_by_task_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(executors_module.os, "cpu_count", lambda: 8)
    assert default_workers(1000) == 8
    assert default_workers(3) == 3
    assert default_workers(0) == 1

    monkeypatch.setattr(executors_module.os, "cpu_count", lambda: None)
    assert default_workers(1000) == 1


def test_sort_chunk_sorts_in_place() -> None:
    chunk = [3, -1, 2]
    assert sort_chunk(chunk) is chunk
    assert chunk == [-1, 2, 3]


@pytest.mark.parametrize("workers", [1, 2, 8])
def test_sort_concurrently_with_threads(workers: int) -> None:
    chunks = [[9, 1, 5], [4, 4, 0], [7], [], [3, 2]]
    result = sort_concurrently(chunks, policy=ExecutionPolicy.IO, workers=workers)

    assert result == [[1, 5, 9], [0, 4, 4], [7], [], [2, 3]]
    assert [len(chunk) for chunk in result] == [3, 3, 1, 0, 2]


def test_sort_concurrently_with_processes() -> None:
    chunks = [[5, 3, 1], [6, 4, 2], [0, -1], [10, 8]]
    result = sort_concurrently(chunks, policy="cpu", workers=2)
    assert result == [[1, 3, 5], [2, 4, 6], [-1, 0], [8, 10]]


def test_sort_concurrently_handles_no_chunks() -> None:
    assert sort_concurrently([], policy="io") == []


def test_sort_concurrently_runs_one_task_per_chunk(monkeypatch) -> None:
    """Every chunk is handed to its own task before the barrier releases."""

    seen: list[int] = []
    lock = threading.Lock()

    def recording_sort(chunk: list[int]) -> list[int]:
        with lock:
            seen.append(len(chunk))
        chunk.sort()
        return chunk

    monkeypatch.setattr(sorter_module, "sort_chunk", recording_sort)
    chunks = [[3, 2, 1], [2, 1], [1], [5, 4, 3, 2]]
    result = sort_concurrently(chunks, policy="io", workers=4)

    assert sorted(seen) == [1, 2, 3, 4]
    assert result == [[1, 2, 3], [1, 2], [1], [2, 3, 4, 5]]


def test_sort_concurrently_surfaces_first_failure(monkeypatch) -> None:
    def failing_sort(chunk: list[int]) -> list[int]:
        if chunk and chunk[0] == 99:
            raise RuntimeError("comparator exploded")
        chunk.sort()
        return chunk

    monkeypatch.setattr(sorter_module, "sort_chunk", failing_sort)
    with pytest.raises(RuntimeError, match="comparator exploded"):
        sort_concurrently([[2, 1], [99, 0], [4, 3]], policy="io", workers=3)


def test_sort_concurrently_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError):
        sort_concurrently([[1]], policy="gpu")


def test_single_worker_still_runs_tasks_off_the_caller(monkeypatch: pytest.MonkeyPatch) -> None:
    threads: list[str] = []

    def recording_sort(chunk: list[int]) -> list[int]:
        threads.append(threading.current_thread().name)
        chunk.sort()
        return chunk

    monkeypatch.setattr(sorter_module, "sort_chunk", recording_sort)
    result = sort_concurrently([[3, 1], [2, 0], [5, 4], [7, 6]], policy="io", workers=1)

    assert result == [[1, 3], [0, 2], [4, 5], [6, 7]]
    assert len(threads) == 4
    assert "MainThread" not in threads
