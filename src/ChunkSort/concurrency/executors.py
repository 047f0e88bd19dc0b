"""Worker pools that run chunk sort tasks."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Iterator
from concurrent import futures
from multiprocessing import get_context

__all__ = ["default_workers", "sort_pool"]


def default_workers(tasks: int) -> int:
    """Return the pool size used when no explicit worker count is configured."""

    return max(1, min(tasks, os.cpu_count() or 1))


@contextlib.contextmanager
def sort_pool(policy: str, workers: int) -> Iterator[futures.Executor]:
    """
    Yield a pool for chunk sort tasks and shut it down on exit.

    A pool is returned even for ``workers == 1`` so every chunk still runs as
    its own task off the calling thread. Leaving the block cancels tasks that
    have not started and waits for running ones.

    Args:
        policy: ``"cpu"`` for a spawned process pool, ``"io"`` for threads.
        workers: Pool size; must be at least one.

    Raises:
        ValueError: If ``workers`` is below one or ``policy`` is unknown.
    """

    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if policy == "cpu":
        pool: futures.Executor = futures.ProcessPoolExecutor(
            max_workers=workers, mp_context=get_context("spawn")
        )
    elif policy == "io":
        pool = futures.ThreadPoolExecutor(max_workers=workers, thread_name_prefix="chunksort-sort")
    else:
        raise ValueError(f"Unknown execution policy {policy!r}")
    try:
        yield pool
    finally:
        pool.shutdown(wait=True, cancel_futures=True)
