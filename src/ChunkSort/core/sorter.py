# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.core.sorter",
#   "purpose": "Barrier-synchronised parallel sorting of independent chunks.",
#   "sections": [
#     {
#       "id": "executionpolicy",
#       "name": "ExecutionPolicy",
#       "anchor": "class-executionpolicy",
#       "kind": "class"
#     },
#     {
#       "id": "sort-chunk",
#       "name": "sort_chunk",
#       "anchor": "function-sort-chunk",
#       "kind": "function"
#     },
#     {
#       "id": "sort-concurrently",
#       "name": "sort_concurrently",
#       "anchor": "function-sort-concurrently",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Barrier-synchronised parallel sorting of independent chunks.

:func:`sort_concurrently` fans out one task per chunk and blocks until every
task has finished before handing the chunks back, so nothing downstream can
observe a chunk whose sort is still running. Each task only touches its own
chunk, which keeps the chunk data free of locks.

Under the ``cpu`` policy tasks run in a spawned process pool and return sorted
copies; under ``io`` they run in a thread pool and sort in place. If any task
fails, the remaining tasks are cancelled and the first error is re-raised.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, wait
from enum import Enum

from ChunkSort.concurrency import default_workers, sort_pool
from ChunkSort.logging import get_logger, log_event

__all__ = ["ExecutionPolicy", "sort_chunk", "sort_concurrently"]

LOGGER = get_logger(__name__, base_fields={"stage": "sort"})


class ExecutionPolicy(str, Enum):
    """Pool flavour used to run chunk sort tasks."""

    CPU = "cpu"
    IO = "io"


def sort_chunk(chunk: list[int]) -> list[int]:
    """Sort ``chunk`` ascending in place and return it."""

    chunk.sort()
    return chunk


def sort_concurrently(
    chunks: Sequence[list[int]],
    *,
    policy: ExecutionPolicy | str = ExecutionPolicy.CPU,
    workers: int | None = None,
) -> list[list[int]]:
    """Sort every chunk in its own task and wait for all of them.

    Args:
        chunks: Chunks produced by the partitioner.
        policy: ``cpu`` for a process pool, ``io`` for a thread pool.
        workers: Upper bound on pool size; defaults to the CPU count, capped
            by the number of chunks.

    Returns:
        The chunks in their original order, each sorted ascending. Chunk
        boundaries and sizes are unchanged.
    """

    tasks = len(chunks)
    if tasks == 0:
        return []
    resolved_policy = ExecutionPolicy(policy)
    pool_size = min(workers, tasks) if workers else default_workers(tasks)

    with sort_pool(resolved_policy.value, pool_size) as pool:
        pending: list[Future] = [pool.submit(sort_chunk, chunk) for chunk in chunks]
        done, not_done = wait(pending, return_when=FIRST_EXCEPTION)
        for future in pending:
            if future in done and future.exception() is not None:
                for other in not_done:
                    other.cancel()
                raise future.exception()
        # ``wait`` only returns early when a task failed, so every future is done here.
        results = [future.result() for future in pending]

    log_event(
        LOGGER,
        "debug",
        "Sorted chunks concurrently",
        chunks=tasks,
        workers=pool_size,
        policy=resolved_policy.value,
    )
    return results
