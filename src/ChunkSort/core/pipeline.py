# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.core.pipeline",
#   "purpose": "Partition, parallel sort and merge composed into one call.",
#   "sections": [
#     {
#       "id": "sortoptions",
#       "name": "SortOptions",
#       "anchor": "class-sortoptions",
#       "kind": "class"
#     },
#     {
#       "id": "sorthooks",
#       "name": "SortHooks",
#       "anchor": "class-sorthooks",
#       "kind": "class"
#     },
#     {
#       "id": "pipelineresult",
#       "name": "PipelineResult",
#       "anchor": "class-pipelineresult",
#       "kind": "class"
#     },
#     {
#       "id": "sort-numbers",
#       "name": "sort_numbers",
#       "anchor": "function-sort-numbers",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Partition, parallel sort and merge composed into one call.

:func:`sort_numbers` is the single entry point the run modes use. It runs the
three phases strictly in order (partition, sort barrier, merge), records
per-phase timings, and invokes optional :class:`SortHooks` between phases so
callers can report intermediate chunk states without the core printing
anything itself.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ChunkSort.logging import get_logger, log_event

from .merge import MergeStrategy, merge
from .partition import partition
from .sorter import ExecutionPolicy, sort_concurrently

__all__ = ["PipelineResult", "SortHooks", "SortOptions", "sort_numbers"]

LOGGER = get_logger(__name__, base_fields={"stage": "pipeline"})


@dataclass(slots=True)
class SortOptions:
    """Execution knobs shared by every run mode."""

    policy: ExecutionPolicy = ExecutionPolicy.CPU
    workers: int | None = None
    merge_strategy: MergeStrategy = MergeStrategy.LINEAR


@dataclass(slots=True)
class SortHooks:
    """Optional callbacks invoked between pipeline phases."""

    on_partition: Callable[[Sequence[Sequence[int]]], None] | None = None
    on_sorted: Callable[[Sequence[Sequence[int]]], None] | None = None
    on_merged: Callable[[Sequence[int]], None] | None = None


@dataclass(slots=True, frozen=True)
class PipelineResult:
    """Everything produced by one :func:`sort_numbers` call."""

    original: tuple[int, ...]
    chunks_before: tuple[tuple[int, ...], ...]
    chunks_after: tuple[tuple[int, ...], ...]
    merged: list[int]
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def num_chunks(self) -> int:
        return len(self.chunks_before)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 3)


def sort_numbers(
    numbers: Sequence[int],
    *,
    options: SortOptions | None = None,
    hooks: SortHooks | None = None,
) -> PipelineResult:
    """Sort ``numbers`` by chunking, sorting chunks in parallel and merging.

    ``numbers`` is not modified. The returned :class:`PipelineResult` owns a
    fresh ``merged`` list with the same length as the input.
    """

    opts = options or SortOptions()
    hooks = hooks or SortHooks()
    original = tuple(numbers)
    timings: dict[str, float] = {}

    started = time.perf_counter()
    chunks = partition(original)
    chunks_before = tuple(tuple(chunk) for chunk in chunks)
    timings["partition"] = _elapsed_ms(started)
    log_event(
        LOGGER,
        "debug",
        "Partitioned input",
        items=len(original),
        chunks=len(chunks),
        sizes=[len(chunk) for chunk in chunks],
    )
    if hooks.on_partition is not None:
        hooks.on_partition(chunks_before)

    started = time.perf_counter()
    sorted_chunks = sort_concurrently(chunks, policy=opts.policy, workers=opts.workers)
    chunks_after = tuple(tuple(chunk) for chunk in sorted_chunks)
    timings["sort"] = _elapsed_ms(started)
    if hooks.on_sorted is not None:
        hooks.on_sorted(chunks_after)

    started = time.perf_counter()
    merged = merge(sorted_chunks, opts.merge_strategy)
    timings["merge"] = _elapsed_ms(started)
    if hooks.on_merged is not None:
        hooks.on_merged(merged)

    log_event(
        LOGGER,
        "debug",
        "Merged sorted chunks",
        items=len(merged),
        chunks=len(chunks_after),
        merge_strategy=MergeStrategy(opts.merge_strategy).value,
        timings_ms=timings,
    )
    return PipelineResult(
        original=original,
        chunks_before=chunks_before,
        chunks_after=chunks_after,
        merged=merged,
        timings_ms=timings,
    )
