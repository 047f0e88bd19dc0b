# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.core.partition",
#   "purpose": "Chunk count policy and contiguous partitioning of input sequences.",
#   "sections": [
#     {
#       "id": "chunk-count",
#       "name": "chunk_count",
#       "anchor": "function-chunk-count",
#       "kind": "function"
#     },
#     {
#       "id": "chunk-sizes",
#       "name": "chunk_sizes",
#       "anchor": "function-chunk-sizes",
#       "kind": "function"
#     },
#     {
#       "id": "partition",
#       "name": "partition",
#       "anchor": "function-partition",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Chunk count policy and contiguous partitioning of input sequences.

The partitioner creates ``max(4, ceil(sqrt(n)))`` chunks so that sort
parallelism grows with the input while per-task overhead stays bounded.
Chunks are contiguous copies of the input, in order, and their sizes differ by
at most one element: the first ``n % chunks`` chunks take the extra element.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["MIN_CHUNKS", "chunk_count", "chunk_sizes", "partition"]

MIN_CHUNKS = 4


def chunk_count(length: int) -> int:
    """Return the number of chunks used for an input of ``length`` items."""

    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return max(MIN_CHUNKS, math.isqrt(length - 1) + 1 if length else 0)


def chunk_sizes(length: int) -> list[int]:
    """Return the size of every chunk for an input of ``length`` items."""

    count = chunk_count(length)
    base, remainder = divmod(length, count)
    return [base + 1 if index < remainder else base for index in range(count)]


def partition(numbers: Sequence[int]) -> list[list[int]]:
    """Split ``numbers`` into contiguous chunks covering every item exactly once.

    The input is never mutated; each chunk is an independent list so the
    sorter may reorder it freely. No lower bound is enforced on the input
    length, so short inputs simply produce some empty trailing chunks.
    """

    chunks: list[list[int]] = []
    start = 0
    for size in chunk_sizes(len(numbers)):
        chunks.append(list(numbers[start : start + size]))
        start += size
    return chunks
