# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.core.merge",
#   "purpose": "K-way merge of sorted chunks with a lowest-index tie-break.",
#   "sections": [
#     {
#       "id": "mergestrategy",
#       "name": "MergeStrategy",
#       "anchor": "class-mergestrategy",
#       "kind": "class"
#     },
#     {
#       "id": "merge-linear",
#       "name": "merge_linear",
#       "anchor": "function-merge-linear",
#       "kind": "function"
#     },
#     {
#       "id": "merge-heap",
#       "name": "merge_heap",
#       "anchor": "function-merge-heap",
#       "kind": "function"
#     },
#     {
#       "id": "merge",
#       "name": "merge",
#       "anchor": "function-merge",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""K-way merge of sorted chunks.

Both strategies keep one read cursor per chunk and repeatedly emit the
smallest element still unread. When several chunks offer the same value the
lowest-indexed chunk wins, so the output is deterministic for a given chunk
collection.

``linear`` scans every chunk for each emitted element (``O(n * k)``).
``heap`` keeps the chunk heads in a priority queue keyed by
``(value, chunk_index)`` (``O(n log k)``) and produces identical output.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from enum import Enum

__all__ = ["MergeStrategy", "merge", "merge_heap", "merge_linear"]


class MergeStrategy(str, Enum):
    """Available k-way merge implementations."""

    LINEAR = "linear"
    HEAP = "heap"


def merge_linear(chunks: Sequence[Sequence[int]]) -> list[int]:
    """Merge sorted ``chunks`` by scanning every cursor for each output item."""

    result: list[int] = []
    cursors = [0] * len(chunks)

    while True:
        min_chunk = -1
        min_value = 0
        for index, chunk in enumerate(chunks):
            cursor = cursors[index]
            if cursor >= len(chunk):
                continue
            value = chunk[cursor]
            # Strict comparison keeps the earliest chunk on ties.
            if min_chunk == -1 or value < min_value:
                min_chunk = index
                min_value = value

        if min_chunk == -1:
            return result

        result.append(min_value)
        cursors[min_chunk] += 1


def merge_heap(chunks: Sequence[Sequence[int]]) -> list[int]:
    """Merge sorted ``chunks`` using a heap of ``(value, chunk_index)`` heads."""

    result: list[int] = []
    cursors = [0] * len(chunks)
    heads = [(chunk[0], index) for index, chunk in enumerate(chunks) if chunk]
    heapq.heapify(heads)

    while heads:
        value, index = heads[0]
        result.append(value)
        cursors[index] += 1
        chunk = chunks[index]
        if cursors[index] < len(chunk):
            heapq.heapreplace(heads, (chunk[cursors[index]], index))
        else:
            heapq.heappop(heads)

    return result


_STRATEGIES = {
    MergeStrategy.LINEAR: merge_linear,
    MergeStrategy.HEAP: merge_heap,
}


def merge(
    chunks: Sequence[Sequence[int]], strategy: MergeStrategy | str = MergeStrategy.LINEAR
) -> list[int]:
    """Merge sorted ``chunks`` into one ascending list using ``strategy``."""

    return _STRATEGIES[MergeStrategy(strategy)](chunks)
