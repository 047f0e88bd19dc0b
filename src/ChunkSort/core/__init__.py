# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.core",
#   "purpose": "Partition, parallel sort and k-way merge building blocks.",
#   "sections": []
# }
# === /NAVMAP ===

"""Partition, parallel sort and k-way merge building blocks."""

from .merge import MergeStrategy, merge, merge_heap, merge_linear
from .partition import MIN_CHUNKS, chunk_count, chunk_sizes, partition
from .pipeline import PipelineResult, SortHooks, SortOptions, sort_numbers
from .sorter import ExecutionPolicy, sort_chunk, sort_concurrently

__all__ = [
    "ExecutionPolicy",
    "MIN_CHUNKS",
    "MergeStrategy",
    "PipelineResult",
    "SortHooks",
    "SortOptions",
    "chunk_count",
    "chunk_sizes",
    "merge",
    "merge_heap",
    "merge_linear",
    "partition",
    "sort_chunk",
    "sort_concurrently",
    "sort_numbers",
]
