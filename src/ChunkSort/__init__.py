# === NAVMAP v1 ===
# {
#   "module": "ChunkSort",
#   "purpose": "Package facade for the chunked parallel integer sorter.",
#   "sections": []
# }
# === /NAVMAP ===

"""Chunked parallel integer sorting.

The public surface re-exports the pipeline entry point and its building
blocks from :mod:`ChunkSort.core`. Run modes live in :mod:`ChunkSort.modes`
and the command-line interface in :mod:`ChunkSort.cli`.
"""

from __future__ import annotations

from .core import (
    ExecutionPolicy,
    MergeStrategy,
    PipelineResult,
    SortHooks,
    SortOptions,
    chunk_count,
    chunk_sizes,
    merge,
    partition,
    sort_concurrently,
    sort_numbers,
)

__version__ = "0.1.0"

__all__ = [
    "ExecutionPolicy",
    "MergeStrategy",
    "PipelineResult",
    "SortHooks",
    "SortOptions",
    "__version__",
    "chunk_count",
    "chunk_sizes",
    "merge",
    "partition",
    "sort_concurrently",
    "sort_numbers",
]
