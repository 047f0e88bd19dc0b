# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.concurrency.__init__",
#   "purpose": "Executor helpers shared by the chunk sorter.",
#   "sections": []
# }
# === /NAVMAP ===

"""
Executor helpers shared by the chunk sorter.

Exposes :func:`sort_pool`, which opens a pool for one batch of chunk sorts
(``cpu`` → processes, ``io`` → threads), and :func:`default_workers` for
sizing pools when no worker count is configured.
"""

from .executors import default_workers, sort_pool

__all__ = ["default_workers", "sort_pool"]
