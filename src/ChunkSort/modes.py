# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.modes",
#   "purpose": "Random, single-file and directory run modes around the sort pipeline.",
#   "sections": [
#     {
#       "id": "consolereporter",
#       "name": "ConsoleReporter",
#       "anchor": "class-consolereporter",
#       "kind": "class"
#     },
#     {
#       "id": "batchoutcome",
#       "name": "BatchOutcome",
#       "anchor": "class-batchoutcome",
#       "kind": "class"
#     },
#     {
#       "id": "run-random",
#       "name": "run_random",
#       "anchor": "function-run-random",
#       "kind": "function"
#     },
#     {
#       "id": "run-input-file",
#       "name": "run_input_file",
#       "anchor": "function-run-input-file",
#       "kind": "function"
#     },
#     {
#       "id": "run-directory",
#       "name": "run_directory",
#       "anchor": "function-run-directory",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Random, single-file and directory run modes around the sort pipeline.

Random and single-file runs print a four-part report (original numbers,
chunks before sorting, chunks after sorting, final result) through
:class:`ConsoleReporter`, which plugs into the pipeline's
:class:`~ChunkSort.core.SortHooks`. Directory runs are silent per file: each
``.txt`` input is sorted and written to a sibling output directory, and the
first failing file aborts the batch while earlier outputs stay on disk.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import typer

from ChunkSort.core import PipelineResult, SortHooks, SortOptions, sort_numbers
from ChunkSort.errors import IOFailure
from ChunkSort.io import list_input_files, output_directory_for, read_numbers, write_numbers
from ChunkSort.logging import get_logger, log_event
from ChunkSort.settings import DEFAULT_OUTPUT_SUFFIX
from ChunkSort.sources import generate_random_numbers, require_minimum

__all__ = [
    "BatchOutcome",
    "ConsoleReporter",
    "format_sequence",
    "run_directory",
    "run_input_file",
    "run_random",
]

LOGGER = get_logger(__name__, base_fields={"stage": "modes"})


def format_sequence(values: Sequence[int]) -> str:
    """Render ``values`` as a bracketed, comma-separated list."""

    return "[" + ", ".join(str(value) for value in values) + "]"


class ConsoleReporter:
    """Print the original input, chunk states and merged result in order."""

    def __init__(self, echo: Callable[[str], None] = typer.echo) -> None:
        self._echo = echo

    def original(self, numbers: Sequence[int]) -> None:
        self._echo("Original numbers:")
        self._echo(format_sequence(numbers))

    def _chunks(self, title: str, chunks: Sequence[Sequence[int]]) -> None:
        self._echo("")
        self._echo(title)
        for index, chunk in enumerate(chunks):
            self._echo(f"Chunk {index}: {format_sequence(chunk)}")

    def before_sort(self, chunks: Sequence[Sequence[int]]) -> None:
        self._chunks("Chunks before sorting:", chunks)

    def after_sort(self, chunks: Sequence[Sequence[int]]) -> None:
        self._chunks("Chunks after sorting:", chunks)

    def merged(self, numbers: Sequence[int]) -> None:
        self._echo("")
        self._echo("Final sorted result:")
        self._echo(format_sequence(numbers))

    def hooks(self) -> SortHooks:
        """Return pipeline hooks that print each intermediate state."""

        return SortHooks(
            on_partition=self.before_sort,
            on_sorted=self.after_sort,
            on_merged=self.merged,
        )


@dataclass(slots=True)
class BatchOutcome:
    """Summary returned by :func:`run_directory`."""

    input_dir: Path
    output_dir: Path
    outputs: list[Path] = field(default_factory=list)
    numbers_sorted: int = 0
    wall_ms: float = 0.0

    @property
    def files_written(self) -> int:
        return len(self.outputs)


def _report_and_sort(
    numbers: Sequence[int], options: SortOptions | None, reporter: ConsoleReporter | None
) -> PipelineResult:
    reporter = reporter or ConsoleReporter()
    reporter.original(numbers)
    return sort_numbers(numbers, options=options, hooks=reporter.hooks())


def run_random(
    count: int,
    *,
    rng: random.Random,
    options: SortOptions | None = None,
    reporter: ConsoleReporter | None = None,
) -> PipelineResult:
    """Generate ``count`` random integers, sort them and print the report."""

    numbers = generate_random_numbers(count, rng)
    log_event(LOGGER, "info", "Generated random input", mode="random", items=len(numbers))
    return _report_and_sort(numbers, options, reporter)


def run_input_file(
    path: Path,
    *,
    options: SortOptions | None = None,
    reporter: ConsoleReporter | None = None,
) -> PipelineResult:
    """Sort the integers stored in ``path`` and print the report."""

    numbers = read_numbers(path)
    require_minimum(numbers, f"Input file {path}")
    log_event(LOGGER, "info", "Loaded input file", mode="file", path=str(path), items=len(numbers))
    return _report_and_sort(numbers, options, reporter)


def run_directory(
    directory: Path,
    *,
    options: SortOptions | None = None,
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX,
    atomic: bool = True,
    lock_timeout_s: float = 60.0,
) -> BatchOutcome:
    """Sort every ``.txt`` file in ``directory`` into a sibling output directory.

    Outputs share the input file name and are overwritten when present. The
    first file that fails to read, parse or write aborts the whole batch.
    """

    started = time.perf_counter()
    inputs = list_input_files(directory)
    output_dir = output_directory_for(directory, output_suffix)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IOFailure(message=f"Could not create output directory {output_dir}: {exc}") from exc

    outcome = BatchOutcome(input_dir=directory, output_dir=output_dir)
    batch_logger = LOGGER.child(mode="directory", output_dir=str(output_dir))
    for input_path in inputs:
        numbers = read_numbers(input_path)
        require_minimum(numbers, input_path.name)
        result = sort_numbers(numbers, options=options)
        target = write_numbers(
            output_dir / input_path.name,
            result.merged,
            atomic=atomic,
            timeout=lock_timeout_s,
        )
        outcome.outputs.append(target)
        outcome.numbers_sorted += len(result.merged)
        log_event(
            batch_logger,
            "info",
            "Sorted input file",
            path=str(input_path),
            output_path=str(target),
            items=len(result.merged),
            chunks=result.num_chunks,
        )

    outcome.wall_ms = round((time.perf_counter() - started) * 1000.0, 3)
    if not inputs:
        log_event(
            batch_logger,
            "warning",
            "No .txt files found",
            path=str(directory),
            error_code="EMPTY_BATCH",
        )
    return outcome
