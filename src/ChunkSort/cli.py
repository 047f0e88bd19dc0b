# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.cli",
#   "purpose": "Typer command-line interface for ChunkSort.",
#   "sections": [
#     {
#       "id": "root-callback",
#       "name": "root_callback",
#       "anchor": "function-root-callback",
#       "kind": "function"
#     },
#     {
#       "id": "sort-command",
#       "name": "sort_command",
#       "anchor": "function-sort-command",
#       "kind": "function"
#     },
#     {
#       "id": "config-command",
#       "name": "config_command",
#       "anchor": "function-config-command",
#       "kind": "function"
#     },
#     {
#       "id": "main",
#       "name": "main",
#       "anchor": "function-main",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""
Typer command-line interface for ChunkSort.

``chunksort sort`` runs one of three modes: ``-r N`` sorts N random integers,
``-i FILE`` sorts the integers in a file, and ``-d DIR`` sorts every ``.txt``
file in a directory into a sibling output directory. ``chunksort config``
prints the effective settings after layering CLI > ENV > defaults.

Errors are reported on stderr as ``[ERROR_CODE] message`` and exit with
status 1.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from ChunkSort import __version__
from ChunkSort.core import ExecutionPolicy, MergeStrategy
from ChunkSort.errors import ChunkSortError, InvalidArgument, format_error
from ChunkSort.logging import configure_logging, get_logger, log_event
from ChunkSort.modes import run_directory, run_input_file, run_random
from ChunkSort.settings import LogFormat, LogLevel, SortSettings, load_settings
from ChunkSort.sources import make_rng

__all__ = ["app", "main"]

LOGGER = get_logger(__name__, base_fields={"stage": "cli"})

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
    help="[bold]ChunkSort[/bold]: sort integers in parallel chunks and merge the results.",
)


def _fail(error: ChunkSortError) -> NoReturn:
    typer.secho(format_error(error), err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"chunksort {__version__}")
        raise typer.Exit()


@app.callback()
def root_callback(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
) -> None:
    """
    Sort integers by splitting them into chunks, sorting the chunks in
    parallel and merging them back together.

    [bold yellow]Examples:[/bold yellow]

    [cyan]chunksort sort -r 50[/cyan]
    Sort 50 random integers and print every step

    [cyan]chunksort sort -d ./inputs --merge heap[/cyan]
    Sort every .txt file in ./inputs into ./inputs_sorted
    """


@app.command("sort")
def sort_command(
    random_count: Annotated[
        Optional[int],
        typer.Option("-r", "--random", help="Generate N random integers (N >= 10)"),
    ] = None,
    input_file: Annotated[
        Optional[Path],
        typer.Option("-i", "--input", help="Input file with one integer per line"),
    ] = None,
    directory: Annotated[
        Optional[Path],
        typer.Option("-d", "--dir", help="Directory with input .txt files"),
    ] = None,
    seed: Annotated[
        Optional[int], typer.Option("--seed", help="Random seed for -r")
    ] = None,
    policy: Annotated[
        Optional[ExecutionPolicy],
        typer.Option("--policy", help="Sort pool (cpu=processes, io=threads)", case_sensitive=False),
    ] = None,
    workers: Annotated[
        Optional[int], typer.Option("--workers", help="Max concurrent sort tasks")
    ] = None,
    merge_strategy: Annotated[
        Optional[MergeStrategy],
        typer.Option("--merge", help="K-way merge implementation", case_sensitive=False),
    ] = None,
    output_suffix: Annotated[
        Optional[str],
        typer.Option("--output-suffix", help="Suffix for the -d output directory name"),
    ] = None,
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option("--log-level", help="Logging level", case_sensitive=False),
    ] = None,
    log_format: Annotated[
        Optional[LogFormat],
        typer.Option("--log-format", help="Logging format", case_sensitive=False),
    ] = None,
) -> None:
    """Sort random numbers, one file, or a directory of files."""

    try:
        settings = load_settings(
            seed=seed,
            policy=policy,
            workers=workers,
            merge_strategy=merge_strategy,
            output_suffix=output_suffix,
            log_level=log_level,
            log_format=log_format,
        )
    except ChunkSortError as exc:
        _fail(exc)

    configure_logging(settings.log_level.value, settings.log_format.value)
    try:
        _dispatch(settings, random_count=random_count, input_file=input_file, directory=directory)
    except ChunkSortError as exc:
        log_event(LOGGER, "error", exc.message, error_code=exc.error_code)
        _fail(exc)


def _dispatch(
    settings: SortSettings,
    *,
    random_count: Optional[int],
    input_file: Optional[Path],
    directory: Optional[Path],
) -> None:
    selected = [
        name
        for name, value in (("-r", random_count), ("-i", input_file), ("-d", directory))
        if value is not None
    ]
    if not selected:
        raise InvalidArgument(
            message="No mode selected",
            hint="Usage: chunksort sort -r N | -i file.txt | -d directory",
        )
    if len(selected) > 1:
        log_event(
            LOGGER,
            "warning",
            f"Several modes given; running {selected[0]}",
            modes=selected,
            error_code="MULTIPLE_MODES",
        )

    options = settings.sort_options()
    if random_count is not None:
        run_random(random_count, rng=make_rng(settings.seed), options=options)
    elif input_file is not None:
        run_input_file(input_file, options=options)
    elif directory is not None:
        outcome = run_directory(
            directory,
            options=options,
            output_suffix=settings.output_suffix,
            atomic=settings.atomic_writes,
            lock_timeout_s=settings.lock_timeout_s,
        )
        typer.echo(
            f"Sorted {outcome.files_written} file(s), {outcome.numbers_sorted} numbers "
            f"into {outcome.output_dir}"
        )


@app.command("config")
def config_command(
    fmt: Annotated[
        str, typer.Option("--format", help="Output format (json|env)")
    ] = "json",
) -> None:
    """Display the effective configuration (ENV > defaults)."""

    try:
        settings = load_settings()
    except ChunkSortError as exc:
        _fail(exc)

    values = settings.model_dump(mode="json")
    if fmt == "json":
        typer.echo(json.dumps(values, indent=2, sort_keys=True))
    elif fmt == "env":
        for key, value in sorted(values.items()):
            typer.echo(f"CHUNKSORT_{key.upper()}={'' if value is None else value}")
    else:
        _fail(InvalidArgument(message=f"Unsupported format '{fmt}'", hint="Use json or env"))


def main() -> None:
    """Console-script entry point."""

    app()
