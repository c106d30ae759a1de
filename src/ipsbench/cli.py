"""Command-line interface for ipsbench.

Subcommands:
    ipsbench run    Benchmark tasks from a profile or inline definitions
    ipsbench demo   Selection sort against the builtin sort
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ipsbench import __version__
from ipsbench.logging import get_logger, in_place_redraw, setup_logging
from ipsbench.suite import Suite

log = get_logger("cli")


def _common_options(func):  # type: ignore[no-untyped-def]
    """Duration, output and logging options shared by run and demo."""
    options = [
        click.option(
            "--warmup",
            type=float,
            default=None,
            help="Warm-up budget per task in seconds (default: 2).",
        ),
        click.option(
            "--measure",
            type=float,
            default=None,
            help="Measurement budget per task in seconds (default: 5).",
        ),
        click.option(
            "--tty/--no-tty",
            "interactive",
            default=None,
            help="Redraw the table in place (default: when stdout is a terminal).",
        ),
        click.option("-v", "--verbose", is_flag=True, help="Show detailed output."),
        click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors."),
        click.option(
            "--log-file",
            type=click.Path(path_type=Path),
            default=None,
            help="Also write DEBUG logs to this file.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """ipsbench — compare implementations by iterations per second."""


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


@main.command()
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(exists=True, path_type=Path),
    help="YAML profile defining the suite.",
)
@click.option(
    "--task",
    "inline_tasks",
    type=str,
    multiple=True,
    help="Inline task: 'name=module:attr' (repeatable).",
)
@click.option(
    "--init",
    "init_ref",
    type=str,
    default=None,
    help="Init hook called before every operation: 'module:attr'.",
)
@click.option("--name", type=str, default=None, help="Human-readable suite name.")
@_common_options
def run(
    profile_path: Path | None,
    inline_tasks: tuple[str, ...],
    init_ref: str | None,
    name: str | None,
    warmup: float | None,
    measure: float | None,
    interactive: bool | None,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Benchmark tasks and print a ranking from fastest to slowest.

    \b
    Examples:
        # From a YAML profile
        ipsbench run --profile sorting.yaml

        # Inline tasks sharing one init hook
        ipsbench run \\
            --init mybench:reshuffle \\
            --task "heap sort=mybench:heap_sort" \\
            --task "builtin sort=mybench:builtin_sort" \\
            --warmup 1 --measure 3
    """
    from ipsbench.config import (
        build_suite,
        config_from_profile,
        load_profile,
        parse_task_spec,
        validate_config,
    )

    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        tasks = [parse_task_spec(spec) for spec in inline_tasks]
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    cli_overrides: dict[str, object] = {
        "name": name,
        "warmup": warmup,
        "measure": measure,
        "init": init_ref,
        "interactive": interactive,
        "tasks": tasks,
    }

    try:
        profile_data = load_profile(profile_path) if profile_path else {}
        config = config_from_profile(profile_data, cli_overrides=cli_overrides)
    except (FileNotFoundError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    problems = validate_config(config)
    for problem in problems:
        if problem.severity == "warning":
            log.warning("%s: %s", problem.field, problem.message)
    errors = [p for p in problems if p.severity == "error"]
    if errors:
        for err in errors:
            click.echo(f"Error: {err.field}: {err.message}", err=True)
        raise SystemExit(1)

    suite = build_suite(config)
    if config.name:
        click.echo(config.name)
    is_tty = in_place_redraw(config.is_interactive(sys.stdout.isatty()), verbose=verbose)
    _run_suite(suite, config.warmup, config.measure, is_tty)


# ---------------------------------------------------------------------------
# demo
# ---------------------------------------------------------------------------


@main.command()
@click.option(
    "--size",
    type=click.IntRange(min=1),
    default=2000,
    show_default=True,
    help="Number of elements to sort.",
)
@click.option("--seed", type=int, default=None, help="Seed for the shuffle.")
@_common_options
def demo(
    size: int,
    seed: int | None,
    warmup: float | None,
    measure: float | None,
    interactive: bool | None,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Compare selection sort with the builtin sort on a shuffled list."""
    from ipsbench.config import DEFAULT_MEASURE, DEFAULT_WARMUP
    from ipsbench.demo import make_demo_suite

    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    suite = make_demo_suite(size, seed=seed)
    is_tty = in_place_redraw(
        interactive if interactive is not None else sys.stdout.isatty(), verbose=verbose
    )
    _run_suite(
        suite,
        warmup if warmup is not None else DEFAULT_WARMUP,
        measure if measure is not None else DEFAULT_MEASURE,
        is_tty,
    )


def _run_suite(suite: Suite, warmup: float, measure: float, is_tty: bool) -> None:
    log.info(
        "Benchmarking %d task(s): %.2fs warm-up and %.2fs measurement each",
        len(suite),
        warmup,
        measure,
    )
    try:
        suite.run(warmup, measure, is_tty=is_tty)
    except KeyboardInterrupt:
        click.echo("\nBenchmark interrupted.", err=True)
        raise SystemExit(130)  # noqa: B904
