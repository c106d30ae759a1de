"""Logging for benchmark runs.

Log records go to stderr and the result table goes to stdout.  On a
terminal both land on the same screen, so a record printed between two
redraws shifts the table down and the in-place redraw would then move
the cursor over the log line instead of the old rows.  At the default
level nothing is logged while tasks run, but ``--verbose`` turns on the
per-task DEBUG records from the engine, and :func:`in_place_redraw`
falls back to appending in that case.

The optional log file always receives DEBUG records and never touches
the terminal.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "ipsbench"
_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
# Engine records name their phase, e.g. "DEBUG    calibrate: ...".
_CONSOLE_FORMAT = "%(levelname)-8s %(phase)s: %(message)s"


class _PhaseFilter(logging.Filter):
    """Expose the child logger suffix (``calibrate``, ``sampler``...) as ``phase``."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = _LOGGER_NAME + "."
        if record.name.startswith(prefix):
            record.phase = record.name[len(prefix):]
        else:
            record.phase = record.name
        return True


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure and return the root ipsbench logger.

    Args:
        verbose: Show the engine's per-task DEBUG records on stderr.
        quiet: Only show warnings and errors. Ignored if *verbose* is True.
        log_file: If provided, also write DEBUG records to this path.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(_console_level(verbose, quiet))
    console.addFilter(_PhaseFilter())
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(fh)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for one phase of a run, e.g. ``get_logger("sampler")``."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def in_place_redraw(interactive: bool, *, verbose: bool) -> bool:
    """Decide whether the table may be redrawn in place.

    Verbose console logging writes between redraws, which breaks the
    cursor arithmetic of the in-place table, so it forces append mode.
    """
    if interactive and verbose:
        logging.getLogger(_LOGGER_NAME).info(
            "Verbose logging shares the terminal; appending tables instead of redrawing"
        )
        return False
    return interactive
