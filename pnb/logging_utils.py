"""
logging_utils.py

A small collection of logging helpers used across the notebook.

Two kinds of output exist:

    • verbose progress messages for the person at the terminal, printed
      with Typer's echo so they sit naturally next to command output
    • informational/debug events emitted by the store and the CLI on the
      `pnb` logger hierarchy

configure_logging() wires the second kind to stderr at a level chosen by
the --verbose/--debug flags.
"""

import logging
import sys

import typer

LOGGER_NAME = "pnb"

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high‑level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain‑English description of what is happening
        (e.g., "Connecting to notebook...").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.
    """
    if verbose:
        typer.echo(message)


def configure_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the `pnb` logger and set its level.

    WARNING by default, INFO with --verbose, DEBUG with --debug. Calling
    this more than once replaces the previous handler instead of stacking
    duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if debug:
        logger.setLevel(logging.DEBUG)
    elif verbose:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)

    for handler in list(logger.handlers):
        if getattr(handler, "_pnb_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._pnb_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger
