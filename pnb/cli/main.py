"""
Root entrypoint for the personal notebook CLI.

Usage:

    pnb                                   display every note
    pnb add-note <notename>               prompt for a note and add it
    pnb del-note <notename>               delete one note
    pnb del-all                           delete every note
    pnb clear-note <notename>             empty the content of a note
    pnb upd-note <notename>               prompt for new content
    pnb upd-notename <notename> <new>     rename a note
    pnb display-note <notename>           show id, name and content

`add-note` and `upd-note` read the note from stdin until a line containing
`#endnote#`.

Connection settings come from SUPABASE_URL / SUPABASE_KEY (and optionally
PNB_TABLE), loaded from the environment or a .env file.
"""

from typing import Callable, Optional, TextIO

import typer

from pnb.commands import (
    AddNote,
    ClearNote,
    Command,
    DelAll,
    DelNote,
    DisplayNote,
    NoteCommand,
    UpdNote,
    UpdNotename,
)
from pnb.config import load_settings
from pnb.errors import ConfigError, InputFailure, NotebookError
from pnb.logging_utils import configure_logging, log_verbose
from pnb.supabase_client import SupabaseNoteStore
from pnb.types import Settings

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "Personal notebook: store short named notes in a Supabase table.\n\n"
        "Run without a command to display every note."
    ),
    invoke_without_command=True,
)

# Builds the store from resolved settings. Tests replace this to inject a
# fake Supabase client.
store_factory: Callable[[Settings], SupabaseNoteStore] = SupabaseNoteStore.from_settings


# ---------------------------------------------------------------------------
# Shared runner
# ---------------------------------------------------------------------------
def run_command(
    cmd: Optional[Command],
    verbose: bool = False,
    debug: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Build the store, execute one command and translate failures into exit
    codes.

    Exit codes:
        1: a notebook error (taken name, missing note, storage or input failure)
        2: configuration is missing or malformed
    """
    logger = configure_logging(verbose=verbose, debug=debug)

    try:
        settings = load_settings()
        log_verbose(f"Connecting to notebook table `{settings['table']}`...", verbose)
        store = store_factory(settings)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    logger.debug("Connected to notebook table `%s`", settings["table"])

    try:
        NoteCommand(cmd, store, stream=stream).execute_command()
    except InputFailure as e:
        logger.debug("Problem reading line: %s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except NotebookError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.debug("Command executed")


def _flags(ctx: typer.Context) -> dict:
    return ctx.obj or {"verbose": False, "debug": False}


# ---------------------------------------------------------------------------
# Root callback: global flags and the "no command" case
# ---------------------------------------------------------------------------
@cli.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Show progress messages and store events."),
    debug: bool = typer.Option(False, "--debug", help="Show debug events."),
) -> None:
    """Display every note when no command is given."""
    ctx.obj = {"verbose": verbose, "debug": debug}

    if ctx.invoked_subcommand is None:
        run_command(None, verbose=verbose, debug=debug)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@cli.command("add-note")
def add_note(
    ctx: typer.Context,
    notename: str = typer.Argument(..., help="Name of the new note."),
) -> None:
    """Prompt for a note and add it under NOTENAME."""
    run_command(AddNote(notename), **_flags(ctx))


@cli.command("del-note")
def del_note(
    ctx: typer.Context,
    notename: str = typer.Argument(..., help="Name of the note to delete."),
) -> None:
    """Delete the note called NOTENAME."""
    run_command(DelNote(notename), **_flags(ctx))


@cli.command("del-all")
def del_all(ctx: typer.Context) -> None:
    """Delete every note in the notebook."""
    run_command(DelAll(), **_flags(ctx))


@cli.command("clear-note")
def clear_note(
    ctx: typer.Context,
    notename: str = typer.Argument(..., help="Name of the note to empty."),
) -> None:
    """Empty the content of NOTENAME, keeping the note."""
    run_command(ClearNote(notename), **_flags(ctx))


@cli.command("upd-note")
def upd_note(
    ctx: typer.Context,
    notename: str = typer.Argument(..., help="Name of the note to rewrite."),
) -> None:
    """Prompt for new content and replace the note in NOTENAME."""
    run_command(UpdNote(notename), **_flags(ctx))


@cli.command("upd-notename")
def upd_notename(
    ctx: typer.Context,
    notename: str = typer.Argument(..., help="Current name of the note."),
    new_notename: str = typer.Argument(..., help="New name for the note."),
) -> None:
    """Rename NOTENAME to NEW_NOTENAME."""
    run_command(UpdNotename(notename, new_notename), **_flags(ctx))


@cli.command("display-note")
def display_note(
    ctx: typer.Context,
    notename: str = typer.Argument(..., help="Name of the note to show."),
) -> None:
    """Show id, name and content of NOTENAME."""
    run_command(DisplayNote(notename), **_flags(ctx))


# ---------------------------------------------------------------------------
# Entry point for `python -m pnb.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
