"""
Command values and the dispatcher that executes them.

The CLI parses argv into one of the command classes below (or None when no
subcommand was given) and hands it to NoteCommand together with the store.
NoteCommand runs exactly one store operation per invocation:

    AddNote(name)                  capture, then store.create
    DelNote(name)                  store.delete
    DelAll()                       store.delete_all
    ClearNote(name)                store.clear
    UpdNote(name)                  capture, then store.update
    UpdNotename(name, new_name)    store.rename
    DisplayNote(name)              store.get, then report
    None                           store.get_all, then report

Store errors are not caught here; they propagate unchanged to the caller.
"""

from dataclasses import dataclass
from typing import List, Optional, TextIO, Union

import typer

from pnb.capture import read_note
from pnb.supabase_client import SupabaseNoteStore
from pnb.types import Echo, NoteRecord


# ---------------------------------------------------------------------------
# Command values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddNote:
    notename: str


@dataclass(frozen=True)
class DelNote:
    notename: str


@dataclass(frozen=True)
class DelAll:
    pass


@dataclass(frozen=True)
class ClearNote:
    notename: str


@dataclass(frozen=True)
class UpdNote:
    notename: str


@dataclass(frozen=True)
class UpdNotename:
    notename: str
    new_notename: str


@dataclass(frozen=True)
class DisplayNote:
    notename: str


Command = Union[AddNote, DelNote, DelAll, ClearNote, UpdNote, UpdNotename, DisplayNote]


# ---------------------------------------------------------------------------
# Reporting helpers
# ---------------------------------------------------------------------------


def format_note(row: NoteRecord) -> str:
    """Render a note the way `display-note` and the bare command show it."""
    return f"ID: {row['id']}\nName: {row['note_name']}\nData:\n{row['note']}"


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class NoteCommand:
    """
    Holds a parsed command and executes it against a note store.

    The store, the input stream and the reporting sink are all passed in;
    nothing is looked up from module state.
    """

    def __init__(
        self,
        cmd: Optional[Command],
        store: SupabaseNoteStore,
        stream: Optional[TextIO] = None,
        echo: Echo = typer.echo,
    ) -> None:
        self.cmd = cmd
        self.store = store
        self.stream = stream
        self.echo = echo

    def execute_command(self) -> None:
        """
        Run the held command.

        Raises
        ------
        NameAlreadyTaken, NotFound, StorageFailure
            Straight from the store.
        InputFailure
            If the interactive note could not be read.
        """
        cmd = self.cmd

        if isinstance(cmd, AddNote):
            note = read_note(
                cmd.notename,
                self.stream,
                self.echo,
                f"Enter note you want to add into `{cmd.notename}`",
            )
            self.echo(f"Note to add into `{cmd.notename}`:\n{note}")
            self.store.create(cmd.notename, note)

        elif isinstance(cmd, DelNote):
            self.store.delete(cmd.notename)

        elif isinstance(cmd, DelAll):
            count = self.store.delete_all()
            self.echo(f"Deleted {count} note(s)")

        elif isinstance(cmd, ClearNote):
            self.store.clear(cmd.notename)

        elif isinstance(cmd, UpdNote):
            note = read_note(
                cmd.notename,
                self.stream,
                self.echo,
                f"Enter note you want to add instead old note in `{cmd.notename}`",
            )
            self.echo(f"Note to add into `{cmd.notename}` instead old note:\n{note}")
            self.store.update(cmd.notename, note)

        elif isinstance(cmd, UpdNotename):
            self.store.rename(cmd.notename, cmd.new_notename)

        elif isinstance(cmd, DisplayNote):
            row = self.store.get(cmd.notename)
            self.echo("Requested note:")
            self.echo(format_note(row))

        elif cmd is None:
            self.display_all()

        else:
            raise TypeError(f"Unknown command: {cmd!r}")

    def display_all(self) -> List[NoteRecord]:
        rows = self.store.get_all()
        self.echo("All notes in notebook:")
        for row in rows:
            self.echo(format_note(row))
        return rows
