"""
Interactive multi-line note entry.

The user types the note line by line and finishes it with the `#endnote#`
marker. Text typed before the marker on its final line is kept; the marker
and anything after it on that line are discarded:

    hello
    world#endnote#ignored      →  "hello\\nworld"
"""

import sys
from typing import Optional, TextIO

from pnb.errors import InputFailure
from pnb.types import Echo

END_MARKER = "#endnote#"

INSTRUCTIONS = f"(At the end of the note, enter `{END_MARKER}` to finish writing the note):"


def read_note(name: str, stream: Optional[TextIO], echo: Echo, prompt: str) -> str:
    """
    Prompt for a note and collect it until the end marker.

    Parameters
    ----------
    name : str
        Target notename, only used in error messages.
    stream : TextIO | None
        Line source. Defaults to sys.stdin.
    echo : Echo
        Reporting sink for the prompt.
    prompt : str
        First prompt line, e.g. "Enter note you want to add into `todo`".

    Raises
    ------
    InputFailure
        If a line cannot be read, or the input ends before the marker.
    """
    if stream is None:
        stream = sys.stdin

    echo(prompt)
    echo(INSTRUCTIONS)

    note = ""
    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputFailure(f"Problem reading line of `{name}`: {exc}") from exc

        # readline() returns "" only at end of input
        if not line:
            raise InputFailure(f"Input ended before `{END_MARKER}` while writing `{name}`")

        marker_at = line.find(END_MARKER)
        if marker_at != -1:
            return note + line[:marker_at]

        note += line
