"""
pnb/types.py

Centralized type definitions for the personal notebook.

This module defines the TypedDicts and Protocols shared by the store, the
command dispatcher, the CLI and the test doubles. Keeping them in one place
gives:

    • a single source of truth for the note row schema
    • clear contracts between the CLI, the dispatcher and the Supabase layer
    • easy dependency injection of fake clients in tests
"""

from typing import Any, Callable, Protocol, TypedDict


# ---------------------------------------------------------------------------
# NoteRecord
# ---------------------------------------------------------------------------
# A single row of the `notebook` table as returned by the store.
#
#   • id       : generated by the database, never changes
#   • note_name: unique across the table, the lookup key
#   • note     : content; the store always hands out a str, with an empty
#                 string meaning "no content yet"
# ---------------------------------------------------------------------------
class NoteRecord(TypedDict):
    id: int
    note_name: str
    note: str


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
# Connection settings resolved from the environment by pnb.config.
# ---------------------------------------------------------------------------
class Settings(TypedDict):
    supabase_url: str
    supabase_key: str
    table: str


# ---------------------------------------------------------------------------
# SupabaseClientInterface
# ---------------------------------------------------------------------------
# The subset of the Supabase Python client used by SupabaseNoteStore:
#
#   client.table("notebook").insert({...}).execute()
#   client.table("notebook").update({...}).eq("note_name", n).execute()
#   client.table("notebook").delete().eq("note_name", n).execute()
#   client.table("notebook").select("*").order("id").execute()
#
# The Protocol is structural: the real SDK and every fake in tests/ satisfy
# it without inheriting from it.
# ---------------------------------------------------------------------------
class SupabaseClientInterface(Protocol):
    def table(self, name: str) -> Any:
        """
        Return a query builder for the given table.
        The builder must support insert/update/delete/select, the filters
        used by the store, and .execute().
        """
        ...


# ---------------------------------------------------------------------------
# Echo
# ---------------------------------------------------------------------------
# Reporting sink used by the dispatcher. typer.echo satisfies it; tests pass
# a list-appending callable.
# ---------------------------------------------------------------------------
Echo = Callable[..., None]
