"""
Supabase‑backed note store.

SupabaseNoteStore owns every read and write against the single `notebook`
table and is the only place that knows how backend failures look. It wraps
an injected Supabase‑compatible client (the real SDK from
`supabase.create_client`, or one of the in‑memory fakes in tests/) and
exposes one method per CRUD action:

    • create(name, content)   → NoteRecord
    • delete(name)            → None
    • delete_all()            → int
    • clear(name)             → None
    • update(name, content)   → NoteRecord
    • rename(name, new_name)  → NoteRecord
    • get(name)               → NoteRecord
    • get_all()               → list[NoteRecord]

Expected table (PostgreSQL, exposed through PostgREST):

    CREATE TABLE notebook (
        id        BIGINT GENERATED ALWAYS AS IDENTITY PRIMARY KEY,
        note_name TEXT NOT NULL UNIQUE,
        note      TEXT
    );

Failure translation is deterministic:

    • SQLSTATE 23505 (unique_violation) → NameAlreadyTaken
    • no row returned by the statement  → NotFound
    • anything else from the backend    → StorageFailure

Every mutating method emits one INFO event on this module's logger. The
events are advisory and never influence control flow.
"""

import logging
from typing import Any, Dict, List, Optional, cast

import httpx
from postgrest.exceptions import APIError
from supabase import SupabaseException, create_client

from pnb.config import DEFAULT_TABLE
from pnb.errors import ConfigError, NameAlreadyTaken, NotebookError, NotFound, StorageFailure
from pnb.types import NoteRecord, Settings, SupabaseClientInterface

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation.
UNIQUE_VIOLATION = "23505"

# Backend exceptions the store knows how to classify.
BACKEND_ERRORS = (APIError, httpx.HTTPError)

# ---------------------------------------------------------------------------
# Helpers: normalize Supabase responses
# ---------------------------------------------------------------------------


def _extract_data(resp: Any) -> List[Dict[str, Any]]:
    """
    Normalize Supabase responses across:
        • real SDK APIResponse objects
        • dict‑style responses from test doubles

    Always returns a list of row dictionaries. Raises StorageFailure when
    the response carries an error instead of raising one.
    """

    # Dict-style response (test doubles)
    if isinstance(resp, dict):
        status = resp.get("status", 200)
        if status >= 400 or resp.get("error"):
            raise StorageFailure(f"Supabase error: {resp.get('error') or resp}")
        data = resp.get("data") or []
        return cast(List[Dict[str, Any]], data if isinstance(data, list) else [data])

    # SDK-style response
    error = getattr(resp, "error", None)
    if error:
        raise StorageFailure(f"Supabase error: {error}")

    data = getattr(resp, "data", None)
    if data is None:
        return []

    if isinstance(data, list):
        return cast(List[Dict[str, Any]], data)

    return [cast(Dict[str, Any], data)]


def _to_record(row: Dict[str, Any]) -> NoteRecord:
    """Build a NoteRecord from a raw row, mapping a NULL note to ""."""
    return {
        "id": int(row["id"]),
        "note_name": row["note_name"],
        "note": row.get("note") or "",
    }


# ---------------------------------------------------------------------------
# Main store class
# ---------------------------------------------------------------------------


class SupabaseNoteStore:
    """
    CRUD access to the note table with deterministic failure translation.

    The store is intentionally thin: it builds one PostgREST statement per
    operation, runs it, and interprets the returned rows. It holds no cache
    and no state besides the injected client and the table name.
    """

    def __init__(self, client: Optional[SupabaseClientInterface], table: str = DEFAULT_TABLE) -> None:
        """
        Parameters
        ----------
        client : SupabaseClientInterface | None
            A Supabase‑compatible client (real SDK or test double).
        table : str
            Name of the note table. Defaults to "notebook".
        """
        self.client = client
        self.table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseNoteStore":
        """
        Factory constructor for production usage.

        Creates the official Supabase SDK client from the resolved settings
        and wraps it. Connection errors surface on the first statement, not
        here, because the SDK connects lazily.

        Raises
        ------
        ConfigError
            If the SDK rejects the URL or key as malformed.
        """
        try:
            sdk_client = create_client(settings["supabase_url"], settings["supabase_key"])
        except SupabaseException as exc:
            raise ConfigError(f"Invalid Supabase settings: {exc}") from exc
        return cls(sdk_client, table=settings["table"])

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _require_client(self) -> SupabaseClientInterface:
        """Return the configured client or raise StorageFailure."""
        if self.client is None:
            raise StorageFailure("Supabase client is not configured")
        return self.client

    def _query(self) -> Any:
        return self._require_client().table(self.table)

    def _run(self, builder: Any, name: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Execute a built statement and return its rows.

        Backend exceptions are routed through classify_failure so callers
        only ever see NotebookError subclasses.
        """
        try:
            resp = builder.execute()
        except BACKEND_ERRORS as exc:
            raise self.classify_failure(exc, name) from exc
        return _extract_data(resp)

    def classify_failure(self, exc: Exception, name: Optional[str] = None) -> NotebookError:
        """
        Map a backend exception to the domain error set.

        A PostgREST APIError carrying SQLSTATE 23505 means the unique
        constraint on `note_name` rejected `name`; everything else is a
        StorageFailure.
        """
        if isinstance(exc, APIError) and exc.code == UNIQUE_VIOLATION and name is not None:
            return NameAlreadyTaken(name)

        if isinstance(exc, APIError):
            return StorageFailure(f"Supabase error: {exc.message or exc}")

        return StorageFailure(f"Notebook backend unreachable: {exc}")

    # -----------------------------------------------------------------------
    # Create
    # -----------------------------------------------------------------------

    def create(self, name: str, content: str) -> NoteRecord:
        """
        Insert a new note and return it with its generated id.

        Raises
        ------
        NameAlreadyTaken
            If a note called `name` already exists.
        StorageFailure
            On any other backend error, or if the insert returned no row.
        """
        rows = self._run(self._query().insert({"note_name": name, "note": content}), name)
        if not rows:
            raise StorageFailure(f"Insert returned no rows for notename={name!r}")

        logger.info("Insert note with name `%s` with data `%s` into notebook", name, content)
        return _to_record(rows[0])

    # -----------------------------------------------------------------------
    # Delete
    # -----------------------------------------------------------------------

    def delete(self, name: str) -> None:
        """Delete the note called `name`; NotFound if there is none."""
        rows = self._run(self._query().delete().eq("note_name", name))
        if not rows:
            raise NotFound(name)

        row = _to_record(rows[0])
        logger.info(
            "Deleting note: ID: %s; Name: %s; Data: %s", row["id"], row["note_name"], row["note"]
        )

    def delete_all(self) -> int:
        """
        Delete every note and return how many rows were removed.

        PostgREST refuses a DELETE without a filter, so the statement is
        bounded by `id >= 0`, which every generated id satisfies.
        """
        rows = self._run(self._query().delete().gte("id", 0))

        for raw in rows:
            row = _to_record(raw)
            logger.info(
                "Deleting ID: %s; Name: %s; Data: %s", row["id"], row["note_name"], row["note"]
            )

        logger.info("Deleted %d note(s) from notebook", len(rows))
        return len(rows)

    # -----------------------------------------------------------------------
    # Update
    # -----------------------------------------------------------------------

    def clear(self, name: str) -> None:
        """Empty the content of the note called `name`."""
        rows = self._run(self._query().update({"note": ""}).eq("note_name", name))
        if not rows:
            raise NotFound(name)

        logger.info("Content of `%s` was cleared", name)

    def update(self, name: str, new_content: str) -> NoteRecord:
        """
        Replace the content of the note called `name`.

        There is no implicit upsert: a missing note raises NotFound.
        """
        rows = self._run(self._query().update({"note": new_content}).eq("note_name", name))
        if not rows:
            raise NotFound(name)

        logger.info("Update `%s` data to: %s", name, new_content)
        return _to_record(rows[0])

    def rename(self, name: str, new_name: str) -> NoteRecord:
        """
        Change the notename of `name` to `new_name`.

        Raises
        ------
        NotFound
            If no note is called `name`.
        NameAlreadyTaken
            If `new_name` already belongs to another note.
        """
        rows = self._run(
            self._query().update({"note_name": new_name}).eq("note_name", name),
            new_name,
        )
        if not rows:
            raise NotFound(name)

        logger.info("Update notename from `%s` to `%s`", name, new_name)
        return _to_record(rows[0])

    # -----------------------------------------------------------------------
    # Read
    # -----------------------------------------------------------------------

    def get(self, name: str) -> NoteRecord:
        """Return the note called `name`; NotFound if there is none."""
        rows = self._run(self._query().select("*").eq("note_name", name))
        if not rows:
            raise NotFound(name)
        return _to_record(rows[0])

    def get_all(self) -> List[NoteRecord]:
        """Return every note, oldest first."""
        rows = self._run(self._query().select("*").order("id"))
        return [_to_record(row) for row in rows]
