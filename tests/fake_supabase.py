"""
FakeClient and FailingClient for testing SupabaseNoteStore without a network.

FakeClient simulates the PostgREST query-builder chain used by the store:

    client.table(name).insert(payload).execute()
    client.table(name).update(values).eq(col, v).execute()
    client.table(name).delete().eq(col, v).execute()
    client.table(name).delete().gte(col, v).execute()
    client.table(name).select("*").eq(col, v).execute()
    client.table(name).select("*").order(col).execute()

Rows live in memory, keyed by table name. The unique constraint on
`note_name` is enforced the way Postgres reports it through PostgREST: an
APIError whose code is "23505".
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
from postgrest.exceptions import APIError


def unique_violation(name: str) -> APIError:
    return APIError(
        {
            "code": "23505",
            "message": 'duplicate key value violates unique constraint "notebook_note_name_key"',
            "details": f"Key (note_name)=({name}) already exists.",
            "hint": None,
        }
    )


# ---------------------------------------------------------------------------
# Fake response: stand‑in for postgrest's APIResponse
# ---------------------------------------------------------------------------


class FakeResponse:
    def __init__(self, data: List[Dict[str, Any]]) -> None:
        self.data = data
        self.count = None


# ---------------------------------------------------------------------------
# FakeQuery: returned by FakeClient.table()
# ---------------------------------------------------------------------------


class FakeQuery:
    """
    One statement against one in-memory table.

    The builder records the operation and its filters; nothing touches the
    rows until .execute() is called, matching the SDK.
    """

    def __init__(self, client: "FakeClient", table_name: str) -> None:
        self.client = client
        self.table_name = table_name

        self._op: Optional[str] = None
        self._payload: Dict[str, Any] = {}
        self._filters: List[Tuple[str, Callable[[Any], bool]]] = []
        self._order: Optional[str] = None

    # --- Statement builders ---------------------------------------------------

    def insert(self, payload: Dict[str, Any]) -> "FakeQuery":
        self._op, self._payload = "insert", payload
        return self

    def update(self, payload: Dict[str, Any]) -> "FakeQuery":
        self._op, self._payload = "update", payload
        return self

    def delete(self) -> "FakeQuery":
        self._op = "delete"
        return self

    def select(self, *columns: str) -> "FakeQuery":
        self._op = "select"
        return self

    # --- Filters --------------------------------------------------------------

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, lambda v: v == value))
        return self

    def gte(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, lambda v: v is not None and v >= value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = column
        return self

    # --- Execute --------------------------------------------------------------

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(check(row.get(column)) for column, check in self._filters)

    def execute(self) -> FakeResponse:
        self.client.executed.append((self.table_name, self._op))
        rows = self.client.store.setdefault(self.table_name, [])

        if self._op == "insert":
            name = self._payload["note_name"]
            if any(row["note_name"] == name for row in rows):
                raise unique_violation(name)

            # ids continue after any rows a test seeded directly
            self.client.next_id = max([self.client.next_id] + [row["id"] for row in rows]) + 1
            new_row = {"id": self.client.next_id, "note": None, **self._payload}
            rows.append(new_row)
            return FakeResponse([dict(new_row)])

        matched = [row for row in rows if self._matches(row)]

        if self._op == "update":
            new_name = self._payload.get("note_name")
            if new_name is not None and any(
                row["note_name"] == new_name for row in rows if row not in matched
            ):
                raise unique_violation(new_name)

            for row in matched:
                row.update(self._payload)
            return FakeResponse([dict(row) for row in matched])

        if self._op == "delete":
            self.client.store[self.table_name] = [row for row in rows if row not in matched]
            return FakeResponse([dict(row) for row in matched])

        if self._order is not None:
            matched = sorted(matched, key=lambda row: row[self._order])
        return FakeResponse([dict(row) for row in matched])


# ---------------------------------------------------------------------------
# FakeClient: Supabase‑like client backed by dicts
# ---------------------------------------------------------------------------


class FakeClient:
    """
    Minimal Supabase-like client exposing `.table(name)`.

    The internal store is a dict:
        { "notebook": [ {id, note_name, note}, ... ] }
    """

    def __init__(self) -> None:
        self.store: Dict[str, List[Dict[str, Any]]] = {}
        self.next_id = 0
        self.executed: List[Tuple[str, Optional[str]]] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


# ---------------------------------------------------------------------------
# FailingClient: every statement raises
# ---------------------------------------------------------------------------


class FailingClient:
    """
    A test double whose statements always fail with `error`.

    Useful for verifying that the store wraps backend errors in
    StorageFailure instead of leaking them.
    """

    def __init__(self, error: Exception) -> None:
        self.error = error

    def table(self, name: str) -> "FailingClient":
        return self

    def __getattr__(self, attr: str) -> Any:
        # insert/update/delete/select/eq/gte/order all chain back to self
        return lambda *args, **kwargs: self

    def execute(self) -> Any:
        raise self.error


def connect_error() -> httpx.ConnectError:
    return httpx.ConnectError("[Errno 111] Connection refused")


def server_error() -> APIError:
    return APIError({"code": "42P01", "message": 'relation "notebook" does not exist'})
