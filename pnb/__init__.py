"""Personal notebook: short named notes kept in a Supabase table."""

from pnb.errors import (
    ConfigError,
    InputFailure,
    NameAlreadyTaken,
    NotebookError,
    NotFound,
    StorageFailure,
)
from pnb.supabase_client import SupabaseNoteStore

__all__ = [
    "ConfigError",
    "InputFailure",
    "NameAlreadyTaken",
    "NotebookError",
    "NotFound",
    "StorageFailure",
    "SupabaseNoteStore",
]
