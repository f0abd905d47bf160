"""
Shared pytest configuration for the notebook test suite.

This file centralizes reusable testing utilities so that:
    • store tests run against a deterministic in‑memory Supabase fake
    • CLI tests share one CliRunner and one injected store
    • no test needs network access or real credentials
"""

import logging

import pytest
from typer.testing import CliRunner

from pnb.cli import main as cli_main
from pnb.logging_utils import LOGGER_NAME
from pnb.supabase_client import SupabaseNoteStore
from tests.fake_supabase import FakeClient


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def fake_client() -> FakeClient:
    """An empty in-memory Supabase-like client."""
    return FakeClient()


@pytest.fixture
def store(fake_client: FakeClient) -> SupabaseNoteStore:
    """A note store wired to the in-memory fake."""
    return SupabaseNoteStore(fake_client)


# ---------------------------------------------------------------------------
# Fixture: cli_store
# ---------------------------------------------------------------------------
@pytest.fixture
def cli_store(monkeypatch, store: SupabaseNoteStore) -> SupabaseNoteStore:
    """
    Route the CLI to the in-memory store.

    Sets dummy credentials so settings resolve, and swaps the module-level
    store factory so no real Supabase client is created.
    """
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "test-key")
    monkeypatch.delenv("PNB_TABLE", raising=False)
    monkeypatch.setattr(cli_main, "store_factory", lambda settings: store)
    return store


# ---------------------------------------------------------------------------
# Fixture: reset_pnb_logger (autouse)
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_pnb_logger():
    """
    Drop handlers configure_logging() attached during a CLI test.

    CliRunner swaps sys.stderr per invocation; a handler left behind would
    keep writing to a stream that no longer exists.
    """
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
