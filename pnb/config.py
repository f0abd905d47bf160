# pnb/config.py

import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from pnb.errors import ConfigError
from pnb.types import Settings

DEFAULT_TABLE = "notebook"

REQUIRED_VARS = ("SUPABASE_URL", "SUPABASE_KEY")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Resolve connection settings for the notebook store.

    When `env` is None the process environment is used, after loading any
    `.env` file in the working directory. Tests pass an explicit mapping.

    Raises
    ------
    ConfigError
        If SUPABASE_URL or SUPABASE_KEY is missing or empty.
    """
    if env is None:
        # Load environment variables from the .env file into the system environment
        load_dotenv()
        env = os.environ

    missing = [name for name in REQUIRED_VARS if not env.get(name)]
    if missing:
        raise ConfigError(
            f"Notebook database is not specified: {', '.join(missing)} not set.\n"
            "Try `export SUPABASE_URL=https://<project>.supabase.co` and "
            "`export SUPABASE_KEY=<key>` (or put them in .env) before running pnb again."
        )

    return {
        "supabase_url": env["SUPABASE_URL"],
        "supabase_key": env["SUPABASE_KEY"],
        "table": env.get("PNB_TABLE") or DEFAULT_TABLE,
    }
