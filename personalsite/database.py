"""Opening the site database."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

from .config import Config

DEFAULT_STORE_DIR = Path("internal") / "store"
_SQLITE_DRIVERS = {"sqlite", "sqlite3"}


class DatabaseError(Exception):
    """Raised when the database cannot be opened or prepared."""


def connection_string(config: Config) -> str:
    """Return the PostgreSQL URL described by ``config``."""
    return (
        f"postgresql://{config.database_username}:{config.database_password}"
        f"@{config.database_url}:{config.database_port}/{config.database_name}"
        "?sslmode=verify-full"
    )


def run_file(conn: sqlite3.Connection, path: str | os.PathLike[str]) -> None:
    """Execute every statement in the SQL file at ``path``."""
    script = Path(path).read_text(encoding="utf-8")
    executescript = getattr(conn, "executescript", None)
    if executescript is not None:
        executescript(script)
    else:
        conn.cursor().execute(script)


def _open_production(config: Config) -> sqlite3.Connection:
    driver = config.database_driver_name.lower()
    if driver not in _SQLITE_DRIVERS:
        raise DatabaseError(f"unsupported database driver {config.database_driver_name!r}")
    try:
        return sqlite3.connect(config.database_name, check_same_thread=False)
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc


def get_db(
    config: Config, store_dir: str | os.PathLike[str] = DEFAULT_STORE_DIR
) -> sqlite3.Connection:
    """Open the database for ``config``.

    In production the configured driver is used. Otherwise an in-memory
    database is created from ``schema.sql`` and ``gen.sql`` in ``store_dir``.
    """
    if config.environment == "prod":
        return _open_production(config)
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    store = Path(store_dir)
    for name in ("schema.sql", "gen.sql"):
        try:
            run_file(conn, store / name)
        except (OSError, sqlite3.Error) as exc:
            conn.close()
            raise DatabaseError(f"{store / name}: {exc}") from exc
    return conn