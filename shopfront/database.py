"""SQLite connection handling, schema migration and sample data."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

DEFAULT_DATABASE_URL = "sqlite:data/db.sqlite"

SEED_PRODUCTS = (
    ("ノートPC", 150000, "高性能ノートパソコン", 10),
    ("スマートフォン", 80000, "最新型スマートフォン", 20),
    ("ヘッドフォン", 25000, "ノイズキャンセリングヘッドフォン", 30),
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    price INTEGER NOT NULL,
    description TEXT NOT NULL,
    quantity INTEGER NOT NULL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

_CLEAR = """
DELETE FROM products;
DELETE FROM sqlite_sequence WHERE name = 'products';
"""


class DatabaseError(RuntimeError):
    """Raised when the database cannot be opened or is in the wrong state."""


def _database_path(database_url: str) -> str | None:
    """Return the file path named by a URL, or None for an in-memory database."""
    target = database_url
    for prefix in ("sqlite://", "sqlite:"):
        if target.startswith(prefix):
            target = target[len(prefix):]
            break
    target = target.split("?", 1)[0]
    if target in ("", ":memory:"):
        return None
    return target


class Database:
    """An open connection to the application's SQLite database."""

    def __init__(self, connection: aiosqlite.Connection) -> None:
        self.connection = connection

    @classmethod
    async def open(cls, database_url: str) -> Database:
        """Connect to an existing database file, or to a fresh in-memory one."""
        path = _database_path(database_url)
        if path is None:
            target, uri = ":memory:", False
        else:
            target, uri = f"{Path(path).resolve().as_uri()}?mode=rw", True
        try:
            connection = await aiosqlite.connect(target, uri=uri, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {database_url}: {exc}") from exc
        connection.row_factory = aiosqlite.Row
        return cls(connection)

    async def close(self) -> None:
        """Close the connection."""
        await self.connection.close()

    async def __aenter__(self) -> Database:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


_instance: Database | None = None


async def init_db(database_url: str) -> None:
    """Open the shared database; it may be opened only once."""
    global _instance
    if _instance is not None:
        raise DatabaseError("Database already initialized")
    _instance = await Database.open(database_url)


def get_db() -> Database:
    """Return the shared database opened by :func:`init_db`."""
    if _instance is None:
        raise DatabaseError("Database not initialized")
    return _instance


async def close_db() -> None:
    """Close the shared database, if it is open."""
    global _instance
    if _instance is not None:
        database, _instance = _instance, None
        await database.close()


async def run_migrations(database_url: str) -> None:
    """Make sure the database file exists and create the products table."""
    path = _database_path(database_url)
    if path is not None and not Path(path).exists():
        Path(path).touch()
    await get_db().connection.execute(_SCHEMA)


async def seed_database() -> None:
    """Insert the sample products."""
    now = datetime.now(timezone.utc).isoformat()
    await get_db().connection.executemany(
        "INSERT INTO products (name, price, description, quantity, created_at, updated_at) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        [(name, price, description, quantity, now, now)
         for name, price, description, quantity in SEED_PRODUCTS],
    )


async def clear_database() -> None:
    """Delete every product and reset the id sequence."""
    await get_db().connection.executescript(_CLEAR)