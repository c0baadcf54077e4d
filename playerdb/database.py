"""SQLite storage for player accounts, sessions and game statistics."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Union

DEFAULT_PATH = "../db/user.db"
BUSY_TIMEOUT_SECONDS = 5.0

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    pw TEXT NOT NULL,
    salt TEXT NOT NULL,
    nickname TEXT UNIQUE NOT NULL,
    report_count INTEGER DEFAULT 0,
    is_suspended INTEGER DEFAULT 0
);

CREATE TABLE IF NOT EXISTS game_stats (
    user_id TEXT PRIMARY KEY,
    wins INTEGER DEFAULT 0,
    losses INTEGER DEFAULT 0,
    FOREIGN KEY(user_id) REFERENCES users(id)
);

CREATE TABLE IF NOT EXISTS sessions (
    user_id TEXT NOT NULL,
    token TEXT PRIMARY KEY,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(user_id) REFERENCES users(id)
);
"""

PathType = Union[str, "os.PathLike[str]"]


class PlayerDBError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class Database:
    """A handle on the player database file.

    Each call to :meth:`connect` opens a fresh connection, as every
    operation works in its own short-lived connection.
    """

    def __init__(self, path: PathType = DEFAULT_PATH) -> None:
        self.path = os.fspath(path)
        self.timeout = BUSY_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        return f"Database({self.path!r})"

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, committing on success and rolling back on error.

        Any ``sqlite3.Error`` is re-raised as :class:`PlayerDBError`.
        """
        try:
            conn = sqlite3.connect(self.path, timeout=self.timeout)
        except sqlite3.Error as err:
            raise PlayerDBError(f"DB open error: {err}") from err
        try:
            try:
                yield conn
            except sqlite3.Error as err:
                conn.rollback()
                raise PlayerDBError(f"SQL error: {err}") from err
            except BaseException:
                conn.rollback()
                raise
            try:
                conn.commit()
            except sqlite3.Error as err:
                conn.rollback()
                raise PlayerDBError(f"commit failed: {err}") from err
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create the users, game_stats and sessions tables if missing."""
        with self.connect() as conn:
            conn.executescript(SCHEMA)