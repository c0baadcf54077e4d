"""Session tokens stored in the ``sessions`` table."""

from __future__ import annotations

from typing import Optional

from playerdb.database import Database


def add_token_after_removal(db: Database, user_id: str, token: str) -> None:
    """Replace every token of ``user_id`` with ``token`` in one transaction."""
    with db.connect() as conn:
        conn.execute("DELETE FROM sessions WHERE user_id = ?", (user_id,))
        conn.execute(
            "INSERT INTO sessions(user_id, token) VALUES (?, ?)",
            (user_id, token),
        )


def add_token(db: Database, user_id: str, token: str) -> None:
    """Store a new token for ``user_id``."""
    with db.connect() as conn:
        conn.execute(
            "INSERT INTO sessions(user_id, token) VALUES (?, ?)",
            (user_id, token),
        )


def is_valid_token(db: Database, token: str) -> bool:
    """Return whether ``token`` belongs to a stored session."""
    return get_user_id_by_token(db, token) is not None


def remove_token(db: Database, token: str) -> None:
    """Delete the session holding ``token``; unknown tokens are ignored."""
    with db.connect() as conn:
        conn.execute("DELETE FROM sessions WHERE token = ?", (token,))


def get_user_id_by_token(db: Database, token: str) -> Optional[str]:
    """Return the user id owning ``token``, or None if there is none."""
    with db.connect() as conn:
        row = conn.execute(
            "SELECT user_id FROM sessions WHERE token = ?", (token,)
        ).fetchone()
    return None if row is None else row[0]


def get_user_id_by_nickname(db: Database, nickname: str) -> Optional[str]:
    """Return the id of the user with ``nickname``, or None if there is none."""
    with db.connect() as conn:
        row = conn.execute(
            "SELECT id FROM users WHERE nickname = ?", (nickname,)
        ).fetchone()
    if row is None or row[0] is None:
        return None
    return row[0]