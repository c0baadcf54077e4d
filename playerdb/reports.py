"""Reporting and suspension of player accounts."""

from __future__ import annotations

from playerdb.auth import UnknownUserError
from playerdb.database import Database

SUSPEND_THRESHOLD = 3


def report_user(db: Database, user_id: str) -> int:
    """Record a report against ``user_id`` and return the new report count.

    The account is suspended once it has been reported
    ``SUSPEND_THRESHOLD`` times. Raises :class:`UnknownUserError` if no
    such account exists.
    """
    with db.connect() as conn:
        conn.execute(
            "UPDATE users SET report_count = report_count + 1 WHERE id = ?",
            (user_id,),
        )
        row = conn.execute(
            "SELECT report_count FROM users WHERE id = ?", (user_id,)
        ).fetchone()
        if row is None:
            raise UnknownUserError(f"no account {user_id!r}")
        report_count = int(row[0])
        if report_count >= SUSPEND_THRESHOLD:
            conn.execute(
                "UPDATE users SET is_suspended = 1 WHERE id = ?", (user_id,)
            )
    return report_count


def suspend_user(db: Database, user_id: str) -> None:
    """Suspend ``user_id`` outright; unknown ids are ignored."""
    with db.connect() as conn:
        conn.execute("UPDATE users SET is_suspended = 1 WHERE id = ?", (user_id,))


def is_account_suspended(db: Database, user_id: str) -> bool:
    """Return whether ``user_id`` is suspended; unknown ids are not."""
    with db.connect() as conn:
        row = conn.execute(
            "SELECT is_suspended FROM users WHERE id = ?", (user_id,)
        ).fetchone()
    return bool(row is not None and row[0])


def get_report_count(db: Database, user_id: str) -> int:
    """Return how often ``user_id`` was reported; 0 for unknown ids."""
    with db.connect() as conn:
        row = conn.execute(
            "SELECT report_count FROM users WHERE id = ?", (user_id,)
        ).fetchone()
    return 0 if row is None or row[0] is None else int(row[0])