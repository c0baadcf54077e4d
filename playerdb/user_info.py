"""Look up a player's profile and statistics from a session token."""

from __future__ import annotations

from dataclasses import dataclass

from playerdb.auth import UnknownUserError
from playerdb.database import Database, PlayerDBError
from playerdb.sessions import get_user_id_by_token


class InvalidTokenError(PlayerDBError):
    """The token does not belong to any stored session."""


@dataclass(frozen=True)
class UserInfo:
    """A player's id, nickname and win/loss record."""

    user_id: str
    nickname: str
    wins: int = 0
    losses: int = 0


def _require_user_id(db: Database, token: str) -> str:
    user_id = get_user_id_by_token(db, token)
    if user_id is None:
        raise InvalidTokenError("invalid session token")
    return user_id


def get_user_info_by_token(db: Database, token: str) -> UserInfo:
    """Return the profile of the player owning ``token``.

    Raises :class:`InvalidTokenError` for an unknown token and
    :class:`UnknownUserError` if the session points at no account.
    A player without a statistics row has zero wins and losses.
    """
    user_id = _require_user_id(db, token)
    with db.connect() as conn:
        row = conn.execute(
            "SELECT nickname FROM users WHERE id = ?", (user_id,)
        ).fetchone()
        if row is None:
            raise UnknownUserError(f"no nickname found for user_id {user_id!r}")
        nickname = row[0]
        stats = conn.execute(
            "SELECT wins, losses FROM game_stats WHERE user_id = ?", (user_id,)
        ).fetchone()
    wins, losses = (0, 0) if stats is None else (int(stats[0]), int(stats[1]))
    return UserInfo(user_id=user_id, nickname=nickname, wins=wins, losses=losses)


def get_nickname_by_token(db: Database, token: str) -> str:
    """Return the nickname of the player owning ``token``.

    Raises :class:`InvalidTokenError` for an unknown token and
    :class:`UnknownUserError` if the session points at no account.
    """
    user_id = _require_user_id(db, token)
    with db.connect() as conn:
        row = conn.execute(
            "SELECT nickname FROM users WHERE id = ?", (user_id,)
        ).fetchone()
    if row is None:
        raise UnknownUserError(f"no nickname found for user_id {user_id!r}")
    return row[0]