"""Recording wins and losses in the ``game_stats`` table."""

from __future__ import annotations

from enum import Enum
from typing import Union

from playerdb.database import Database, PlayerDBError
from playerdb.sessions import get_user_id_by_nickname


class GameResult(str, Enum):
    """The outcome of a game for one player."""

    WIN = "WIN"
    LOSS = "LOSS"


class UnknownNicknameError(PlayerDBError):
    """No account uses the given nickname."""


_UPSERT = {
    GameResult.WIN: (
        "INSERT INTO game_stats(user_id, wins, losses) VALUES(?, 1, 0) "
        "ON CONFLICT(user_id) DO UPDATE SET wins = wins + 1"
    ),
    GameResult.LOSS: (
        "INSERT INTO game_stats(user_id, wins, losses) VALUES(?, 0, 1) "
        "ON CONFLICT(user_id) DO UPDATE SET losses = losses + 1"
    ),
}


def save_game_result_by_nickname(
    db: Database, nickname: str, result: Union[GameResult, str]
) -> None:
    """Add a win or a loss to the record of the player called ``nickname``.

    Raises :class:`UnknownNicknameError` if no account uses the nickname
    and ``ValueError`` if ``result`` is neither ``"WIN"`` nor ``"LOSS"``.
    """
    user_id = get_user_id_by_nickname(db, nickname)
    if user_id is None:
        raise UnknownNicknameError(f"no account with nickname {nickname!r}")
    try:
        outcome = GameResult(result)
    except ValueError:
        raise ValueError(f"invalid game result {result!r}") from None
    with db.connect() as conn:
        conn.execute(_UPSERT[outcome], (user_id,))