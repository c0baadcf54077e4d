"""Account sign-up, login and profile changes."""

from __future__ import annotations

import hashlib
import hmac
import secrets

from playerdb.database import Database, PlayerDBError

SALT_LENGTH = 15
TOKEN_LENGTH = 31
_MAX_SALTED_BYTES = 255

_SALT_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_TOKEN_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class DuplicateUserError(PlayerDBError):
    """The id or nickname chosen at sign-up is already taken."""


class UnknownUserError(PlayerDBError):
    """No account exists with the given id."""


class WrongPasswordError(PlayerDBError):
    """The password does not match the stored one."""


class AccountSuspendedError(PlayerDBError):
    """The account has been suspended and may not log in."""


class DuplicateNicknameError(PlayerDBError):
    """The requested nickname already belongs to an account."""


def _random_string(alphabet: str, length: int) -> str:
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_salt(length: int = SALT_LENGTH) -> str:
    """Return a random alphanumeric salt of ``length`` characters."""
    return _random_string(_SALT_ALPHABET, length)


def hash_password_with_salt(password: str, salt: str) -> str:
    """Return the hex SHA-256 digest of the password followed by the salt.

    The salted input is limited to its first 255 bytes.
    """
    salted = (password + salt).encode("utf-8")[:_MAX_SALTED_BYTES]
    return hashlib.sha256(salted).hexdigest()


def generate_token(length: int = TOKEN_LENGTH) -> str:
    """Return a random alphanumeric session token of ``length`` characters."""
    return _random_string(_TOKEN_ALPHABET, length)


def is_id_taken(db: Database, user_id: str) -> bool:
    """Return whether an account with ``user_id`` exists."""
    with db.connect() as conn:
        row = conn.execute("SELECT id FROM users WHERE id = ?", (user_id,)).fetchone()
    return row is not None


def is_nickname_taken(db: Database, nickname: str) -> bool:
    """Return whether an account uses ``nickname``."""
    with db.connect() as conn:
        row = conn.execute(
            "SELECT nickname FROM users WHERE nickname = ?", (nickname,)
        ).fetchone()
    return row is not None


def signup_user(db: Database, user_id: str, password: str, nickname: str) -> None:
    """Create an account with empty game statistics.

    Raises :class:`DuplicateUserError` if the id or nickname is taken.
    """
    with db.connect() as conn:
        row = conn.execute(
            "SELECT id FROM users WHERE id = ? OR nickname = ?", (user_id, nickname)
        ).fetchone()
        if row is not None:
            raise DuplicateUserError(
                f"id {user_id!r} or nickname {nickname!r} already taken"
            )
        salt = generate_salt()
        hashed = hash_password_with_salt(password, salt)
        conn.execute(
            "INSERT INTO users(id, pw, salt, nickname, report_count, is_suspended) "
            "VALUES (?, ?, ?, ?, 0, 0)",
            (user_id, hashed, salt, nickname),
        )
        conn.execute(
            "INSERT OR IGNORE INTO game_stats (user_id, wins, losses) VALUES (?, 0, 0)",
            (user_id,),
        )


def login_user(db: Database, user_id: str, password: str) -> None:
    """Check the credentials of ``user_id``.

    Raises :class:`UnknownUserError`, :class:`AccountSuspendedError` or
    :class:`WrongPasswordError` when the login is refused.
    """
    with db.connect() as conn:
        row = conn.execute(
            "SELECT pw, salt, is_suspended FROM users WHERE id = ?", (user_id,)
        ).fetchone()
    if row is None:
        raise UnknownUserError(f"no account {user_id!r}")
    stored, salt, suspended = row
    if suspended:
        raise AccountSuspendedError(f"account {user_id!r} is suspended")
    hashed = hash_password_with_salt(password, salt)
    if not hmac.compare_digest(str(stored), hashed):
        raise WrongPasswordError(f"wrong password for {user_id!r}")


def change_password(db: Database, user_id: str, new_password: str) -> None:
    """Store a new password for ``user_id``, keeping its salt.

    Raises :class:`UnknownUserError` if the account does not exist.
    """
    with db.connect() as conn:
        row = conn.execute(
            "SELECT salt FROM users WHERE id = ?", (user_id,)
        ).fetchone()
        if row is None:
            raise UnknownUserError(f"no account {user_id!r}")
        hashed = hash_password_with_salt(new_password, row[0])
        conn.execute("UPDATE users SET pw = ? WHERE id = ?", (hashed, user_id))


def withdraw_user(db: Database, user_id: str) -> None:
    """Delete the account ``user_id``; unknown ids are ignored."""
    with db.connect() as conn:
        conn.execute("DELETE FROM users WHERE id = ?", (user_id,))


def change_nickname(db: Database, user_id: str, new_nickname: str) -> None:
    """Give ``user_id`` a new nickname.

    Raises :class:`DuplicateNicknameError` if any account already uses it.
    """
    with db.connect() as conn:
        row = conn.execute(
            "SELECT id FROM users WHERE nickname = ?", (new_nickname,)
        ).fetchone()
        if row is not None:
            raise DuplicateNicknameError(f"nickname {new_nickname!r} already taken")
        conn.execute(
            "UPDATE users SET nickname = ? WHERE id = ?", (new_nickname, user_id)
        )