import string

import pytest

from playerdb.auth import (
    AccountSuspendedError,
    DuplicateNicknameError,
    DuplicateUserError,
    UnknownUserError,
    WrongPasswordError,
    change_nickname,
    change_password,
    generate_salt,
    generate_token,
    hash_password_with_salt,
    is_id_taken,
    is_nickname_taken,
    login_user,
    signup_user,
    withdraw_user,
)
from playerdb.database import Database, PlayerDBError

ALNUM = set(string.ascii_letters + string.digits)


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "user.db")
    database.init_schema()
    return database


@pytest.fixture
def alice(db):
    password = "password"
    signup_user(db, "alice", password, "Alice")
    return db


def _row(db, sql, params):
    with db.connect() as conn:
        return conn.execute(sql, params).fetchone()


def test_generate_salt_default_length_and_alphabet():
    salt = generate_salt()
    assert len(salt) == 15
    assert set(salt) <= ALNUM


def test_generate_salt_custom_length():
    assert len(generate_salt(40)) == 40
    assert generate_salt(0) == ""


def test_generate_token_default_length_and_alphabet():
    token = generate_token()
    assert len(token) == 31
    assert set(token) <= ALNUM


def test_generate_negative_length_rejected():
    with pytest.raises(ValueError):
        generate_token(-1)


def test_hash_is_deterministic_hex():
    digest = hash_password_with_salt("password", "abc")
    assert digest == hash_password_with_salt("password", "abc")
    assert len(digest) == 64
    assert set(digest) <= set("0123456789abcdef")


def test_hash_depends_on_salt():
    assert hash_password_with_salt("password", "a") != hash_password_with_salt(
        "password", "b"
    )


def test_hash_input_truncated_to_255_bytes():
    long_text = "x" * 300
    assert hash_password_with_salt(long_text, "saltA") == hash_password_with_salt(
        long_text, "saltB"
    )


def test_signup_stores_hashed_password_and_stats(alice):
    pw, salt, nickname, reports, suspended = _row(
        alice,
        "SELECT pw, salt, nickname, report_count, is_suspended FROM users WHERE id = ?",
        ("alice",),
    )
    assert pw == hash_password_with_salt("password", salt)
    assert len(salt) == 15
    assert (nickname, reports, suspended) == ("Alice", 0, 0)
    stats = _row(alice, "SELECT wins, losses FROM game_stats WHERE user_id = ?", ("alice",))
    assert stats == (0, 0)


def test_taken_checks(alice):
    assert is_id_taken(alice, "alice") is True
    assert is_id_taken(alice, "bob") is False
    assert is_nickname_taken(alice, "Alice") is True
    assert is_nickname_taken(alice, "Bob") is False


def test_signup_duplicate_id(alice):
    password = "password"
    with pytest.raises(DuplicateUserError):
        signup_user(alice, "alice", password, "Other")


def test_signup_duplicate_nickname(alice):
    password = "password"
    with pytest.raises(DuplicateUserError):
        signup_user(alice, "bob", password, "Alice")
    assert is_id_taken(alice, "bob") is False


def test_duplicate_error_is_playerdb_error(alice):
    password = "password"
    with pytest.raises(PlayerDBError):
        signup_user(alice, "alice", password, "Alice")


def test_login_success_and_failures(alice):
    login_user(alice, "alice", "password")
    with pytest.raises(WrongPasswordError):
        login_user(alice, "alice", "secret")
    with pytest.raises(UnknownUserError):
        login_user(alice, "nobody", "password")


def test_login_suspended(alice):
    with alice.connect() as conn:
        conn.execute("UPDATE users SET is_suspended = 1 WHERE id = ?", ("alice",))
    with pytest.raises(AccountSuspendedError):
        login_user(alice, "alice", "password")


def test_change_password(alice):
    salt_before = _row(alice, "SELECT salt FROM users WHERE id = ?", ("alice",))[0]
    change_password(alice, "alice", "secret")
    login_user(alice, "alice", "secret")
    with pytest.raises(WrongPasswordError):
        login_user(alice, "alice", "password")
    salt_after = _row(alice, "SELECT salt FROM users WHERE id = ?", ("alice",))[0]
    assert salt_after == salt_before


def test_change_password_unknown_user(db):
    with pytest.raises(UnknownUserError):
        change_password(db, "nobody", "secret")


def test_withdraw_user(alice):
    withdraw_user(alice, "alice")
    assert is_id_taken(alice, "alice") is False
    with pytest.raises(UnknownUserError):
        login_user(alice, "alice", "password")


def test_withdraw_unknown_is_ignored(alice):
    withdraw_user(alice, "nobody")
    assert is_id_taken(alice, "alice") is True


def test_change_nickname(alice):
    change_nickname(alice, "alice", "Alicia")
    assert is_nickname_taken(alice, "Alicia") is True
    assert is_nickname_taken(alice, "Alice") is False


def test_change_nickname_duplicate(alice):
    password = "password"
    signup_user(alice, "bob", password, "Bob")
    with pytest.raises(DuplicateNicknameError):
        change_nickname(alice, "alice", "Bob")
    nickname = _row(alice, "SELECT nickname FROM users WHERE id = ?", ("alice",))[0]
    assert nickname == "Alice"


def test_change_nickname_to_own_is_duplicate(alice):
    with pytest.raises(DuplicateNicknameError):
        change_nickname(alice, "alice", "Alice")