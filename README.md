# playerdb

Player account storage for game servers, kept in a single SQLite file.
It covers:

- sign-up with salted SHA-256 password hashes, login, password and nickname changes, and account removal
- session tokens: issuing, checking and revoking them, and finding the user behind a token
- user reports, with automatic suspension once an account has three reports
- win and loss counts recorded by nickname

## Installation

```
pip install .
```

The package uses only the standard library.

## Usage

```python
from playerdb.database import Database
from playerdb import auth, sessions, user_info, reports, game_results

db = Database("players.db")
db.init_schema()

password = "password"
auth.signup_user(db, "alice", password, "Alice")
auth.login_user(db, "alice", password)

sessions.add_token_after_removal(db, "alice", "token")
print(sessions.is_valid_token(db, "token"))

info = user_info.get_user_info_by_token(db, "token")
print(info.user_id, info.nickname, info.wins, info.losses)

game_results.save_game_result_by_nickname(db, "Alice", game_results.GameResult.WIN)

count = reports.report_user(db, "alice")
print(count, reports.is_account_suspended(db, "alice"))
```

`Database()` without an argument uses the file `../db/user.db`, relative
to the working directory. Every operation opens its own connection
through `Database.connect()`, a context manager that commits on success
and rolls back on any error.

`auth.generate_token()` returns a random 31-character alphanumeric
string suitable as a session token, and `auth.generate_salt()` a random
15-character salt. `sessions.add_token_after_removal` replaces all of a
user's tokens with the new one; `sessions.add_token` adds one more.
`sessions.get_user_id_by_token` and `sessions.get_user_id_by_nickname`
return `None` when nothing matches.

`game_results.save_game_result_by_nickname` accepts a `GameResult` or
the strings `"WIN"` and `"LOSS"`; anything else raises `ValueError`.

## Errors

When an operation fails, it raises an exception and does not return a
status code:

- `auth.DuplicateUserError`: sign-up with an id or nickname that is already taken
- `auth.UnknownUserError`: the account does not exist
- `auth.WrongPasswordError`: the password does not match
- `auth.AccountSuspendedError`: login to a suspended account
- `auth.DuplicateNicknameError`: a nickname change to a name that is already in use
- `user_info.InvalidTokenError`: the token is not a current session
- `game_results.UnknownNicknameError`: no user has that nickname
- `database.PlayerDBError`: any other database failure; all of the above derive from it

## What it does not do

This is a storage library only. It has no network server, no client
protocol and no command-line program; a game server calls its functions
directly. Session tokens never expire on their own: they stay valid
until removed.

## Running the tests

```
pip install .[test]
pytest
```