"""SQLite-backed player accounts, sessions, reports and game statistics."""

__version__ = "0.1.0"
__all__ = ["database", "sessions", "auth", "user_info", "reports", "game_results"]