# Area: Storage
"""
Storage - SQLite persistence for matches.

This package handles:
- Schema initialization
- Creating, loading, saving and deleting matches
"""

from .database import init_database, get_connection, BaseRepository
from .repo_matches import MatchRepository

__all__ = [
    "init_database",
    "get_connection",
    "BaseRepository",
    "MatchRepository",
]
