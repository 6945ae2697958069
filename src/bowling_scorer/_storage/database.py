# Area: Storage
"""
bowling_scorer._storage.database — Database Initialization
==========================================================

Handles SQLite database initialization and connection management
for match persistence.
"""

import sqlite3
import logging
from pathlib import Path

from ..errors import StorageError

logger = logging.getLogger("bowling_scorer.storage")

# Path to schema file
SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def get_connection(db_path: str = "bowling.db") -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with row factory set

    Raises:
        StorageError: If the database cannot be opened
    """
    try:
        conn = sqlite3.connect(db_path)
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as e:
        raise StorageError("connect", e) from e
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str = "bowling.db") -> None:
    """
    Initialize the database with schema.

    Args:
        db_path: Path to the SQLite database file

    Raises:
        StorageError: If the schema cannot be applied
    """
    conn = get_connection(db_path)
    try:
        with open(SCHEMA_PATH, "r") as f:
            schema = f.read()
        conn.executescript(schema)
        conn.commit()
        logger.info(f"Database initialized at {db_path}")
    except sqlite3.Error as e:
        raise StorageError("init_database", e) from e
    finally:
        conn.close()


class BaseRepository:
    """
    Base class for database repositories.

    Provides common database operations and connection management.
    """

    def __init__(self, db_path: str = "bowling.db"):
        """
        Initialize repository.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        """Get a database connection."""
        return get_connection(self.db_path)

    def _fetch(self, query: str, params: tuple = ()) -> list:
        """Run a query and return all rows as dicts."""
        conn = self._get_conn()
        try:
            cursor = conn.execute(query, params)
            return [dict(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise StorageError("query", e) from e
        finally:
            conn.close()

    def _fetch_one(self, query: str, params: tuple = ()):
        """Run a query and return the first row, or None."""
        results = self._fetch(query, params)
        return results[0] if results else None

    def _transaction(self, operation: str, statements: list) -> None:
        """
        Execute (query, params) pairs atomically.

        Args:
            operation: Name used in error reports
            statements: List of (query, params) tuples

        Raises:
            StorageError: If any statement fails (nothing is committed)
        """
        conn = self._get_conn()
        try:
            with conn:
                for query, params in statements:
                    conn.execute(query, params)
        except sqlite3.Error as e:
            logger.error(f"Storage failure during {operation}: {e}")
            raise StorageError(operation, e) from e
        finally:
            conn.close()
