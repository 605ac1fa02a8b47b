"""
Database connection handling.
Every caller gets its own SQLite connection; nothing is pooled or shared.
"""

import os
import logging
import sqlite3
from contextlib import contextmanager

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_PATH = "app.db"


def get_database_path() -> str:
    """Resolve the configured database path from the environment."""
    return os.environ.get("DATABASE_PATH", DEFAULT_DATABASE_PATH)


class ConnectionFactory:
    """Creates a fresh connection to the configured database on demand."""

    def __init__(self, connection_string: str):
        self.connection_string = connection_string

    def create_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.connection_string)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def connection(self):
        """
        Scoped connection: commits on success, rolls back on error,
        and is always closed before control returns to the caller.
        """
        conn = self.create_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


def get_connection_factory() -> ConnectionFactory:
    """FastAPI dependency providing a factory bound to the configured path."""
    return ConnectionFactory(get_database_path())


def get_db():
    """Scoped connection against the configured database."""
    return get_connection_factory().connection()
