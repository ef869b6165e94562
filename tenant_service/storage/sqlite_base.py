# tenant_service/storage/sqlite_base.py
import sqlite3
import logging
from pathlib import Path

from .storage_interfaces import AbstractSessionProvider
from ..settings import settings

logger = logging.getLogger(__name__)


def init_sqlite_db(conn: sqlite3.Connection) -> None:
    """
    Initialize the SQLite database schema by creating the tenant tables.

    Uses IF NOT EXISTS to safely handle repeated initialization calls.
    """
    cursor = conn.cursor()

    cursor.execute('''
    CREATE TABLE IF NOT EXISTS tenant (
        tenant_id TEXT PRIMARY KEY,
        secret_key TEXT NOT NULL
    )
    ''')
    logger.debug("Ensured 'tenant' table exists.")

    # Applications are keyed under their tenant; no foreign key, the parent
    # tenant is checked by the store before every application statement.
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS application (
        tenant_id TEXT NOT NULL,
        application_id TEXT NOT NULL,
        name TEXT NOT NULL,
        PRIMARY KEY (tenant_id, application_id)
    )
    ''')
    logger.debug("Ensured 'application' table exists.")

    conn.commit()


class SQLiteSessionProvider(AbstractSessionProvider):
    """
    Opens one SQLite connection per store operation.

    The schema is created on the first connection made by this provider.
    """

    def __init__(self, db_path: str):
        if not db_path:
            raise ValueError("SQLite database path must be provided.")
        self.db_path = Path(db_path).resolve()
        self._schema_initialized = False

    def create_session(self) -> sqlite3.Connection:
        if not self._schema_initialized:
            # Ensure the database directory structure exists
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        # Enable column access by name instead of index
        conn.row_factory = sqlite3.Row
        if not self._schema_initialized:
            try:
                init_sqlite_db(conn)
            except sqlite3.Error:
                conn.close()
                raise
            self._schema_initialized = True
            logger.info(f"SQLite tenant schema initialized/verified at: {self.db_path}")
        return conn

    def close_session(self, session: sqlite3.Connection) -> None:
        session.close()


def get_sqlite_session_provider() -> SQLiteSessionProvider:
    """Build a SQLiteSessionProvider from application settings."""
    return SQLiteSessionProvider(settings.sqlite_db_path)
