# tenant_service/storage/__init__.py

"""Storage module initialization.

Session providers for the supported tenant storage backends: Cassandra for
deployments and SQLite for local development.
"""

from .storage_interfaces import AbstractSessionProvider
from .cassandra_base import CassandraSessionProvider, get_cassandra_session_provider
from .sqlite_base import SQLiteSessionProvider, get_sqlite_session_provider, init_sqlite_db

__all__ = [
    "AbstractSessionProvider",
    "CassandraSessionProvider",
    "get_cassandra_session_provider",
    "SQLiteSessionProvider",
    "get_sqlite_session_provider",
    "init_sqlite_db",
]
