# tenant_service/tenants/sqlite_tenant_store.py
import sqlite3
import logging
from typing import Dict, List, Optional
from uuid import UUID

from .storage_interfaces import AbstractTenantStore
from .models import Tenant, Application
from .errors import TenantNotFoundError, ApplicationNotFoundError
from .identifiers import IdentifierLike, to_uuid, to_sqlite_text, from_sqlite_text
from ..storage.storage_interfaces import AbstractSessionProvider
from ..storage.sqlite_base import get_sqlite_session_provider
from ..utils.uuid_generator import AbstractUUIDGenerator, RandomUUIDGenerator

logger = logging.getLogger(__name__)


class SQLiteTenantStore(AbstractTenantStore):
    """SQLite implementation of the tenant storage interface."""

    def __init__(
        self,
        session_provider: AbstractSessionProvider,
        uuid_generator: AbstractUUIDGenerator
    ):
        if session_provider is None:
            raise ValueError("session_provider must be provided.")
        if uuid_generator is None:
            raise ValueError("uuid_generator must be provided.")
        self.session_provider = session_provider
        self.uuid_generator = uuid_generator

    async def initialize(self) -> None:
        """Open and close one session so the schema exists before the first request."""
        with self.session_provider.session():
            pass
        logger.info("SQLiteTenantStore initialized.")

    async def teardown(self) -> None:
        self.session_provider.shutdown()
        logger.info("SQLiteTenantStore teardown complete.")

    def _execute_query(
        self,
        conn: sqlite3.Connection,
        query: str,
        params: tuple = (),
        commit: bool = True
    ) -> sqlite3.Cursor:
        """
        Execute a SQL query on the session's connection.

        Rolls back on failure when a commit was requested; the sqlite3 error
        is re-raised unchanged.
        """
        cursor = conn.cursor()
        try:
            cursor.execute(query, params)
            if commit:
                conn.commit()
        except sqlite3.Error:
            if commit:
                conn.rollback()
            raise
        return cursor

    def _fetchall(self, conn: sqlite3.Connection, query: str, params: tuple = ()) -> List[sqlite3.Row]:
        return self._execute_query(conn, query, params, commit=False).fetchall()

    def _fetch_single(self, conn: sqlite3.Connection, query: str, params: tuple = ()) -> Optional[sqlite3.Row]:
        """Return the row of a point lookup, or None unless exactly one row matched."""
        rows = self._fetchall(conn, query, params)
        return rows[0] if len(rows) == 1 else None

    def _get_tenant_row(self, conn: sqlite3.Connection, tenant_id: UUID) -> Optional[sqlite3.Row]:
        return self._fetch_single(
            conn,
            "SELECT secret_key FROM tenant WHERE tenant_id = ?",
            (to_sqlite_text(tenant_id),)
        )

    def _get_application_row(
        self,
        conn: sqlite3.Connection,
        tenant_id: UUID,
        application_id: UUID
    ) -> Optional[sqlite3.Row]:
        return self._fetch_single(
            conn,
            "SELECT name FROM application WHERE tenant_id = ? AND application_id = ?",
            (to_sqlite_text(tenant_id), to_sqlite_text(application_id))
        )

    def _ensure_tenant_exists(self, conn: sqlite3.Connection, tenant_id: UUID) -> None:
        if self._get_tenant_row(conn, tenant_id) is None:
            raise TenantNotFoundError(tenant_id)

    def _ensure_application_exists(self, conn: sqlite3.Connection, tenant_id: UUID, application_id: UUID) -> None:
        if self._get_application_row(conn, tenant_id, application_id) is None:
            raise ApplicationNotFoundError(tenant_id, application_id)

    def _add_or_update_tenant(self, conn: sqlite3.Connection, tenant_id: UUID, tenant: Tenant) -> None:
        # INSERT OR REPLACE gives the same upsert semantics as a Cassandra INSERT
        self._execute_query(
            conn,
            "INSERT OR REPLACE INTO tenant (tenant_id, secret_key) VALUES (?, ?)",
            (to_sqlite_text(tenant_id), tenant.secret_key)
        )

    def _add_or_update_application(
        self,
        conn: sqlite3.Connection,
        tenant_id: UUID,
        application_id: UUID,
        application: Application
    ) -> None:
        self._execute_query(
            conn,
            "INSERT OR REPLACE INTO application (tenant_id, application_id, name) VALUES (?, ?, ?)",
            (to_sqlite_text(tenant_id), to_sqlite_text(application_id), application.name)
        )

    async def create_tenant(self, tenant: Tenant) -> UUID:
        tenant_id = self.uuid_generator.generate_random_uuid()
        with self.session_provider.session() as conn:
            self._add_or_update_tenant(conn, tenant_id, tenant)
        return tenant_id

    async def update_tenant(self, tenant_id: IdentifierLike, tenant: Tenant) -> None:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as conn:
            self._ensure_tenant_exists(conn, tenant_id)
            self._add_or_update_tenant(conn, tenant_id, tenant)

    async def read_tenant(self, tenant_id: IdentifierLike) -> Tenant:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as conn:
            row = self._get_tenant_row(conn, tenant_id)
        if row is None:
            raise TenantNotFoundError(tenant_id)
        return Tenant(secret_key=row["secret_key"])

    async def delete_tenant(self, tenant_id: IdentifierLike) -> None:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as conn:
            self._ensure_tenant_exists(conn, tenant_id)
            self._execute_query(conn, "DELETE FROM tenant WHERE tenant_id = ?", (to_sqlite_text(tenant_id),))

    async def create_application(self, tenant_id: IdentifierLike, application: Application) -> UUID:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as conn:
            self._ensure_tenant_exists(conn, tenant_id)
            application_id = self.uuid_generator.generate_random_uuid()
            self._add_or_update_application(conn, tenant_id, application_id, application)
        return application_id

    async def update_application(
        self,
        tenant_id: IdentifierLike,
        application_id: IdentifierLike,
        application: Application
    ) -> None:
        tenant_id = to_uuid(tenant_id)
        application_id = to_uuid(application_id)
        with self.session_provider.session() as conn:
            self._ensure_tenant_exists(conn, tenant_id)
            self._ensure_application_exists(conn, tenant_id, application_id)
            self._add_or_update_application(conn, tenant_id, application_id, application)

    async def read_application(self, tenant_id: IdentifierLike, application_id: IdentifierLike) -> Application:
        tenant_id = to_uuid(tenant_id)
        application_id = to_uuid(application_id)
        with self.session_provider.session() as conn:
            self._ensure_tenant_exists(conn, tenant_id)
            row = self._get_application_row(conn, tenant_id, application_id)
        if row is None:
            raise ApplicationNotFoundError(tenant_id, application_id)
        return Application(name=row["name"])

    async def read_all_applications(self, tenant_id: IdentifierLike) -> Dict[UUID, Application]:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as conn:
            self._ensure_tenant_exists(conn, tenant_id)
            rows = self._fetchall(
                conn,
                "SELECT application_id, name FROM application WHERE tenant_id = ?",
                (to_sqlite_text(tenant_id),)
            )
        return {
            from_sqlite_text(row["application_id"]): Application(name=row["name"])
            for row in rows
        }

    async def delete_application(self, tenant_id: IdentifierLike, application_id: IdentifierLike) -> None:
        tenant_id = to_uuid(tenant_id)
        application_id = to_uuid(application_id)
        with self.session_provider.session() as conn:
            self._ensure_tenant_exists(conn, tenant_id)
            self._ensure_application_exists(conn, tenant_id, application_id)
            self._execute_query(
                conn,
                "DELETE FROM application WHERE tenant_id = ? AND application_id = ?",
                (to_sqlite_text(tenant_id), to_sqlite_text(application_id))
            )


def get_sqlite_tenant_store() -> SQLiteTenantStore:
    """Build a SQLiteTenantStore backed by the configured database file."""
    return SQLiteTenantStore(
        session_provider=get_sqlite_session_provider(),
        uuid_generator=RandomUUIDGenerator()
    )
