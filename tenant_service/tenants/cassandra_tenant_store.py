# tenant_service/tenants/cassandra_tenant_store.py
import logging
from typing import Any, Dict, Optional
from uuid import UUID

from cassandra.cluster import Session

from .storage_interfaces import AbstractTenantStore
from .models import Tenant, Application
from .errors import TenantNotFoundError, ApplicationNotFoundError
from .identifiers import IdentifierLike, to_uuid, to_cassandra_uuid, from_cassandra_uuid
from ..storage.storage_interfaces import AbstractSessionProvider
from ..storage.cassandra_base import get_cassandra_session_provider
from ..utils.uuid_generator import AbstractUUIDGenerator, RandomUUIDGenerator

logger = logging.getLogger(__name__)

INSERT_TENANT_CQL = "INSERT INTO tenant (tenant_id, secret_key) VALUES (%s, %s)"
SELECT_TENANT_CQL = "SELECT secret_key FROM tenant WHERE tenant_id = %s"
DELETE_TENANT_CQL = "DELETE FROM tenant WHERE tenant_id = %s"

INSERT_APPLICATION_CQL = "INSERT INTO application (tenant_id, application_id, name) VALUES (%s, %s, %s)"
SELECT_APPLICATION_CQL = "SELECT name FROM application WHERE tenant_id = %s AND application_id = %s"
SELECT_ALL_APPLICATIONS_CQL = "SELECT application_id, name FROM application WHERE tenant_id = %s"
DELETE_APPLICATION_CQL = "DELETE FROM application WHERE tenant_id = %s AND application_id = %s"


class CassandraTenantStore(AbstractTenantStore):
    """
    Cassandra implementation of the tenant storage interface.

    Cassandra does not enforce referential integrity, so application rows are
    only touched after a point lookup has confirmed the parent tenant exists.
    Inserts are upserts in Cassandra; updates reuse the insert statements
    once the row is known to exist.
    """

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
        logger.info("CassandraTenantStore initialized.")

    async def teardown(self) -> None:
        self.session_provider.shutdown()
        logger.info("CassandraTenantStore teardown complete.")

    @staticmethod
    def _first_row(result: Any) -> Optional[Any]:
        return next(iter(result), None)

    @staticmethod
    def _matches_exactly_one(result: Any) -> bool:
        """Existence check: true iff the lookup returned exactly one row."""
        rows = iter(result)
        if next(rows, None) is None:
            return False
        return next(rows, None) is None

    def _tenant_exists(self, session: Session, tenant_id: UUID) -> bool:
        result = session.execute(SELECT_TENANT_CQL, (to_cassandra_uuid(tenant_id),))
        return self._matches_exactly_one(result)

    def _application_exists(self, session: Session, tenant_id: UUID, application_id: UUID) -> bool:
        result = session.execute(
            SELECT_APPLICATION_CQL,
            (to_cassandra_uuid(tenant_id), to_cassandra_uuid(application_id))
        )
        return self._matches_exactly_one(result)

    def _ensure_tenant_exists(self, session: Session, tenant_id: UUID) -> None:
        if not self._tenant_exists(session, tenant_id):
            raise TenantNotFoundError(tenant_id)

    def _ensure_application_exists(self, session: Session, tenant_id: UUID, application_id: UUID) -> None:
        if not self._application_exists(session, tenant_id, application_id):
            raise ApplicationNotFoundError(tenant_id, application_id)

    def _add_or_update_tenant(self, session: Session, tenant_id: UUID, tenant: Tenant) -> None:
        session.execute(INSERT_TENANT_CQL, (to_cassandra_uuid(tenant_id), tenant.secret_key))

    def _add_or_update_application(
        self,
        session: Session,
        tenant_id: UUID,
        application_id: UUID,
        application: Application
    ) -> None:
        session.execute(
            INSERT_APPLICATION_CQL,
            (to_cassandra_uuid(tenant_id), to_cassandra_uuid(application_id), application.name)
        )

    async def create_tenant(self, tenant: Tenant) -> UUID:
        tenant_id = self.uuid_generator.generate_random_uuid()
        with self.session_provider.session() as session:
            self._add_or_update_tenant(session, tenant_id, tenant)
        return tenant_id

    async def update_tenant(self, tenant_id: IdentifierLike, tenant: Tenant) -> None:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as session:
            self._ensure_tenant_exists(session, tenant_id)
            self._add_or_update_tenant(session, tenant_id, tenant)

    async def read_tenant(self, tenant_id: IdentifierLike) -> Tenant:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as session:
            row = self._first_row(session.execute(SELECT_TENANT_CQL, (to_cassandra_uuid(tenant_id),)))
        if row is None:
            raise TenantNotFoundError(tenant_id)
        return Tenant(secret_key=row.secret_key)

    async def delete_tenant(self, tenant_id: IdentifierLike) -> None:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as session:
            self._ensure_tenant_exists(session, tenant_id)
            session.execute(DELETE_TENANT_CQL, (to_cassandra_uuid(tenant_id),))

    async def create_application(self, tenant_id: IdentifierLike, application: Application) -> UUID:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as session:
            self._ensure_tenant_exists(session, tenant_id)
            application_id = self.uuid_generator.generate_random_uuid()
            self._add_or_update_application(session, tenant_id, application_id, application)
        return application_id

    async def update_application(
        self,
        tenant_id: IdentifierLike,
        application_id: IdentifierLike,
        application: Application
    ) -> None:
        tenant_id = to_uuid(tenant_id)
        application_id = to_uuid(application_id)
        with self.session_provider.session() as session:
            self._ensure_tenant_exists(session, tenant_id)
            self._ensure_application_exists(session, tenant_id, application_id)
            self._add_or_update_application(session, tenant_id, application_id, application)

    async def read_application(self, tenant_id: IdentifierLike, application_id: IdentifierLike) -> Application:
        tenant_id = to_uuid(tenant_id)
        application_id = to_uuid(application_id)
        with self.session_provider.session() as session:
            self._ensure_tenant_exists(session, tenant_id)
            row = self._first_row(session.execute(
                SELECT_APPLICATION_CQL,
                (to_cassandra_uuid(tenant_id), to_cassandra_uuid(application_id))
            ))
        if row is None:
            raise ApplicationNotFoundError(tenant_id, application_id)
        return Application(name=row.name)

    async def read_all_applications(self, tenant_id: IdentifierLike) -> Dict[UUID, Application]:
        tenant_id = to_uuid(tenant_id)
        with self.session_provider.session() as session:
            self._ensure_tenant_exists(session, tenant_id)
            rows = session.execute(SELECT_ALL_APPLICATIONS_CQL, (to_cassandra_uuid(tenant_id),))
            return {
                from_cassandra_uuid(row.application_id): Application(name=row.name)
                for row in rows
            }

    async def delete_application(self, tenant_id: IdentifierLike, application_id: IdentifierLike) -> None:
        tenant_id = to_uuid(tenant_id)
        application_id = to_uuid(application_id)
        with self.session_provider.session() as session:
            self._ensure_tenant_exists(session, tenant_id)
            self._ensure_application_exists(session, tenant_id, application_id)
            session.execute(
                DELETE_APPLICATION_CQL,
                (to_cassandra_uuid(tenant_id), to_cassandra_uuid(application_id))
            )


def get_cassandra_tenant_store() -> CassandraTenantStore:
    """Build a CassandraTenantStore wired to the configured cluster."""
    return CassandraTenantStore(
        session_provider=get_cassandra_session_provider(),
        uuid_generator=RandomUUIDGenerator()
    )
