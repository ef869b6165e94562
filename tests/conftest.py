# tests/conftest.py
"""Shared fixtures: a fake Cassandra session and stores for both backends."""
from collections import namedtuple
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID, uuid4

import pytest

from tenant_service.storage.storage_interfaces import AbstractSessionProvider
from tenant_service.storage.sqlite_base import SQLiteSessionProvider
from tenant_service.tenants import cassandra_tenant_store as cql
from tenant_service.tenants.cassandra_tenant_store import CassandraTenantStore
from tenant_service.tenants.sqlite_tenant_store import SQLiteTenantStore
from tenant_service.utils.uuid_generator import AbstractUUIDGenerator

TenantRow = namedtuple("TenantRow", ["secret_key"])
ApplicationRow = namedtuple("ApplicationRow", ["name"])
ApplicationListRow = namedtuple("ApplicationListRow", ["application_id", "name"])


class RecordingUUIDGenerator(AbstractUUIDGenerator):
    """Generates random UUIDs and remembers them; can be told to fail."""

    def __init__(self):
        self.generated: List[UUID] = []
        self.error: Optional[Exception] = None

    def generate_random_uuid(self) -> UUID:
        if self.error is not None:
            raise self.error
        value = uuid4()
        self.generated.append(value)
        return value


class FakeCassandraSession:
    """
    Executes the tenant store's CQL statements against in-memory tables.

    Parameters must be bound as `uuid.UUID`, the driver's native type for
    `uuid` columns.
    """

    def __init__(self, tables: Dict[str, dict], failures: Dict[str, Exception]):
        self.tables = tables
        self.failures = failures
        self.executed: List[Tuple[str, tuple]] = []
        self.is_shutdown = False

    def execute(self, query: str, parameters: tuple = ()) -> List[Any]:
        assert not self.is_shutdown, "statement executed on a closed session"
        self.executed.append((query, parameters))
        if query in self.failures:
            raise self.failures[query]
        for value in parameters:
            if not isinstance(value, str):
                assert type(value) is UUID

        tenants = self.tables["tenant"]
        applications = self.tables["application"]

        if query == cql.INSERT_TENANT_CQL:
            tenant_id, secret_key = parameters
            tenants[tenant_id] = secret_key
            return []
        if query == cql.SELECT_TENANT_CQL:
            (tenant_id,) = parameters
            return [TenantRow(tenants[tenant_id])] if tenant_id in tenants else []
        if query == cql.DELETE_TENANT_CQL:
            tenants.pop(parameters[0], None)
            return []
        if query == cql.INSERT_APPLICATION_CQL:
            tenant_id, application_id, name = parameters
            applications[(tenant_id, application_id)] = name
            return []
        if query == cql.SELECT_APPLICATION_CQL:
            key = tuple(parameters)
            return [ApplicationRow(applications[key])] if key in applications else []
        if query == cql.SELECT_ALL_APPLICATIONS_CQL:
            (tenant_id,) = parameters
            return [
                ApplicationListRow(application_id, name)
                for (owner_id, application_id), name in applications.items()
                if owner_id == tenant_id
            ]
        if query == cql.DELETE_APPLICATION_CQL:
            applications.pop(tuple(parameters), None)
            return []
        raise AssertionError(f"Unexpected statement: {query}")

    def shutdown(self) -> None:
        self.is_shutdown = True


class FakeCassandraSessionProvider(AbstractSessionProvider):
    """Hands out FakeCassandraSessions that share one set of tables."""

    def __init__(self):
        self.tables: Dict[str, dict] = {"tenant": {}, "application": {}}
        self.failures: Dict[str, Exception] = {}
        self.connect_error: Optional[Exception] = None
        self.sessions: List[FakeCassandraSession] = []
        self.shutdown_called = False

    def create_session(self) -> FakeCassandraSession:
        if self.connect_error is not None:
            raise self.connect_error
        session = FakeCassandraSession(self.tables, self.failures)
        self.sessions.append(session)
        return session

    def close_session(self, session: FakeCassandraSession) -> None:
        session.shutdown()

    def shutdown(self) -> None:
        self.shutdown_called = True

    @property
    def executed(self) -> List[Tuple[str, tuple]]:
        return [statement for session in self.sessions for statement in session.executed]

    @property
    def open_sessions(self) -> List[FakeCassandraSession]:
        return [session for session in self.sessions if not session.is_shutdown]


@pytest.fixture
def uuid_generator() -> RecordingUUIDGenerator:
    return RecordingUUIDGenerator()


@pytest.fixture
def cassandra_provider() -> FakeCassandraSessionProvider:
    return FakeCassandraSessionProvider()


@pytest.fixture
def cassandra_store(cassandra_provider, uuid_generator) -> CassandraTenantStore:
    return CassandraTenantStore(session_provider=cassandra_provider, uuid_generator=uuid_generator)


@pytest.fixture
def sqlite_provider(tmp_path) -> SQLiteSessionProvider:
    return SQLiteSessionProvider(str(tmp_path / "tenants.sqlite3"))


@pytest.fixture
def sqlite_store(sqlite_provider, uuid_generator) -> SQLiteTenantStore:
    return SQLiteTenantStore(session_provider=sqlite_provider, uuid_generator=uuid_generator)


@pytest.fixture(params=["cassandra", "sqlite"])
def tenant_store(request):
    """Every tenant store implementation, for behavior both must share."""
    return request.getfixturevalue(f"{request.param}_store")
