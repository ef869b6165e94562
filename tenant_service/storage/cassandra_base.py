# tenant_service/storage/cassandra_base.py
import logging
from typing import List, Optional

from cassandra.auth import PlainTextAuthProvider
from cassandra.cluster import Cluster, Session

from .storage_interfaces import AbstractSessionProvider
from ..settings import settings

logger = logging.getLogger(__name__)


class CassandraSessionProvider(AbstractSessionProvider):
    """
    Opens Cassandra sessions bound to the tenant service keyspace.

    The cluster object is created lazily and shared; every call to
    create_session connects a new session that is shut down by close_session.
    """

    def __init__(
        self,
        contact_points: List[str],
        keyspace: str,
        port: int = 9042,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ):
        if not contact_points:
            raise ValueError("At least one Cassandra contact point must be provided.")
        if not keyspace:
            raise ValueError("Cassandra keyspace must be provided.")

        self.contact_points = list(contact_points)
        self.keyspace = keyspace
        self.port = port
        self.username = username
        self.password = password
        self._cluster: Optional[Cluster] = None

    def _get_cluster(self) -> Cluster:
        if self._cluster is None:
            auth_provider = None
            if self.username:
                auth_provider = PlainTextAuthProvider(username=self.username, password=self.password)
            logger.info(
                f"Creating Cassandra cluster for contact points {self.contact_points} "
                f"(port {self.port}, keyspace '{self.keyspace}')."
            )
            self._cluster = Cluster(
                contact_points=self.contact_points,
                port=self.port,
                auth_provider=auth_provider,
            )
        return self._cluster

    def create_session(self) -> Session:
        return self._get_cluster().connect(self.keyspace)

    def close_session(self, session: Session) -> None:
        session.shutdown()

    def shutdown(self) -> None:
        if self._cluster is not None:
            logger.info("Shutting down Cassandra cluster.")
            self._cluster.shutdown()
            self._cluster = None


def get_cassandra_session_provider() -> CassandraSessionProvider:
    """Build a CassandraSessionProvider from application settings."""
    return CassandraSessionProvider(
        contact_points=settings.cassandra_contact_points,
        keyspace=settings.cassandra_keyspace,
        port=settings.cassandra_port,
        username=settings.cassandra_username,
        password=settings.cassandra_password,
    )
