# tenant_service/tenants/storage.py
import logging
from typing import Optional

from ..settings import settings
from .storage_interfaces import AbstractTenantStore
from .cassandra_tenant_store import get_cassandra_tenant_store
from .sqlite_tenant_store import get_sqlite_tenant_store

logger = logging.getLogger(__name__)

_tenant_store_instance: Optional[AbstractTenantStore] = None


async def get_tenant_store() -> AbstractTenantStore:
    """
    Factory function to get the configured tenant store instance.

    Returns a singleton instance based on the storage_backend setting.
    """
    global _tenant_store_instance

    if _tenant_store_instance is None:
        if settings.storage_backend == "cassandra":
            logger.info("Using CassandraTenantStore for tenants and applications.")
            store: AbstractTenantStore = get_cassandra_tenant_store()
        elif settings.storage_backend == "sqlite":
            logger.info("Using SQLiteTenantStore for tenants and applications.")
            store = get_sqlite_tenant_store()
        else:
            raise ValueError(f"Unsupported storage_backend for tenants: {settings.storage_backend}")
        await store.initialize()
        _tenant_store_instance = store

    return _tenant_store_instance


async def close_tenant_store() -> None:
    """Tear down the singleton tenant store, if one was created."""
    global _tenant_store_instance

    if _tenant_store_instance is not None:
        await _tenant_store_instance.teardown()
        _tenant_store_instance = None
