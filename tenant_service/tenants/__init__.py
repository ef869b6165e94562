# tenant_service/tenants/__init__.py
"""
Tenant management module initialization.

Provides the tenant and application data models, the storage abstraction with
its Cassandra and SQLite implementations, the business service and the admin
API endpoints.
"""

from .models import Tenant, Application, TenantCreated, ApplicationCreated
from .errors import (
    TenantServiceError,
    NotFoundError,
    TenantNotFoundError,
    ApplicationNotFoundError,
    InvalidIdentifierError,
)
from .storage_interfaces import AbstractTenantStore
from .cassandra_tenant_store import CassandraTenantStore, get_cassandra_tenant_store
from .sqlite_tenant_store import SQLiteTenantStore, get_sqlite_tenant_store
from .storage import get_tenant_store, close_tenant_store
from .service import TenantService
from .endpoints import tenants_admin_router

__all__ = [
    # Data models
    "Tenant",
    "Application",
    "TenantCreated",
    "ApplicationCreated",
    # Errors
    "TenantServiceError",
    "NotFoundError",
    "TenantNotFoundError",
    "ApplicationNotFoundError",
    "InvalidIdentifierError",
    # Storage layer abstractions and implementations
    "AbstractTenantStore",
    "CassandraTenantStore",
    "get_cassandra_tenant_store",
    "SQLiteTenantStore",
    "get_sqlite_tenant_store",
    "get_tenant_store",
    "close_tenant_store",
    # Business logic service
    "TenantService",
    # API endpoints
    "tenants_admin_router",
]
