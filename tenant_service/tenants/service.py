# tenant_service/tenants/service.py
import logging
from typing import Dict
from uuid import UUID

from .models import Tenant, Application
from .errors import NotFoundError
from .identifiers import IdentifierLike
from .storage_interfaces import AbstractTenantStore

logger = logging.getLogger(__name__)


class TenantService:
    """
    Service layer for tenant and application management.

    Callers depend on this class rather than on a concrete store. Store
    errors are logged here and re-raised unchanged.
    """

    def __init__(self, tenant_store: AbstractTenantStore):
        """Initialize the service with a tenant storage implementation."""
        if tenant_store is None:
            raise ValueError("tenant_store must be provided.")
        self.tenant_store = tenant_store

    async def create_tenant(self, tenant: Tenant) -> UUID:
        logger.info("Service: Creating tenant.")
        tenant_id = await self.tenant_store.create_tenant(tenant)
        logger.info(f"Service: Created tenant {tenant_id}.")
        return tenant_id

    async def update_tenant(self, tenant_id: IdentifierLike, tenant: Tenant) -> None:
        logger.info(f"Service: Updating tenant {tenant_id}.")
        try:
            await self.tenant_store.update_tenant(tenant_id, tenant)
        except NotFoundError as e:
            logger.warning(f"Service: Tenant update failed: {e.detail}")
            raise

    async def read_tenant(self, tenant_id: IdentifierLike) -> Tenant:
        logger.info(f"Service: Reading tenant {tenant_id}.")
        try:
            return await self.tenant_store.read_tenant(tenant_id)
        except NotFoundError as e:
            logger.warning(f"Service: Tenant read failed: {e.detail}")
            raise

    async def delete_tenant(self, tenant_id: IdentifierLike) -> None:
        """
        Remove a tenant.

        Application rows of the tenant are left in place; they can no longer
        be reached because every application operation checks the tenant first.
        """
        logger.info(f"Service: Deleting tenant {tenant_id}.")
        try:
            await self.tenant_store.delete_tenant(tenant_id)
        except NotFoundError as e:
            logger.warning(f"Service: Tenant delete failed: {e.detail}")
            raise

    async def create_application(self, tenant_id: IdentifierLike, application: Application) -> UUID:
        logger.info(f"Service: Creating application '{application.name}' for tenant {tenant_id}.")
        try:
            application_id = await self.tenant_store.create_application(tenant_id, application)
        except NotFoundError as e:
            logger.warning(f"Service: Application creation failed: {e.detail}")
            raise
        logger.info(f"Service: Created application {application_id} for tenant {tenant_id}.")
        return application_id

    async def update_application(
        self,
        tenant_id: IdentifierLike,
        application_id: IdentifierLike,
        application: Application
    ) -> None:
        logger.info(f"Service: Updating application {application_id} of tenant {tenant_id}.")
        try:
            await self.tenant_store.update_application(tenant_id, application_id, application)
        except NotFoundError as e:
            logger.warning(f"Service: Application update failed: {e.detail}")
            raise

    async def read_application(self, tenant_id: IdentifierLike, application_id: IdentifierLike) -> Application:
        logger.info(f"Service: Reading application {application_id} of tenant {tenant_id}.")
        try:
            return await self.tenant_store.read_application(tenant_id, application_id)
        except NotFoundError as e:
            logger.warning(f"Service: Application read failed: {e.detail}")
            raise

    async def read_all_applications(self, tenant_id: IdentifierLike) -> Dict[UUID, Application]:
        logger.info(f"Service: Listing applications of tenant {tenant_id}.")
        try:
            return await self.tenant_store.read_all_applications(tenant_id)
        except NotFoundError as e:
            logger.warning(f"Service: Application listing failed: {e.detail}")
            raise

    async def delete_application(self, tenant_id: IdentifierLike, application_id: IdentifierLike) -> None:
        logger.info(f"Service: Deleting application {application_id} of tenant {tenant_id}.")
        try:
            await self.tenant_store.delete_application(tenant_id, application_id)
        except NotFoundError as e:
            logger.warning(f"Service: Application delete failed: {e.detail}")
            raise
