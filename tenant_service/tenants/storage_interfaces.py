# tenant_service/tenants/storage_interfaces.py
from abc import ABC, abstractmethod
from typing import Dict
from uuid import UUID

from .models import Tenant, Application
from .identifiers import IdentifierLike


class AbstractTenantStore(ABC):
    """
    Abstract base class defining the interface for tenant storage operations.

    Every operation runs in its own database session. Application operations
    check that the parent tenant exists before anything else, and operations on
    an existing row check that the row exists before any statement mutates it.

    Raises (all operations):
        TenantNotFoundError: The tenant does not exist.
        ApplicationNotFoundError: The tenant exists but the application does not.
        InvalidIdentifierError: An identifier argument could not be parsed.
        Driver and identifier generator errors are propagated unchanged.
    """

    async def initialize(self) -> None:
        """Prepare the storage backend for operations."""
        pass

    async def teardown(self) -> None:
        """Release backend resources."""
        pass

    @abstractmethod
    async def create_tenant(self, tenant: Tenant) -> UUID:
        """
        Create a new tenant.

        Returns:
            The generated unique identifier of the new tenant.
        """
        pass

    @abstractmethod
    async def update_tenant(self, tenant_id: IdentifierLike, tenant: Tenant) -> None:
        """Overwrite the attributes of an existing tenant."""
        pass

    @abstractmethod
    async def read_tenant(self, tenant_id: IdentifierLike) -> Tenant:
        """Retrieve an existing tenant."""
        pass

    @abstractmethod
    async def delete_tenant(self, tenant_id: IdentifierLike) -> None:
        """Remove an existing tenant."""
        pass

    @abstractmethod
    async def create_application(self, tenant_id: IdentifierLike, application: Application) -> UUID:
        """
        Create a new application for an existing tenant.

        Returns:
            The generated unique identifier of the new application.
        """
        pass

    @abstractmethod
    async def update_application(
        self,
        tenant_id: IdentifierLike,
        application_id: IdentifierLike,
        application: Application
    ) -> None:
        """Overwrite the attributes of an existing tenant application."""
        pass

    @abstractmethod
    async def read_application(self, tenant_id: IdentifierLike, application_id: IdentifierLike) -> Application:
        """Retrieve an existing tenant application."""
        pass

    @abstractmethod
    async def read_all_applications(self, tenant_id: IdentifierLike) -> Dict[UUID, Application]:
        """
        Retrieve every application of an existing tenant.

        Returns:
            Mapping of application identifier to application, in no particular order.
        """
        pass

    @abstractmethod
    async def delete_application(self, tenant_id: IdentifierLike, application_id: IdentifierLike) -> None:
        """Remove an existing tenant application."""
        pass
