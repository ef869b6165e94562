# tenant_service/tenants/models.py
from pydantic import BaseModel, Field
from uuid import UUID


class Tenant(BaseModel):
    """Tenant attributes as stored and returned by the tenant store."""
    secret_key: str = Field(description="Opaque secret key of the tenant")


class Application(BaseModel):
    """Application attributes, scoped under a parent tenant."""
    name: str = Field(description="Display name of the application")


class TenantCreated(BaseModel):
    """Response model for tenant creation."""
    tenant_id: UUID


class ApplicationCreated(BaseModel):
    """Response model for application creation."""
    tenant_id: UUID
    application_id: UUID
