# tenant_service/tenants/errors.py
from typing import Any, Dict, Optional
from uuid import UUID


class TenantServiceError(Exception):
    """Base class for errors raised by the tenant data-access layer."""

    kind: str = "tenant_service_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(TenantServiceError):
    """
    The referenced tenant or application does not exist.

    Carries the offending identifiers so presentation layers can render
    their own messages. `detail` holds the same data as a plain dict.
    """

    kind = "not_found"

    def __init__(
        self,
        message: str,
        tenant_id: UUID,
        application_id: Optional[UUID] = None
    ):
        self.tenant_id = tenant_id
        self.application_id = application_id
        super().__init__(message)

    @property
    def detail(self) -> Dict[str, Any]:
        detail: Dict[str, Any] = {
            "error": self.kind,
            "message": self.message,
            "tenant_id": str(self.tenant_id),
        }
        if self.application_id is not None:
            detail["application_id"] = str(self.application_id)
        return detail


class TenantNotFoundError(NotFoundError):
    """Raised when no tenant row exists for the given tenant identifier."""

    kind = "tenant_not_found"

    def __init__(self, tenant_id: UUID):
        super().__init__("Tenant not found.", tenant_id=tenant_id)


class ApplicationNotFoundError(NotFoundError):
    """Raised when the tenant exists but has no application with the given identifier."""

    kind = "application_not_found"

    def __init__(self, tenant_id: UUID, application_id: UUID):
        super().__init__(
            "Tenant application not found.",
            tenant_id=tenant_id,
            application_id=application_id
        )


class InvalidIdentifierError(TenantServiceError, ValueError):
    """Raised when a value cannot be interpreted as a unique identifier."""

    kind = "invalid_identifier"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid unique identifier: {value!r}")
