# tenant_service/tenants/endpoints.py
import logging
from typing import Callable, Coroutine, Dict, Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from .models import Tenant, Application, TenantCreated, ApplicationCreated
from .errors import NotFoundError
from .service import TenantService
from .storage import get_tenant_store
from .storage_interfaces import AbstractTenantStore
from ..dependencies import get_admin_api_key

logger = logging.getLogger(__name__)


class LoggedErrorRoute(APIRoute):
    """
    Route class shared by every admin tenant route.

    HTTP and request validation errors pass through untouched. Anything else
    (driver failures, identifier generator failures) is logged and answered
    with a 500.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def logged_route_handler(request: Request) -> Response:
            try:
                return await route_handler(request)
            except (StarletteHTTPException, RequestValidationError):
                raise
            except Exception as e:
                logger.error(f"API: Unexpected error on {request.method} {request.url.path}: {e}", exc_info=True)
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={"detail": "Tenant storage request failed."}
                )

        return logged_route_handler


# Admin router for tenant management - requires admin API key authentication
tenants_admin_router = APIRouter(
    prefix="/admin/tenants",
    tags=["Admin - Tenants"],
    route_class=LoggedErrorRoute,
    dependencies=[Depends(get_admin_api_key)]
)

TenantIdPath = Annotated[UUID, Path(description="The unique identifier of the tenant")]
ApplicationIdPath = Annotated[UUID, Path(description="The unique identifier of the application")]


async def get_tenant_service(
    tenant_store: Annotated[AbstractTenantStore, Depends(get_tenant_store)]
) -> TenantService:
    """Factory function to create TenantService with injected store dependency."""
    return TenantService(tenant_store)


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)


@tenants_admin_router.post("/", response_model=TenantCreated, status_code=status.HTTP_201_CREATED)
async def create_tenant_endpoint(
    tenant: Tenant,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Create a new tenant and return its generated identifier."""
    tenant_id = await service.create_tenant(tenant)
    return TenantCreated(tenant_id=tenant_id)


@tenants_admin_router.get("/{tenant_id}", response_model=Tenant)
async def read_tenant_endpoint(
    tenant_id: TenantIdPath,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Retrieve a specific tenant."""
    try:
        return await service.read_tenant(tenant_id)
    except NotFoundError as e:
        raise _not_found(e)


@tenants_admin_router.put("/{tenant_id}", response_model=Tenant)
async def update_tenant_endpoint(
    tenant_id: TenantIdPath,
    tenant: Tenant,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Overwrite an existing tenant. Returns 404 if the tenant does not exist."""
    try:
        await service.update_tenant(tenant_id, tenant)
    except NotFoundError as e:
        raise _not_found(e)
    return tenant


@tenants_admin_router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant_endpoint(
    tenant_id: TenantIdPath,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Delete a tenant. Returns 404 if the tenant does not exist."""
    try:
        await service.delete_tenant(tenant_id)
    except NotFoundError as e:
        raise _not_found(e)
    return None


@tenants_admin_router.post(
    "/{tenant_id}/applications/",
    response_model=ApplicationCreated,
    status_code=status.HTTP_201_CREATED
)
async def create_application_endpoint(
    tenant_id: TenantIdPath,
    application: Application,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Create a new application under an existing tenant."""
    try:
        application_id = await service.create_application(tenant_id, application)
    except NotFoundError as e:
        raise _not_found(e)
    return ApplicationCreated(tenant_id=tenant_id, application_id=application_id)


@tenants_admin_router.get("/{tenant_id}/applications/", response_model=Dict[UUID, Application])
@tenants_admin_router.get("/{tenant_id}/applications", response_model=Dict[UUID, Application], include_in_schema=False)
async def read_all_applications_endpoint(
    tenant_id: TenantIdPath,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """List every application of a tenant, keyed by application identifier. Handles both trailing slash variants."""
    try:
        return await service.read_all_applications(tenant_id)
    except NotFoundError as e:
        raise _not_found(e)


@tenants_admin_router.get("/{tenant_id}/applications/{application_id}", response_model=Application)
async def read_application_endpoint(
    tenant_id: TenantIdPath,
    application_id: ApplicationIdPath,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Retrieve a specific application of a tenant."""
    try:
        return await service.read_application(tenant_id, application_id)
    except NotFoundError as e:
        raise _not_found(e)


@tenants_admin_router.put("/{tenant_id}/applications/{application_id}", response_model=Application)
async def update_application_endpoint(
    tenant_id: TenantIdPath,
    application_id: ApplicationIdPath,
    application: Application,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Overwrite an existing application. Returns 404 if the tenant or the application does not exist."""
    try:
        await service.update_application(tenant_id, application_id, application)
    except NotFoundError as e:
        raise _not_found(e)
    return application


@tenants_admin_router.delete(
    "/{tenant_id}/applications/{application_id}",
    status_code=status.HTTP_204_NO_CONTENT
)
async def delete_application_endpoint(
    tenant_id: TenantIdPath,
    application_id: ApplicationIdPath,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Delete an application. Returns 404 if the tenant or the application does not exist."""
    try:
        await service.delete_application(tenant_id, application_id)
    except NotFoundError as e:
        raise _not_found(e)
    return None
