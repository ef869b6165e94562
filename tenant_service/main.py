# tenant_service/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from .settings import settings
from .tenants.endpoints import tenants_admin_router
from .tenants.storage import get_tenant_store, close_tenant_store

# Configure logging based on debug mode setting
if not logging.getLogger().hasHandlers():
    logging.basicConfig(
        level="DEBUG" if settings.debug_mode else "INFO",
        format='%(asctime)s - %(name)s [%(levelname)s] - %(message)s'
    )

logger = logging.getLogger(__name__)


@asynccontextmanager
async def tenant_service_lifespan(app_instance: FastAPI):
    """Initialize the configured tenant store at startup and tear it down at shutdown."""
    logger.info(f"Application startup initiated (storage backend: '{settings.storage_backend}').")
    await get_tenant_store()
    logger.info("Tenant store initialized.")

    yield

    logger.info("Application shutdown initiated.")
    try:
        await close_tenant_store()
    except Exception as e_td:
        logger.error(f"Teardown error: {e_td}", exc_info=True)
    logger.info("All components torn down.")


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug_mode,
    lifespan=tenant_service_lifespan
)
app.include_router(tenants_admin_router)


@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "ok", "storage_backend": settings.storage_backend}
