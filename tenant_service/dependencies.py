# tenant_service/dependencies.py
import logging
import secrets
from typing import Annotated, Optional

from fastapi import Header, HTTPException, status

from .settings import settings

logger = logging.getLogger(__name__)

ADMIN_KEY_HEADER = "X-Admin-API-Key"


def _admin_key_error(status_code: int, detail: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=detail,
        headers={"WWW-Authenticate": f'ApiKey header="{ADMIN_KEY_HEADER}"'},
    )


async def get_admin_api_key(
    x_admin_api_key: Annotated[
        Optional[str],
        Header(description="Admin key required by the tenant and application management routes.")
    ] = None
) -> str:
    """
    Guard for the /admin/tenants routes.

    503 when the server has no ADMIN_API_KEY (tenant management is switched
    off), 401 when the header is missing, 403 when the key does not match.
    Keys are compared in constant time.
    """
    expected_key = settings.admin_api_key
    if not expected_key:
        logger.critical("ADMIN_API_KEY is not set; tenant management routes are disabled.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Tenant management is disabled: the server has no admin key configured.",
        )

    if not x_admin_api_key:
        logger.warning(f"Tenant admin request rejected: {ADMIN_KEY_HEADER} header missing.")
        raise _admin_key_error(
            status.HTTP_401_UNAUTHORIZED,
            f"Missing {ADMIN_KEY_HEADER} header.",
        )

    if not secrets.compare_digest(x_admin_api_key.encode("utf-8"), expected_key.encode("utf-8")):
        logger.warning(f"Tenant admin request rejected: {ADMIN_KEY_HEADER} does not match.")
        raise _admin_key_error(
            status.HTTP_403_FORBIDDEN,
            f"{ADMIN_KEY_HEADER} is not valid for tenant management.",
        )

    return x_admin_api_key
