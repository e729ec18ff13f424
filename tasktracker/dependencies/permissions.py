from fastapi import Header, HTTPException, Query, status
from typing import Optional
import hmac
import logging
import os

logger = logging.getLogger(__name__)


def get_admin_password() -> Optional[str]:
    return os.getenv("ADMIN_PASSWORD")


async def require_admin(
    x_admin_password: Optional[str] = Header(None, alias="X-Admin-Password"),
) -> bool:
    """Ensure the request carries the configured admin password"""
    admin_password = get_admin_password()

    if not admin_password:
        logger.warning("Admin route called but ADMIN_PASSWORD is not configured")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access is not configured",
        )

    if not x_admin_password or not hmac.compare_digest(
        x_admin_password.encode(), admin_password.encode()
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required"
        )

    return True


async def require_tenant_id(
    tenant_id: int = Query(..., gt=0, description="Requesting tenant"),
) -> int:
    """Tenant scope for the request; ownership is checked per resource"""
    return tenant_id
