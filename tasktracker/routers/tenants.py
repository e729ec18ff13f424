from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from ..database import get_db
from ..dependencies.permissions import require_admin
from ..services.tenant_service import TenantService
from ..schemas.tenant import (
    TenantCreate,
    TenantPasswordChange,
    TenantPasswordReset,
    TenantResponse,
)
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.constants import ResponseMessages
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["tenants"])


@router.get("", response_model=SuccessResponse[List[TenantResponse]])
@handle_service_errors
async def list_tenants(db: Session = Depends(get_db)):
    """List accounts (never includes password hashes)"""
    tenants = TenantService(db).list_tenants()
    return ResponseFactory.success(
        data=[TenantResponse.model_validate(t) for t in tenants]
    )


@router.post(
    "",
    response_model=SuccessResponse[TenantResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_tenant(
    tenant_data: TenantCreate,
    db: Session = Depends(get_db),
    _: bool = Depends(require_admin),
):
    """Create a new account"""
    tenant = TenantService(db).create_tenant(tenant_data)
    return ResponseFactory.created(
        data=TenantResponse.model_validate(tenant),
        message=ResponseMessages.TENANT_CREATED,
    )


@router.patch("/{tenant_id}/password", response_model=SuccessResponse[dict])
@handle_service_errors
async def reset_tenant_password(
    tenant_id: int,
    reset: TenantPasswordReset,
    db: Session = Depends(get_db),
    _: bool = Depends(require_admin),
):
    """Admin password reset"""
    TenantService(db).reset_password(tenant_id, reset.password)
    return ResponseFactory.success(
        data={"tenant_id": tenant_id}, message=ResponseMessages.PASSWORD_UPDATED
    )


@router.patch("/{tenant_id}/change-password", response_model=SuccessResponse[dict])
@handle_service_errors
async def change_tenant_password(
    tenant_id: int,
    change: TenantPasswordChange,
    db: Session = Depends(get_db),
):
    """Change password after verifying the current one"""
    TenantService(db).change_password(
        tenant_id, change.current_password, change.new_password
    )
    return ResponseFactory.success(
        data={"tenant_id": tenant_id}, message=ResponseMessages.PASSWORD_UPDATED
    )
