from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..dependencies.permissions import get_admin_password
from ..services.tenant_service import TenantService
from ..schemas.tenant import LoginRequest, LoginResponse
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["authentication"])


@router.post("/login", response_model=SuccessResponse[LoginResponse])
@handle_service_errors
async def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
):
    """Verify account credentials and return the tenant to scope requests to"""
    tenant_service = TenantService(db)

    result = tenant_service.authenticate(
        account_name=credentials.account_name,
        password=credentials.password,
        admin_password=get_admin_password(),
    )

    return ResponseFactory.success(data=LoginResponse(**result))
