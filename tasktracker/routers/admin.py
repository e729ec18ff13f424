from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from ..database import get_db
from ..dependencies.permissions import require_admin
from ..services.admin_service import AdminService
from ..schemas.tenant import TenantStats
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["admin"])


@router.get("/stats", response_model=SuccessResponse[List[TenantStats]])
@handle_service_errors
async def get_tenant_stats(
    local_date: str = Query(..., description="Caller's local date, YYYY-MM-DD"),
    db: Session = Depends(get_db),
    _: bool = Depends(require_admin),
):
    """Per-account activity for the month containing local_date"""
    stats = AdminService(db).get_tenant_stats(as_of=local_date)
    return ResponseFactory.success(data=[TenantStats(**s) for s in stats])
