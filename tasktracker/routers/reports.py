from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from ..database import get_db
from ..dependencies.permissions import require_tenant_id
from ..services.report_service import ReportService
from ..schemas.report import MonthlyReport
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["reports"])


@router.get("/{person_id}", response_model=SuccessResponse[MonthlyReport])
@handle_service_errors
async def get_monthly_report(
    person_id: int,
    year: int = Query(...),
    month: int = Query(...),
    local_date: str = Query(..., description="Caller's local date, YYYY-MM-DD"),
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    """Monthly points report; the current month is evaluated up to local_date"""
    report = ReportService(db).get_monthly_report(
        person_id=person_id,
        tenant_id=tenant_id,
        year=year,
        month=month,
        as_of=local_date,
    )
    return ResponseFactory.success(data=MonthlyReport(**report))
