from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from ..database import get_db
from ..dependencies.permissions import require_tenant_id
from ..services.task_service import TaskService
from ..services.completion_ledger import CompletionLedger
from ..schemas.task import (
    CompletionResponse,
    CompletionToggle,
    TaskCreate,
    TaskDetail,
    TaskReorder,
    TaskResponse,
    TaskUpdate,
    ToggleResult,
)
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.constants import ResponseMessages
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["tasks"])


@router.get("", response_model=SuccessResponse[List[TaskDetail]])
@handle_service_errors
async def list_tasks(
    person_id: Optional[int] = Query(None, description="Filter by assignee"),
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    """Tenant tasks in display order, with their completions"""
    tasks = TaskService(db).list_tasks(tenant_id=tenant_id, person_id=person_id)
    return ResponseFactory.success(data=[TaskDetail.model_validate(t) for t in tasks])


@router.post(
    "",
    response_model=SuccessResponse[TaskResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_task(
    task_data: TaskCreate,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    task = TaskService(db).create_task(tenant_id, task_data)
    return ResponseFactory.created(
        data=TaskResponse.model_validate(task), message=ResponseMessages.TASK_CREATED
    )


@router.patch("/reorder", response_model=SuccessResponse[dict])
@handle_service_errors
async def reorder_tasks(
    reorder: TaskReorder,
    db: Session = Depends(get_db),
):
    """Set display order for several tasks at once (all or nothing)"""
    TaskService(db).reorder_tasks(reorder.tenant_id, reorder.task_orders)
    return ResponseFactory.success(
        data={"updated": len(reorder.task_orders)},
        message=ResponseMessages.TASKS_REORDERED,
    )


@router.get("/{task_id}", response_model=SuccessResponse[TaskDetail])
@handle_service_errors
async def get_task(
    task_id: int,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    task = TaskService(db).get_task(task_id, tenant_id)
    return ResponseFactory.success(data=TaskDetail.model_validate(task))


@router.patch("/{task_id}", response_model=SuccessResponse[TaskResponse])
@handle_service_errors
async def update_task(
    task_id: int,
    task_updates: TaskUpdate,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    task = TaskService(db).update_task(task_id, tenant_id, task_updates)
    return ResponseFactory.success(
        data=TaskResponse.model_validate(task), message=ResponseMessages.TASK_UPDATED
    )


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_task(
    task_id: int,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    TaskService(db).delete_task(task_id, tenant_id)


@router.post("/{task_id}/complete", response_model=SuccessResponse[ToggleResult])
@handle_service_errors
async def toggle_completion(
    task_id: int,
    toggle: Optional[CompletionToggle] = Body(None),
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    """Toggle a task's status for one date.

    Same status again clears the date, a different status replaces it.
    Completing a one-off task removes the task.
    """
    toggle = toggle or CompletionToggle()
    outcome = CompletionLedger(db).toggle(
        task_id=task_id,
        tenant_id=tenant_id,
        completed_date=toggle.completed_date,
        status=toggle.status,
    )

    return ResponseFactory.success(
        data=ToggleResult(
            completed=outcome.completed,
            status=outcome.status,
            deleted=outcome.deleted,
        ),
        message=(
            ResponseMessages.TASK_RETIRED
            if outcome.deleted
            else ResponseMessages.COMPLETION_TOGGLED
        ),
    )


@router.get(
    "/{task_id}/completions", response_model=SuccessResponse[List[CompletionResponse]]
)
@handle_service_errors
async def get_task_completions(
    task_id: int,
    year: int = Query(...),
    month: int = Query(...),
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    """Completions of one task within a calendar month"""
    ledger = CompletionLedger(db)
    ledger.get_task_for_tenant(task_id, tenant_id)

    completions = ledger.completions_for_task_in_month(task_id, year, month)
    return ResponseFactory.success(
        data=[CompletionResponse.model_validate(c) for c in completions]
    )
