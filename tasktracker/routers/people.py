from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from ..database import get_db
from ..dependencies.permissions import require_tenant_id
from ..services.person_service import PersonService
from ..schemas.person import (
    PersonCreate,
    PersonDetail,
    PersonResponse,
    PersonUpdate,
    PersonWithProgress,
    PointGoalUpdate,
)
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.constants import ResponseMessages
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["people"])


@router.get("", response_model=SuccessResponse[List[PersonWithProgress]])
@handle_service_errors
async def list_people(
    local_date: str = Query(..., description="Caller's local date, YYYY-MM-DD"),
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    """People of the tenant with month-to-date points and goal progress"""
    people = PersonService(db).list_people(tenant_id=tenant_id, as_of=local_date)
    return ResponseFactory.success(data=[PersonWithProgress(**p) for p in people])


@router.post(
    "",
    response_model=SuccessResponse[PersonResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_person(
    person_data: PersonCreate,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    person = PersonService(db).create_person(tenant_id, person_data)
    return ResponseFactory.created(
        data=PersonResponse.model_validate(person),
        message=ResponseMessages.PERSON_CREATED,
    )


@router.get("/{person_id}", response_model=SuccessResponse[PersonDetail])
@handle_service_errors
async def get_person(
    person_id: int,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    """Person with their assigned tasks"""
    person = PersonService(db).get_person(person_id, tenant_id)
    return ResponseFactory.success(data=PersonDetail.model_validate(person))


@router.patch("/{person_id}", response_model=SuccessResponse[PersonResponse])
@handle_service_errors
async def update_person(
    person_id: int,
    person_updates: PersonUpdate,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    person = PersonService(db).update_person(person_id, tenant_id, person_updates)
    return ResponseFactory.success(
        data=PersonResponse.model_validate(person),
        message=ResponseMessages.PERSON_UPDATED,
    )


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_person(
    person_id: int,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    """Delete a person; their tasks remain, unassigned"""
    PersonService(db).delete_person(person_id, tenant_id)


@router.patch("/{person_id}/goal", response_model=SuccessResponse[PersonResponse])
@handle_service_errors
async def update_point_goal(
    person_id: int,
    goal: PointGoalUpdate,
    tenant_id: int = Depends(require_tenant_id),
    db: Session = Depends(get_db),
):
    """Set the person's monthly point goal"""
    person = PersonService(db).update_point_goal(person_id, tenant_id, goal.point_goal)
    return ResponseFactory.success(
        data=PersonResponse.model_validate(person),
        message=ResponseMessages.GOAL_UPDATED,
    )
