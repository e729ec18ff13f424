from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal
from ..models.enums import CompletionStatus
from ..utils.active_days import parse_active_days
from ..utils.constants import AppConstants


def _validate_active_days(v):
    if not isinstance(v, (str, list, tuple, set)):
        raise ValueError("Active days must be a list of weekdays")
    days = parse_active_days(v)
    if not days:
        raise ValueError("At least one active day is required")
    return sorted(days)


class TaskBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=AppConstants.MAX_TITLE_LENGTH)
    description: Optional[str] = Field(
        None, max_length=AppConstants.MAX_DESCRIPTION_LENGTH
    )
    is_recurring: bool = True
    active_days: List[int] = Field(
        ..., min_length=1, description="Weekdays the task runs on, 0=Sunday"
    )
    points: Optional[int] = Field(None, ge=0)
    money: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    assigned_to_id: Optional[int] = None

    @field_validator("active_days", mode="before")
    @classmethod
    def validate_active_days(cls, v):
        return _validate_active_days(v)


class TaskCreate(TaskBase):
    pass


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(
        None, min_length=1, max_length=AppConstants.MAX_TITLE_LENGTH
    )
    description: Optional[str] = Field(
        None, max_length=AppConstants.MAX_DESCRIPTION_LENGTH
    )
    is_recurring: Optional[bool] = None
    active_days: Optional[List[int]] = None
    points: Optional[int] = Field(None, ge=0)
    money: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    assigned_to_id: Optional[int] = None

    @field_validator("active_days", mode="before")
    @classmethod
    def validate_active_days(cls, v):
        if v is None:
            raise ValueError("Active days cannot be empty")
        return _validate_active_days(v)


class TaskResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    is_recurring: bool
    active_days: List[int]
    points: Optional[int] = None
    money: Optional[Decimal] = None
    display_order: int
    tenant_id: int
    assigned_to_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("active_days", mode="before")
    @classmethod
    def parse_stored_days(cls, v):
        return sorted(parse_active_days(v))

    class Config:
        from_attributes = True


class CompletionToggle(BaseModel):
    # Optional only for older clients; the server date is a fallback
    completed_date: Optional[str] = Field(None, description="YYYY-MM-DD")
    status: CompletionStatus = CompletionStatus.COMPLETED


class ToggleResult(BaseModel):
    completed: bool
    status: Optional[CompletionStatus] = None
    deleted: bool = False


class CompletionResponse(BaseModel):
    completed_date: date
    status: CompletionStatus

    class Config:
        from_attributes = True


class TaskOrder(BaseModel):
    id: int
    display_order: int


class TaskReorder(BaseModel):
    task_orders: List[TaskOrder] = Field(..., min_length=1)
    tenant_id: int = Field(..., gt=0)


class TaskDetail(TaskResponse):
    completions: List[CompletionResponse] = []
