from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from ..utils.constants import AppConstants
from .task import TaskResponse


class PersonBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=AppConstants.MAX_NAME_LENGTH)
    color: Optional[str] = Field(None, max_length=AppConstants.MAX_COLOR_LENGTH)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class PersonCreate(PersonBase):
    pass


class PersonUpdate(BaseModel):
    name: Optional[str] = Field(
        None, min_length=1, max_length=AppConstants.MAX_NAME_LENGTH
    )
    color: Optional[str] = Field(None, max_length=AppConstants.MAX_COLOR_LENGTH)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Name must be a non-empty string")
        return v


class PointGoalUpdate(BaseModel):
    point_goal: int = Field(..., ge=0, description="Monthly point target")


class PersonResponse(BaseModel):
    id: int
    name: str
    color: Optional[str] = None
    point_goal: Optional[int] = None
    tenant_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PersonWithProgress(PersonResponse):
    current_month_points: int = 0
    progress: Optional[int] = None  # None when no goal is set


class PersonDetail(PersonResponse):
    tasks: List[TaskResponse] = []
