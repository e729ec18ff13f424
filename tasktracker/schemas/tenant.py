from pydantic import BaseModel, Field
from typing import Optional, Union
from datetime import datetime
from ..utils.constants import AppConstants


class TenantCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=AppConstants.MAX_NAME_LENGTH)
    password: str = Field(..., min_length=AppConstants.MIN_PASSWORD_LENGTH)


class TenantPasswordReset(BaseModel):
    password: str = Field(..., min_length=AppConstants.MIN_PASSWORD_LENGTH)


class TenantPasswordChange(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=AppConstants.MIN_PASSWORD_LENGTH)


class TenantResponse(BaseModel):
    id: int
    name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    account_name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    tenant_id: Union[int, str]  # "admin" for the admin bypass
    tenant_name: str
    is_admin: bool = False


class TenantStats(BaseModel):
    tenant_id: int
    tenant_name: str
    people_count: int
    task_count: int
    usage_days_in_month: int
