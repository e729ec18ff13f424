from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Any, Dict, List, Optional
import hmac
import logging

from ..models.tenant import Tenant
from ..schemas.tenant import TenantCreate
from ..utils.constants import AppConstants
from ..utils.security import get_password_hash, verify_password
from .errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class TenantService:
    def __init__(self, db: Session):
        self.db = db

    def list_tenants(self) -> List[Tenant]:
        return self.db.query(Tenant).order_by(Tenant.name.asc()).all()

    def create_tenant(self, tenant_data: TenantCreate) -> Tenant:
        """Create an account; names are unique regardless of case"""

        name = tenant_data.name.strip()
        if name.lower() == AppConstants.ADMIN_ACCOUNT_NAME:
            raise ValidationError("This account name is reserved")
        if Tenant.find_by_name(self.db, name):
            raise ConflictError("A tenant with this name already exists")

        try:
            tenant = Tenant(
                name=name, hashed_password=get_password_hash(tenant_data.password)
            )
            self.db.add(tenant)
            self.db.commit()
            self.db.refresh(tenant)
            logger.info(f"Created tenant {tenant.id}")
            return tenant

        except IntegrityError:
            self.db.rollback()
            raise ConflictError("A tenant with this name already exists")

    def reset_password(self, tenant_id: int, password: str) -> None:
        """Admin reset, no current password required"""
        tenant = self._get_tenant_or_raise(tenant_id)

        try:
            tenant.hashed_password = get_password_hash(password)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def change_password(
        self, tenant_id: int, current_password: str, new_password: str
    ) -> None:
        tenant = self._get_tenant_or_raise(tenant_id)

        if not verify_password(current_password, tenant.hashed_password):
            raise AuthenticationError("Current password is incorrect")

        try:
            tenant.hashed_password = get_password_hash(new_password)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def authenticate(
        self, account_name: str, password: str, admin_password: Optional[str]
    ) -> Dict[str, Any]:
        """Verify credentials for an account or the admin bypass"""

        if account_name.strip().lower() == AppConstants.ADMIN_ACCOUNT_NAME:
            if not admin_password:
                raise RuntimeError("Admin login is not configured")
            if not hmac.compare_digest(password.encode(), admin_password.encode()):
                raise AuthenticationError("Invalid credentials")
            return {"tenant_id": "admin", "tenant_name": "Admin", "is_admin": True}

        tenant = Tenant.find_by_name(self.db, account_name)
        if not tenant or not verify_password(password, tenant.hashed_password):
            raise AuthenticationError("Invalid credentials")

        return {"tenant_id": tenant.id, "tenant_name": tenant.name, "is_admin": False}

    def _get_tenant_or_raise(self, tenant_id: int) -> Tenant:
        tenant = self.db.query(Tenant).filter(Tenant.id == tenant_id).first()
        if not tenant:
            raise NotFoundError("Tenant not found")
        return tenant
