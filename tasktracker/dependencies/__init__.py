# tasktracker/dependencies/__init__.py

from .permissions import (
    require_admin,
    require_tenant_id,
    get_admin_password,
)

__all__ = [
    "require_admin",
    "require_tenant_id",
    "get_admin_password",
]
