# tasktracker/routers/__init__.py

from . import auth
from . import tenants
from . import people
from . import tasks
from . import reports
from . import admin

__all__ = [
    "auth",
    "tenants",
    "people",
    "tasks",
    "reports",
    "admin",
]
