from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Any, Dict, List

from ..models.person import Person
from ..models.task import Task
from ..models.task_completion import TaskCompletion
from ..models.tenant import Tenant
from ..utils.date_helpers import DateHelpers, DateLike


class AdminService:
    def __init__(self, db: Session):
        self.db = db

    def get_tenant_stats(self, as_of: DateLike) -> List[Dict[str, Any]]:
        """Per-account activity for the month containing ``as_of``"""

        as_of_date = DateHelpers.parse_date(as_of)
        start, end = DateHelpers.get_month_boundaries(as_of_date.year, as_of_date.month)

        stats = []
        for tenant in self.db.query(Tenant).order_by(Tenant.name.asc()).all():
            people_count = (
                self.db.query(func.count(Person.id))
                .filter(Person.tenant_id == tenant.id)
                .scalar()
            )
            task_count = (
                self.db.query(func.count(Task.id))
                .filter(Task.tenant_id == tenant.id)
                .scalar()
            )
            usage_days = (
                self.db.query(func.count(func.distinct(TaskCompletion.completed_date)))
                .join(Task, Task.id == TaskCompletion.task_id)
                .filter(
                    Task.tenant_id == tenant.id,
                    TaskCompletion.completed_date >= start,
                    TaskCompletion.completed_date <= end,
                )
                .scalar()
            )

            stats.append(
                {
                    "tenant_id": tenant.id,
                    "tenant_name": tenant.name,
                    "people_count": people_count or 0,
                    "task_count": task_count or 0,
                    "usage_days_in_month": usage_days or 0,
                }
            )

        return stats
