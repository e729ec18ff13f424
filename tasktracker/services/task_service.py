from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List, Optional
import logging

from ..models.person import Person
from ..models.task import Task
from ..models.tenant import Tenant
from ..schemas.task import TaskCreate, TaskOrder, TaskUpdate
from ..utils.active_days import format_active_days
from .errors import (
    AccessDeniedError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, db: Session):
        self.db = db

    def list_tasks(self, tenant_id: int, person_id: Optional[int] = None) -> List[Task]:
        """Tenant tasks in manual display order"""

        query = self.db.query(Task).filter(Task.tenant_id == tenant_id)
        if person_id is not None:
            query = query.filter(Task.assigned_to_id == person_id)

        return query.order_by(Task.display_order.asc(), Task.id.asc()).all()

    def get_task(self, task_id: int, tenant_id: int) -> Task:
        return self._get_task_for_tenant(task_id, tenant_id)

    def create_task(self, tenant_id: int, task_data: TaskCreate) -> Task:
        if not self.db.query(Tenant).filter(Tenant.id == tenant_id).first():
            raise NotFoundError("Tenant not found")
        if task_data.assigned_to_id is not None:
            self._validate_assignee(task_data.assigned_to_id, tenant_id)

        try:
            # New tasks go to the bottom of the list
            max_order = (
                self.db.query(func.max(Task.display_order))
                .filter(Task.tenant_id == tenant_id)
                .scalar()
            )
            task = Task(
                title=task_data.title,
                description=task_data.description or None,
                is_recurring=task_data.is_recurring,
                active_days=format_active_days(task_data.active_days),
                points=task_data.points,
                money=task_data.money,
                assigned_to_id=task_data.assigned_to_id,
                tenant_id=tenant_id,
                display_order=(max_order + 1) if max_order is not None else 0,
            )

            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
            return task

        except Exception:
            self.db.rollback()
            raise

    def update_task(self, task_id: int, tenant_id: int, task_updates: TaskUpdate) -> Task:
        task = self._get_task_for_tenant(task_id, tenant_id)

        update_data = task_updates.model_dump(exclude_unset=True)
        if update_data.get("assigned_to_id") is not None:
            self._validate_assignee(update_data["assigned_to_id"], tenant_id)

        try:
            for field, value in update_data.items():
                if field == "active_days":
                    value = format_active_days(value)
                elif field == "title" and value is None:
                    continue
                elif field == "is_recurring" and value is None:
                    continue
                setattr(task, field, value)

            self.db.commit()
            self.db.refresh(task)
            return task

        except Exception:
            self.db.rollback()
            raise

    def delete_task(self, task_id: int, tenant_id: int) -> None:
        task = self._get_task_for_tenant(task_id, tenant_id)

        try:
            self.db.delete(task)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def reorder_tasks(self, tenant_id: int, task_orders: List[TaskOrder]) -> None:
        """Apply new display orders as one batch: all tasks or none"""

        task_ids = [order.id for order in task_orders]
        if len(set(task_ids)) != len(task_ids):
            raise ValidationError("Duplicate task ids in task_orders")

        tasks = self.db.query(Task).filter(Task.id.in_(task_ids)).all()
        tasks_by_id = {task.id: task for task in tasks}

        missing = [task_id for task_id in task_ids if task_id not in tasks_by_id]
        if missing:
            raise NotFoundError(f"Tasks not found: {missing}")
        if any(task.tenant_id != tenant_id for task in tasks):
            raise AccessDeniedError("Access denied")

        try:
            for order in task_orders:
                tasks_by_id[order.id].display_order = order.display_order
            self.db.commit()
            logger.info(f"Reordered {len(task_orders)} tasks for tenant {tenant_id}")

        except Exception:
            self.db.rollback()
            raise

    def _validate_assignee(self, person_id: int, tenant_id: int) -> None:
        person = self.db.query(Person).filter(Person.id == person_id).first()
        if not person or person.tenant_id != tenant_id:
            raise ValidationError("Invalid assigned_to_id for this tenant")

    def _get_task_for_tenant(self, task_id: int, tenant_id: int) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id).first()
        if not task:
            raise NotFoundError("Task not found")
        if task.tenant_id != tenant_id:
            raise AccessDeniedError("Access denied")
        return task
