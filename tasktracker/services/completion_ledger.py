from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Dict, Iterable, List, Optional, Union
from collections import defaultdict
from dataclasses import dataclass
import logging

from ..models.task import Task
from ..models.task_completion import TaskCompletion
from ..models.enums import CompletionStatus
from ..utils.date_helpers import DateHelpers, DateLike
from .errors import AccessDeniedError, NotFoundError
from .progress_service import validate_month

logger = logging.getLogger(__name__)


@dataclass
class ToggleOutcome:
    completed: bool
    status: Optional[CompletionStatus]
    deleted: bool = False


class CompletionLedger:
    """Per (task, date) completion state.

    Each cell is absent, completed or excluded. Toggling with the current
    status clears the cell, toggling with another status overwrites it in
    place. A one-off task is deleted in the same transaction as the write
    that marks it completed.
    """

    def __init__(self, db: Session):
        self.db = db

    def toggle(
        self,
        task_id: int,
        tenant_id: int,
        completed_date: Optional[DateLike],
        status: Union[CompletionStatus, str] = CompletionStatus.COMPLETED,
    ) -> ToggleOutcome:
        status = CompletionStatus(status)
        day = DateHelpers.today(completed_date)

        task = self._get_task_for_tenant(task_id, tenant_id)

        try:
            outcome = self._apply(task, day, status, on_conflict=False)
            self.db.commit()
            return outcome

        except IntegrityError:
            # Lost the insert race for this cell; the row now exists
            self.db.rollback()
            logger.warning(
                f"Completion for task {task_id} on {day} created concurrently, "
                "retrying as update"
            )
        except Exception:
            self.db.rollback()
            raise

        try:
            task = self._get_task_for_tenant(task_id, tenant_id)
            outcome = self._apply(task, day, status, on_conflict=True)
            self.db.commit()
            return outcome
        except Exception:
            self.db.rollback()
            raise

    def completions_for_task_in_range(
        self, task_id: int, start_date: DateLike, end_date: DateLike
    ) -> List[TaskCompletion]:
        start = DateHelpers.parse_date(start_date)
        end = DateHelpers.parse_date(end_date)
        if start > end:
            return []

        return (
            self.db.query(TaskCompletion)
            .filter(
                TaskCompletion.task_id == task_id,
                TaskCompletion.completed_date >= start,
                TaskCompletion.completed_date <= end,
            )
            .order_by(TaskCompletion.completed_date.asc())
            .all()
        )

    def completions_for_task_in_month(
        self, task_id: int, year: int, month: int
    ) -> List[TaskCompletion]:
        validate_month(year, month)
        start, end = DateHelpers.get_month_boundaries(year, month)
        return self.completions_for_task_in_range(task_id, start, end)

    def completions_for_tasks_in_range(
        self, task_ids: Iterable[int], start_date: DateLike, end_date: DateLike
    ) -> Dict[int, List[TaskCompletion]]:
        """Batch form of ``completions_for_task_in_range`` keyed by task id"""
        task_ids = list(task_ids)
        start = DateHelpers.parse_date(start_date)
        end = DateHelpers.parse_date(end_date)
        grouped = defaultdict(list)
        if not task_ids or start > end:
            return grouped

        rows = (
            self.db.query(TaskCompletion)
            .filter(
                TaskCompletion.task_id.in_(task_ids),
                TaskCompletion.completed_date >= start,
                TaskCompletion.completed_date <= end,
            )
            .order_by(TaskCompletion.completed_date.asc(), TaskCompletion.id.asc())
            .all()
        )
        for row in rows:
            grouped[row.task_id].append(row)
        return grouped

    def get_task_for_tenant(self, task_id: int, tenant_id: int) -> Task:
        return self._get_task_for_tenant(task_id, tenant_id)

    def _apply(
        self, task: Task, day, status: CompletionStatus, on_conflict: bool
    ) -> ToggleOutcome:
        existing = (
            self.db.query(TaskCompletion)
            .filter(
                TaskCompletion.task_id == task.id,
                TaskCompletion.completed_date == day,
            )
            .first()
        )

        if existing is None:
            self.db.add(
                TaskCompletion(task_id=task.id, completed_date=day, status=status.value)
            )
            # Surface a duplicate insert now, inside the try block
            self.db.flush()
        elif existing.status == status.value and not on_conflict:
            self.db.delete(existing)
            self.db.flush()
            return ToggleOutcome(completed=False, status=None)
        else:
            existing.status = status.value
            self.db.flush()

        if status == CompletionStatus.COMPLETED and not task.is_recurring:
            self.db.delete(task)
            self.db.flush()
            logger.info(f"One-off task {task.id} completed on {day}, removed")
            return ToggleOutcome(completed=True, status=status, deleted=True)

        return ToggleOutcome(completed=True, status=status)

    def _get_task_for_tenant(self, task_id: int, tenant_id: int) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id).first()
        if not task:
            raise NotFoundError("Task not found")
        if task.tenant_id != tenant_id:
            raise AccessDeniedError("Access denied")
        return task
