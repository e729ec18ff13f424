from sqlalchemy.orm import Session
import logging

from ..models.person import Person
from ..models.task import Task
from ..utils.date_helpers import DateLike
from .completion_ledger import CompletionLedger
from .errors import AccessDeniedError, NotFoundError
from .progress_service import month_window, person_monthly_report, validate_month

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self, db: Session):
        self.db = db
        self.ledger = CompletionLedger(db)

    def get_monthly_report(
        self, person_id: int, tenant_id: int, year: int, month: int, as_of: DateLike
    ) -> dict:
        """Monthly report for one person, evaluated as of the caller's date"""

        validate_month(year, month)

        person = self.db.query(Person).filter(Person.id == person_id).first()
        if not person:
            raise NotFoundError("Person not found")
        if person.tenant_id != tenant_id:
            raise AccessDeniedError("Access denied")

        start, end, _ = month_window(year, month, as_of)

        tasks = (
            self.db.query(Task)
            .filter(Task.assigned_to_id == person.id, Task.tenant_id == tenant_id)
            .order_by(Task.display_order.asc(), Task.id.asc())
            .all()
        )
        completions = self.ledger.completions_for_tasks_in_range(
            [task.id for task in tasks], start, end
        )

        report = person_monthly_report(person, tasks, completions, year, month, as_of)
        logger.debug(
            f"Report for person {person.id} {year}-{month:02d}: "
            f"{report['total_points']} points"
        )
        return report
