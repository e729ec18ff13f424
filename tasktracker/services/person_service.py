from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Any, Dict, List
import logging

from ..models.person import Person
from ..models.task import Task
from ..models.tenant import Tenant
from ..schemas.person import PersonCreate, PersonUpdate
from ..utils.date_helpers import DateHelpers, DateLike
from .completion_ledger import CompletionLedger
from .errors import AccessDeniedError, ConflictError, NotFoundError
from .progress_service import person_month_progress, points_in_range

logger = logging.getLogger(__name__)


class PersonService:
    def __init__(self, db: Session):
        self.db = db

    def list_people(self, tenant_id: int, as_of: DateLike) -> List[Dict[str, Any]]:
        """People of a tenant with month-to-date points and prorated progress"""

        month_start, today = DateHelpers.get_month_to_date(as_of)
        people = (
            self.db.query(Person)
            .filter(Person.tenant_id == tenant_id)
            .order_by(Person.name.asc())
            .all()
        )

        ledger = CompletionLedger(self.db)
        result = []
        for person in people:
            tasks = person.tasks
            completions = ledger.completions_for_tasks_in_range(
                [task.id for task in tasks], month_start, today
            )
            current_month_points = points_in_range(
                tasks, completions, month_start, today
            )
            result.append(
                {
                    "id": person.id,
                    "name": person.name,
                    "color": person.color,
                    "point_goal": person.point_goal,
                    "tenant_id": person.tenant_id,
                    "created_at": person.created_at,
                    "current_month_points": current_month_points,
                    "progress": person_month_progress(
                        person.point_goal, current_month_points, today
                    ),
                }
            )
        return result

    def get_person(self, person_id: int, tenant_id: int) -> Person:
        return self._get_person_for_tenant(person_id, tenant_id)

    def create_person(self, tenant_id: int, person_data: PersonCreate) -> Person:
        if not self.db.query(Tenant).filter(Tenant.id == tenant_id).first():
            raise NotFoundError("Tenant not found")

        try:
            person = Person(
                name=person_data.name,
                color=person_data.color or None,
                point_goal=None,
                tenant_id=tenant_id,
            )
            self.db.add(person)
            self.db.commit()
            self.db.refresh(person)
            return person

        except IntegrityError:
            self.db.rollback()
            raise ConflictError("A person with this name already exists")

    def update_person(
        self, person_id: int, tenant_id: int, person_updates: PersonUpdate
    ) -> Person:
        person = self._get_person_for_tenant(person_id, tenant_id)

        try:
            update_data = person_updates.model_dump(exclude_unset=True)
            if "name" in update_data and update_data["name"] is not None:
                person.name = update_data["name"]
            if "color" in update_data:
                person.color = update_data["color"] or None

            self.db.commit()
            self.db.refresh(person)
            return person

        except IntegrityError:
            self.db.rollback()
            raise ConflictError("A person with this name already exists")

    def update_point_goal(self, person_id: int, tenant_id: int, point_goal: int) -> Person:
        person = self._get_person_for_tenant(person_id, tenant_id)

        try:
            person.point_goal = point_goal
            self.db.commit()
            self.db.refresh(person)
            return person
        except Exception:
            self.db.rollback()
            raise

    def delete_person(self, person_id: int, tenant_id: int) -> None:
        """Delete a person; their tasks stay with the tenant, unassigned"""

        person = self._get_person_for_tenant(person_id, tenant_id)

        try:
            unassigned = (
                self.db.query(Task)
                .filter(Task.assigned_to_id == person.id)
                .update({Task.assigned_to_id: None}, synchronize_session="fetch")
            )
            self.db.delete(person)
            self.db.commit()
            logger.info(f"Deleted person {person_id}, unassigned {unassigned} tasks")

        except Exception:
            self.db.rollback()
            raise

    def _get_person_for_tenant(self, person_id: int, tenant_id: int) -> Person:
        person = self.db.query(Person).filter(Person.id == person_id).first()
        if not person:
            raise NotFoundError("Person not found")
        if person.tenant_id != tenant_id:
            raise AccessDeniedError("Access denied")
        return person
