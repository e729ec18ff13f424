"""
Month Seeder for Task Tracker
Fills a month with completions for every tenant's assigned tasks so the
reports and progress badges have something to show in development.

Usage:
    python seed_month.py 2025 12 --probability 0.8 --until 2025-12-20
"""

import argparse
import random
from typing import Optional

from sqlalchemy.orm import Session

from tasktracker.database import init_db, session_scope
from tasktracker.models import Person, Task, TaskCompletion, Tenant
from tasktracker.models.enums import CompletionStatus
from tasktracker.services.progress_service import validate_month
from tasktracker.utils.date_helpers import DateHelpers


class MonthSeeder:
    def __init__(self, db: Session, rng: Optional[random.Random] = None):
        self.db = db
        self.rng = rng or random.Random()

    def seed_month(
        self,
        year: int,
        month: int,
        probability: float = 0.8,
        until: Optional[str] = None,
    ) -> int:
        """Create completions for active days of the month.

        Existing cells are left alone. Nothing is committed here; the caller
        owns the transaction so a failure leaves the month untouched.
        """
        validate_month(year, month)
        start, end = DateHelpers.get_month_boundaries(year, month)
        if until is not None:
            end = min(end, DateHelpers.parse_date(until))

        created = 0
        for tenant in self.db.query(Tenant).order_by(Tenant.id).all():
            print(f"\nProcessing tenant: {tenant.name}")
            people = self.db.query(Person).filter(Person.tenant_id == tenant.id).all()

            for person in people:
                tasks = (
                    self.db.query(Task)
                    .filter(Task.assigned_to_id == person.id, Task.is_recurring == True)
                    .all()
                )
                print(f"  Person: {person.name} with {len(tasks)} tasks")

                for task in tasks:
                    created += self._seed_task(task, start, end, probability)

        self.db.flush()
        return created

    def _seed_task(self, task: Task, start, end, probability: float) -> int:
        active_days = task.active_day_set
        existing = {
            row.completed_date
            for row in self.db.query(TaskCompletion.completed_date)
            .filter(
                TaskCompletion.task_id == task.id,
                TaskCompletion.completed_date >= start,
                TaskCompletion.completed_date <= end,
            )
            .all()
        }

        created = 0
        for day in DateHelpers.days_in_range(start, end):
            if DateHelpers.day_of_week(day) not in active_days or day in existing:
                continue
            if self.rng.random() < probability:
                self.db.add(
                    TaskCompletion(
                        task_id=task.id,
                        completed_date=day,
                        status=CompletionStatus.COMPLETED.value,
                    )
                )
                created += 1

        print(f"    Task: {task.title} (+{created})")
        return created


def main():
    parser = argparse.ArgumentParser(description="Seed a month of completions")
    parser.add_argument("year", type=int)
    parser.add_argument("month", type=int)
    parser.add_argument("--probability", type=float, default=0.8)
    parser.add_argument("--until", help="Last date to seed, YYYY-MM-DD")
    parser.add_argument("--seed", type=int, help="Random seed for repeatable runs")
    args = parser.parse_args()

    print("🌱 Task Tracker Month Seeder")
    print("=" * 40)

    init_db()

    # One transaction: either the whole month is seeded or nothing is
    with session_scope() as db:
        seeder = MonthSeeder(db, rng=random.Random(args.seed))
        created = seeder.seed_month(
            args.year, args.month, probability=args.probability, until=args.until
        )

    print(f"\n✅ Created {created} completions for {args.year}-{args.month:02d}")


if __name__ == "__main__":
    main()
