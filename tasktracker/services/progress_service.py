"""Points and progress calculations.

Everything here is pure: callers hand in tasks, their completion rows and
the caller's local date, and get numbers back. Nothing reads the clock or
the database, so the dashboard, the people list and the monthly report
all agree as long as they pass the same inputs.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..models.enums import CompletionStatus
from ..utils.active_days import count_active_days_in_range
from ..utils.constants import AppConstants
from ..utils.date_helpers import DateHelpers, DateLike
from ..utils.service_helpers import round_currency, round_half_up
from .errors import InvalidRangeError


@dataclass
class TaskStats:
    task_id: int
    task_title: str
    completed_count: int
    excluded_count: int
    possible_completions: int
    percent_complete: int
    points_per_completion: int
    total_points: int
    total_money: Decimal = field(default_factory=lambda: Decimal("0.00"))

    @property
    def adjusted_possible(self) -> int:
        return self.possible_completions - self.excluded_count


def _in_range(completions: Iterable, start: date, end: date) -> List:
    return [c for c in completions if start <= c.completed_date <= end]


def percent_complete(completed_count: int, excluded_count: int, possible: int) -> int:
    """Share of non-excluded possible days that were completed.

    Not clamped: backdated entries can push it past 100.
    """
    adjusted_possible = possible - excluded_count
    if adjusted_possible <= 0:
        return 0
    return round_half_up(100 * completed_count, adjusted_possible)


def task_summary(
    task, completions: Iterable, start_date: DateLike, end_date: DateLike
) -> TaskStats:
    """Completion statistics for one task over an inclusive date range"""
    start = DateHelpers.parse_date(start_date)
    end = DateHelpers.parse_date(end_date)
    rows = _in_range(completions, start, end)

    completed_count = sum(
        1 for c in rows if c.status == CompletionStatus.COMPLETED.value
    )
    excluded_count = sum(1 for c in rows if c.status == CompletionStatus.EXCLUDED.value)
    possible = count_active_days_in_range(task.active_days, start, end)
    points_per_completion = task.points or 0
    money_per_completion = task.money or Decimal("0")

    return TaskStats(
        task_id=task.id,
        task_title=task.title,
        completed_count=completed_count,
        excluded_count=excluded_count,
        possible_completions=possible,
        percent_complete=percent_complete(completed_count, excluded_count, possible),
        points_per_completion=points_per_completion,
        total_points=points_per_completion * completed_count,
        total_money=round_currency(money_per_completion * completed_count),
    )


def points_in_range(
    tasks: Sequence, completions_by_task: Dict[int, List], start: date, end: date
) -> int:
    """Points earned from completed (never excluded) days in range"""
    return sum(
        task_summary(task, completions_by_task.get(task.id, []), start, end).total_points
        for task in tasks
    )


def expected_points(point_goal: Optional[int], as_of: DateLike) -> Optional[Decimal]:
    """Monthly goal prorated by how much of the month has elapsed"""
    if not point_goal:
        return None
    as_of_date = DateHelpers.parse_date(as_of)
    days_in_month = DateHelpers.last_day_of_month(as_of_date.year, as_of_date.month)
    return Decimal(point_goal) * Decimal(as_of_date.day) / Decimal(days_in_month)


def person_month_progress(
    point_goal: Optional[int], current_month_points: int, as_of: DateLike
) -> Optional[int]:
    """Month-to-date points as a percentage of the prorated goal.

    None means no progress can be shown (no goal, or a zero goal).
    """
    if not point_goal:
        return None
    as_of_date = DateHelpers.parse_date(as_of)
    days_in_month = DateHelpers.last_day_of_month(as_of_date.year, as_of_date.month)

    # 100 * points / (goal * day / days_in_month), kept in integers
    denominator = point_goal * as_of_date.day
    if denominator == 0:
        return None
    return round_half_up(100 * current_month_points * days_in_month, denominator)


def validate_month(year: int, month: int) -> None:
    if not AppConstants.MIN_REPORT_YEAR <= year <= AppConstants.MAX_REPORT_YEAR:
        raise InvalidRangeError(f"Year out of range: {year}")
    if not 1 <= month <= 12:
        raise InvalidRangeError(f"Month out of range: {month}")


def month_window(year: int, month: int, as_of: DateLike) -> Tuple[date, date, bool]:
    """Reporting window for a month as seen on ``as_of``.

    Returns (start, end, is_current_month). The current month ends at
    ``as_of``; past months run through their last calendar day.
    """
    validate_month(year, month)
    as_of_date = DateHelpers.parse_date(as_of)
    start, last_day = DateHelpers.get_month_boundaries(year, month)

    if start > as_of_date:
        raise InvalidRangeError(
            f"{year}-{month:02d} has not started as of {DateHelpers.format_date(as_of_date)}"
        )
    if as_of_date <= last_day:
        return start, as_of_date, True
    return start, last_day, False


def person_monthly_report(
    person,
    tasks: Sequence,
    completions_by_task: Dict[int, List],
    year: int,
    month: int,
    as_of: DateLike,
) -> dict:
    """Assemble a person's month: per-task stats, day detail and goal progress"""
    start, end, is_current = month_window(year, month, as_of)

    summaries = [
        task_summary(task, completions_by_task.get(task.id, []), start, end)
        for task in tasks
    ]
    # sorted() is stable, ties keep task order
    summaries = sorted(summaries, key=lambda s: -s.completed_count)

    completion_details = []
    for task in tasks:
        for completion in _in_range(completions_by_task.get(task.id, []), start, end):
            is_completed = completion.status == CompletionStatus.COMPLETED.value
            completion_details.append(
                {
                    "task_id": task.id,
                    "task_title": task.title,
                    "completed_date": completion.completed_date,
                    "status": completion.status,
                    "points": (task.points or 0) if is_completed else 0,
                    "money": round_currency(
                        (task.money or 0) if is_completed else 0
                    ),
                }
            )
    completion_details.sort(key=lambda d: d["completed_date"])

    total_points = sum(s.total_points for s in summaries)
    point_goal = person.point_goal or 0

    if is_current:
        expected = expected_points(point_goal, end)
        progress = person_month_progress(point_goal, total_points, end) or 0
    else:
        expected = Decimal(point_goal) if point_goal else None
        progress = round_half_up(100 * total_points, point_goal) if point_goal else 0

    return {
        "person": {"id": person.id, "name": person.name, "point_goal": point_goal},
        "year": year,
        "month": month,
        "start_date": start,
        "end_date": end,
        "total_points": total_points,
        "total_money": round_currency(sum(s.total_money for s in summaries)),
        "completion_count": sum(s.completed_count for s in summaries),
        "expected_points": (
            float(expected.quantize(Decimal("0.01"))) if expected is not None else None
        ),
        "task_summaries": [vars(s).copy() for s in summaries],
        "completions": completion_details,
        "progress": progress,
    }
