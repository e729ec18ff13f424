from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from tasktracker.services.errors import InvalidRangeError
from tasktracker.services.progress_service import (
    expected_points,
    month_window,
    percent_complete,
    person_month_progress,
    person_monthly_report,
    points_in_range,
    task_summary,
)


def make_task(task_id=1, title="Dishes", active_days="1,3,5", points=10, money=None):
    return SimpleNamespace(
        id=task_id, title=title, active_days=active_days, points=points, money=money
    )


def done(day, status="completed"):
    return SimpleNamespace(completed_date=date.fromisoformat(day), status=status)


def test_task_summary_first_week_of_december():
    task = make_task(active_days="1,3,5", points=10)
    completions = [done("2025-12-01"), done("2025-12-03", "excluded")]

    stats = task_summary(task, completions, "2025-12-01", "2025-12-07")

    assert stats.possible_completions == 3
    assert stats.completed_count == 1
    assert stats.excluded_count == 1
    assert stats.adjusted_possible == 2
    assert stats.percent_complete == 50
    assert stats.points_per_completion == 10
    assert stats.total_points == 10


def test_task_summary_ignores_completions_outside_range():
    task = make_task()
    completions = [done("2025-11-28"), done("2025-12-01"), done("2025-12-08")]

    stats = task_summary(task, completions, "2025-12-01", "2025-12-07")

    assert stats.completed_count == 1


def test_excluded_days_never_earn_points_or_money():
    task = make_task(points=5, money=Decimal("1.25"))
    completions = [done("2025-12-01"), done("2025-12-03", "excluded"), done("2025-12-05")]

    stats = task_summary(task, completions, "2025-12-01", "2025-12-07")

    assert stats.total_points == 10
    assert stats.total_money == Decimal("2.50")


def test_task_without_points_totals_zero():
    stats = task_summary(make_task(points=None), [done("2025-12-01")], "2025-12-01", "2025-12-07")
    assert stats.points_per_completion == 0
    assert stats.total_points == 0


def test_percent_complete_rounds_half_up():
    assert percent_complete(1, 0, 8) == 13  # 12.5
    assert percent_complete(1, 0, 3) == 33
    assert percent_complete(2, 0, 3) == 67


def test_percent_complete_is_zero_without_adjusted_possible():
    assert percent_complete(0, 0, 0) == 0
    assert percent_complete(0, 3, 3) == 0
    assert percent_complete(2, 3, 3) == 0


def test_percent_complete_is_not_clamped():
    # Backdated completions on inactive days can exceed the possible count
    assert percent_complete(5, 0, 3) == 167


def test_points_in_range_sums_tasks():
    tasks = [make_task(1, points=10), make_task(2, points=3, active_days="0,1,2,3,4,5,6")]
    completions = {
        1: [done("2025-12-01"), done("2025-12-03")],
        2: [done("2025-12-02"), done("2025-12-04", "excluded")],
    }

    assert points_in_range(tasks, completions, date(2025, 12, 1), date(2025, 12, 7)) == 23


def test_prorated_progress_mid_month():
    # Nov 2025 has 30 days; on the 15th half the goal is expected
    assert expected_points(300, "2025-11-15") == Decimal(150)
    assert person_month_progress(300, 150, "2025-11-15") == 100
    assert person_month_progress(300, 75, "2025-11-15") == 50


def test_progress_is_undefined_without_goal():
    assert person_month_progress(None, 100, "2025-11-15") is None
    assert person_month_progress(0, 100, "2025-11-15") is None
    assert expected_points(0, "2025-11-15") is None


def test_month_window_current_month_ends_at_as_of():
    assert month_window(2025, 12, "2025-12-10") == (date(2025, 12, 1), date(2025, 12, 10), True)


def test_month_window_past_month_runs_to_last_day():
    assert month_window(2024, 2, "2025-12-10") == (date(2024, 2, 1), date(2024, 2, 29), False)


@pytest.mark.parametrize(
    "year,month",
    [(2026, 1), (2025, 13), (2025, 0), (1969, 5), (10000, 1)],
)
def test_month_window_rejects_out_of_range(year, month):
    with pytest.raises(InvalidRangeError):
        month_window(year, month, "2025-12-10")


def test_monthly_report_sorts_by_completed_count_stably():
    person = SimpleNamespace(id=7, name="Alice", point_goal=None)
    tasks = [
        make_task(1, "Trash", active_days="0,1,2,3,4,5,6"),
        make_task(2, "Dishes", active_days="0,1,2,3,4,5,6"),
        make_task(3, "Laundry", active_days="0,1,2,3,4,5,6"),
    ]
    completions = {
        1: [done("2025-11-03")],
        2: [done("2025-11-03"), done("2025-11-04")],
        3: [done("2025-11-05")],
    }

    report = person_monthly_report(person, tasks, completions, 2025, 11, "2025-12-10")

    assert [s["task_id"] for s in report["task_summaries"]] == [2, 1, 3]
    assert report["progress"] == 0
    assert report["expected_points"] is None


def test_monthly_report_past_month_uses_full_goal():
    person = SimpleNamespace(id=7, name="Alice", point_goal=200)
    tasks = [make_task(1, points=10, active_days="0,1,2,3,4,5,6")]
    completions = {1: [done(f"2025-11-{day:02d}") for day in range(1, 16)]}

    report = person_monthly_report(person, tasks, completions, 2025, 11, "2025-12-10")

    assert report["end_date"] == date(2025, 11, 30)
    assert report["total_points"] == 150
    assert report["completion_count"] == 15
    assert report["expected_points"] == 200.0
    assert report["progress"] == 75


def test_monthly_report_current_month_prorates_goal():
    person = SimpleNamespace(id=7, name="Alice", point_goal=300)
    tasks = [make_task(1, points=50, active_days="0,1,2,3,4,5,6")]
    completions = {1: [done("2025-11-02"), done("2025-11-09"), done("2025-11-15"), done("2025-11-20")]}

    report = person_monthly_report(person, tasks, completions, 2025, 11, "2025-11-15")

    # The 20th is after as-of and is not counted
    assert report["end_date"] == date(2025, 11, 15)
    assert report["total_points"] == 150
    assert report["expected_points"] == 150.0
    assert report["progress"] == 100
    assert report["task_summaries"][0]["possible_completions"] == 15


def test_monthly_report_completion_details_sorted_by_date():
    person = SimpleNamespace(id=7, name="Alice", point_goal=None)
    tasks = [make_task(1, "Trash", points=4), make_task(2, "Dishes", points=6)]
    completions = {
        1: [done("2025-12-05"), done("2025-12-01", "excluded")],
        2: [done("2025-12-03")],
    }

    report = person_monthly_report(person, tasks, completions, 2025, 12, "2025-12-31")

    details = report["completions"]
    assert [d["completed_date"] for d in details] == [
        date(2025, 12, 1),
        date(2025, 12, 3),
        date(2025, 12, 5),
    ]
    assert details[0]["points"] == 0
    assert details[1]["points"] == 6
    assert report["total_points"] == 10
