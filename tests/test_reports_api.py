from datetime import date

import pytest

from tasktracker.models import Person, TaskCompletion


def add_completion(db_session, task, day, status="completed"):
    db_session.add(
        TaskCompletion(task_id=task.id, completed_date=date.fromisoformat(day), status=status)
    )
    db_session.commit()


def report_url(person_id, tenant_id, year=2025, month=12, local_date="2025-12-31"):
    return (
        f"/api/reports/{person_id}?tenant_id={tenant_id}"
        f"&year={year}&month={month}&local_date={local_date}"
    )


def test_monthly_report_counts_completed_and_excluded(client, db_session, tenant, person, make_task):
    task = make_task(title="Dishes", active_days="1,3,5", points=10, assigned_to=person)
    add_completion(db_session, task, "2025-12-01")
    add_completion(db_session, task, "2025-12-03", "excluded")

    response = client.get(report_url(person.id, tenant.id, local_date="2025-12-07"))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    report = body["data"]
    assert report["start_date"] == "2025-12-01"
    assert report["end_date"] == "2025-12-07"
    assert report["total_points"] == 10
    assert report["completion_count"] == 1

    summary = report["task_summaries"][0]
    assert summary["task_title"] == "Dishes"
    assert summary["possible_completions"] == 3
    assert summary["completed_count"] == 1
    assert summary["excluded_count"] == 1
    assert summary["percent_complete"] == 50

    assert [c["status"] for c in report["completions"]] == ["completed", "excluded"]
    assert report["completions"][1]["points"] == 0


def test_current_month_progress_is_prorated(client, db_session, tenant, person, make_task):
    person.point_goal = 300
    db_session.commit()
    task = make_task(active_days="0,1,2,3,4,5,6", points=50, assigned_to=person)
    for day in ("2025-11-03", "2025-11-07", "2025-11-14"):
        add_completion(db_session, task, day)

    response = client.get(
        report_url(person.id, tenant.id, year=2025, month=11, local_date="2025-11-15")
    )

    assert response.status_code == 200
    report = response.json()["data"]
    assert report["total_points"] == 150
    assert report["expected_points"] == 150.0
    assert report["progress"] == 100


def test_past_month_progress_uses_full_goal(client, db_session, tenant, person, make_task):
    person.point_goal = 300
    db_session.commit()
    task = make_task(active_days="0,1,2,3,4,5,6", points=50, assigned_to=person)
    for day in ("2025-11-03", "2025-11-07", "2025-11-14"):
        add_completion(db_session, task, day)

    response = client.get(
        report_url(person.id, tenant.id, year=2025, month=11, local_date="2025-12-02")
    )

    report = response.json()["data"]
    assert report["end_date"] == "2025-11-30"
    assert report["progress"] == 50


def test_only_the_persons_tasks_are_reported(client, db_session, tenant, person, make_task):
    bob = Person(name="Bob", tenant_id=tenant.id)
    db_session.add(bob)
    db_session.commit()
    make_task(title="Alice task", assigned_to=person)
    make_task(title="Bob task", assigned_to=bob)
    make_task(title="Nobody's task")

    response = client.get(report_url(person.id, tenant.id))

    titles = [s["task_title"] for s in response.json()["data"]["task_summaries"]]
    assert titles == ["Alice task"]


def test_report_for_other_tenants_person_is_forbidden(client, tenant, other_tenant, person):
    response = client.get(report_url(person.id, other_tenant.id))
    assert response.status_code == 403


def test_report_for_missing_person(client, tenant):
    response = client.get(report_url(9999, tenant.id))
    assert response.status_code == 404


@pytest.mark.parametrize(
    "year,month,local_date",
    [
        (2025, 13, "2025-12-31"),
        (2025, 0, "2025-12-31"),
        (2026, 1, "2025-12-31"),
        (2025, 12, "2025-12-32"),
        (2025, 12, "31/12/2025"),
        (2025, 12, "2025-12-10%0A"),  # trailing newline
    ],
)
def test_invalid_report_window_is_rejected(client, tenant, person, year, month, local_date):
    response = client.get(report_url(person.id, tenant.id, year, month, local_date))
    assert response.status_code == 400


def test_report_requires_tenant_scope(client, person):
    response = client.get(
        f"/api/reports/{person.id}?year=2025&month=12&local_date=2025-12-31"
    )
    assert response.status_code == 400
    assert response.json()["success"] is False
