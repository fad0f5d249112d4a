from datetime import date

from core.models import ScheduleTaskStatus, ScheduleType

PROJECT = ScheduleType.PROJECT


def _seed(ts):
    header = ts.create_task(PROJECT, "PHASE 1 - Checks")
    overdue = ts.create_task(
        PROJECT, "Overdue check", start_date=date(2024, 5, 1), end_date=date(2024, 5, 3), assigned_to="Ana"
    )
    soon = ts.create_task(
        PROJECT,
        "Soon check",
        start_date=date(2024, 5, 1),
        end_date=date(2024, 5, 15),
        status=ScheduleTaskStatus.IN_PROGRESS,
        progress=50,
        assigned_to="ana ",
    )
    later = ts.create_task(PROJECT, "Later check", start_date=date(2024, 5, 1), end_date=date(2024, 6, 30))
    done = ts.create_task(
        PROJECT,
        "Done check",
        start_date=date(2024, 5, 1),
        end_date=date(2024, 5, 9),
        status=ScheduleTaskStatus.DONE,
    )
    milestone = ts.create_task(PROJECT, "Milestone check", start_date=date(2024, 5, 12))
    return header, overdue, soon, later, done, milestone


def test_query_tasks_filters(services):
    ts = services["task_service"]
    header, overdue, soon, later, done, milestone = _seed(ts)

    assert len(ts.query_tasks(PROJECT)) == 6
    assert header not in ts.query_tasks(PROJECT, include_phase_headers=False)
    assert ts.query_tasks(PROJECT, status=ScheduleTaskStatus.DONE) == [done]
    assert [t.id for t in ts.query_tasks(PROJECT, assigned_to="ANA")] == [overdue.id, soon.id]
    assert ts.query_tasks(ScheduleType.SUPERVISION) == []


def test_list_due_soon_includes_overdue_and_skips_done(services):
    ts = services["task_service"]
    _, overdue, soon, later, done, milestone = _seed(ts)

    due = ts.list_due_soon(PROJECT, today=date(2024, 5, 8))

    assert [t.id for t in due] == [overdue.id, soon.id]
    assert ts.list_due_soon(PROJECT, today=date(2024, 5, 8), within_days=0) == [overdue]


def test_due_soon_window_comes_from_environment(services, monkeypatch):
    monkeypatch.setenv("ISL_DUE_SOON_DAYS", "60")
    from core.services.task import ScheduleTaskService
    from infra.db.task import SqlAlchemyScheduleTaskRepository

    session = services["session"]
    ts = ScheduleTaskService(session, SqlAlchemyScheduleTaskRepository(session))
    _, overdue, soon, later, done, milestone = _seed(ts)

    due = ts.list_due_soon(PROJECT, today=date(2024, 5, 8))

    assert [t.id for t in due] == [overdue.id, soon.id, later.id]


def test_progress_summary(services):
    ts = services["task_service"]
    _seed(ts)

    summary = ts.progress_summary(PROJECT)

    assert summary.total_tasks == 6
    assert summary.phase_headers == 1
    assert summary.schedulable_tasks == 5
    assert summary.milestones == 1
    assert summary.done_tasks == 1
    assert summary.by_status[ScheduleTaskStatus.NOT_STARTED] == 3
    # (0 + 50 + 0 + 100 + 0) / 5
    assert summary.average_progress == 30.0


def test_progress_summary_of_empty_schedule(services):
    summary = services["task_service"].progress_summary(ScheduleType.SUPERVISION)

    assert summary.total_tasks == 0
    assert summary.average_progress == 0.0
