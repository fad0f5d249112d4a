from datetime import date

import pytest

from core.events.domain_events import domain_events
from core.exceptions import ValidationError
from core.models import ScheduleTaskPriority, ScheduleTaskStatus, ScheduleType

PROJECT = ScheduleType.PROJECT


def test_create_task_persists_all_fields(services):
    ts = services["task_service"]
    first = ts.create_task(PROJECT, "Survey roof", start_date=date(2024, 3, 4))

    task = ts.create_task(
        PROJECT,
        "Repair gutters",
        start_date=date(2024, 3, 5),
        end_date=date(2024, 3, 8),
        status=ScheduleTaskStatus.IN_PROGRESS,
        priority=ScheduleTaskPriority.HIGH,
        assigned_to="R. Okafor",
        progress=40,
        dependencies=[first.id],
        observations="Use ladder truck",
    )

    stored = ts.get_task(task.id)
    assert stored == task
    assert stored.duration_days == 4
    assert stored.dependencies == [first.id]
    assert stored.priority == ScheduleTaskPriority.HIGH


def test_update_task_changes_only_given_fields(services):
    ts = services["task_service"]
    task = ts.create_task(
        PROJECT,
        "Inspect boiler",
        start_date=date(2024, 3, 4),
        end_date=date(2024, 3, 6),
        assigned_to="J. Silva",
    )

    updated = ts.update_task(task.id, name="Inspect boiler room", progress=25)

    assert updated.name == "Inspect boiler room"
    assert updated.progress == 25
    assert updated.assigned_to == "J. Silva"
    assert updated.end_date == date(2024, 3, 6)


def test_update_task_can_turn_task_into_milestone_or_header(services):
    ts = services["task_service"]
    task = ts.create_task(PROJECT, "Hand over keys", start_date=date(2024, 3, 4), end_date=date(2024, 3, 6))

    milestone = ts.update_task(task.id, clear_end_date=True)
    assert milestone.is_milestone
    assert milestone.duration_days == 1

    header = ts.update_task(task.id, clear_dates=True)
    assert header.is_phase_header
    assert ts.get_task(task.id).end_date is None


def test_done_status_counts_as_full_progress(services):
    ts = services["task_service"]
    task = ts.create_task(PROJECT, "Final report", start_date=date(2024, 3, 4), progress=30)

    done = ts.set_status(task.id, ScheduleTaskStatus.DONE)

    assert done.progress == 30
    assert done.effective_progress == 100


def test_delete_task_keeps_references_of_other_tasks(services):
    ts = services["task_service"]
    a = ts.create_task(PROJECT, "Order parts", start_date=date(2024, 3, 4))
    b = ts.create_task(PROJECT, "Fit parts", start_date=date(2024, 3, 5), dependencies=[a.id])

    ts.delete_task(a.id)

    assert [t.id for t in ts.list_tasks(PROJECT)] == [b.id]
    assert ts.get_task(b.id).dependencies == [a.id]


def test_every_mutation_emits_tasks_changed(services):
    ts = services["task_service"]
    seen: list[str] = []

    with domain_events.tasks_changed.connected(seen.append):
        task = ts.create_task(ScheduleType.SUPERVISION, "Weekly visit", start_date=date(2024, 3, 4))
        ts.update_task(task.id, observations="Bring camera")
        ts.set_status(task.id, ScheduleTaskStatus.STARTED)
        ts.set_progress(task.id, 10)
        ts.delete_task(task.id)

    assert seen == ["SUPERVISION"] * 5


def test_rejected_mutation_emits_nothing(services):
    ts = services["task_service"]
    seen: list[str] = []

    with domain_events.tasks_changed.connected(seen.append):
        with pytest.raises(ValidationError):
            ts.create_task(PROJECT, "No")

    assert seen == []
