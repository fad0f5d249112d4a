from __future__ import annotations

from core.models import ScheduleTask
from infra.db.models import ScheduleTaskORM


def task_to_orm(task: ScheduleTask, position: int = 0) -> ScheduleTaskORM:
    return ScheduleTaskORM(
        id=task.id,
        schedule_type=task.schedule_type,
        name=task.name,
        start_date=task.start_date,
        # an end date is meaningless without a start date
        end_date=task.end_date if task.start_date else None,
        status=task.status,
        priority=task.priority,
        justification=task.justification or "",
        assigned_to=task.assigned_to or "",
        progress=task.progress,
        dependencies=list(task.dependencies or []),
        observations=task.observations or "",
        position=position,
    )


def task_from_orm(obj: ScheduleTaskORM) -> ScheduleTask:
    return ScheduleTask(
        id=obj.id,
        schedule_type=obj.schedule_type,
        name=obj.name,
        start_date=obj.start_date,
        end_date=obj.end_date,
        status=obj.status,
        priority=obj.priority,
        justification=obj.justification or "",
        assigned_to=obj.assigned_to or "",
        progress=obj.progress,
        dependencies=list(obj.dependencies or []),
        observations=obj.observations or "",
    )


__all__ = ["task_to_orm", "task_from_orm"]
