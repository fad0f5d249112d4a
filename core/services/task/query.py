from __future__ import annotations

from datetime import date
from typing import List, Optional

from core.exceptions import NotFoundError
from core.interfaces import ScheduleTaskRepository
from core.models import ScheduleTask, ScheduleTaskStatus, ScheduleType
from core.services.task.models import ScheduleProgressSummary


class TaskQueryMixin:
    _task_repo: ScheduleTaskRepository
    _due_soon_days: int

    def list_tasks(self, schedule_type: ScheduleType) -> List[ScheduleTask]:
        return self._task_repo.list_by_schedule(schedule_type)

    def get_task(self, task_id: str) -> ScheduleTask:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        return task

    def query_tasks(
        self,
        schedule_type: ScheduleType,
        status: ScheduleTaskStatus | None = None,
        assigned_to: str | None = None,
        include_phase_headers: bool = True,
    ) -> List[ScheduleTask]:
        tasks = self._task_repo.list_by_schedule(schedule_type)

        if not include_phase_headers:
            tasks = [t for t in tasks if not t.is_phase_header]
        if status:
            tasks = [t for t in tasks if not t.is_phase_header and t.status == status]
        if assigned_to:
            needle = assigned_to.strip().lower()
            tasks = [t for t in tasks if (t.assigned_to or "").strip().lower() == needle]

        return tasks

    def list_due_soon(
        self,
        schedule_type: ScheduleType,
        today: Optional[date] = None,
        within_days: Optional[int] = None,
    ) -> List[ScheduleTask]:
        """Unfinished tasks ending within the window, overdue ones included, soonest first."""
        today = today or date.today()
        window = self._due_soon_days if within_days is None else within_days

        due = [
            t
            for t in self._task_repo.list_by_schedule(schedule_type)
            if t.start_date
            and t.end_date
            and t.status != ScheduleTaskStatus.DONE
            and (t.end_date - today).days <= window
        ]
        due.sort(key=lambda t: (t.end_date, t.name.lower()))
        return due

    def progress_summary(self, schedule_type: ScheduleType) -> ScheduleProgressSummary:
        tasks = self._task_repo.list_by_schedule(schedule_type)
        summary = ScheduleProgressSummary(total_tasks=len(tasks))

        progress_values: list[int] = []
        for task in tasks:
            if task.is_phase_header:
                summary.phase_headers += 1
                continue
            if task.is_milestone:
                summary.milestones += 1
            summary.by_status[task.status] = summary.by_status.get(task.status, 0) + 1
            progress_values.append(task.effective_progress)

        if progress_values:
            summary.average_progress = round(sum(progress_values) / len(progress_values), 1)
        return summary
