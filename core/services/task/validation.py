from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from core.exceptions import BusinessRuleError, ValidationError
from core.interfaces import ScheduleTaskRepository
from core.models import ScheduleTask, ScheduleTaskStatus


class TaskValidationMixin:
    _task_repo: ScheduleTaskRepository

    def _validate_task_name(self, name: str) -> None:
        if not (name or "").strip():
            raise ValidationError("Task name cannot be empty.", code="TASK_NAME_EMPTY")
        if len(name.strip()) < 3:
            raise ValidationError(
                "Task name must be at least 3 characters.", code="TASK_NAME_TOO_SHORT"
            )

    def _validate_dates(self, start_date: Optional[date], end_date: Optional[date]) -> None:
        if end_date and not start_date:
            raise ValidationError(
                "A task with an end date needs a start date.",
                code="TASK_END_WITHOUT_START",
            )
        if start_date and end_date and end_date < start_date:
            raise ValidationError(
                f"Task end date ({end_date}) cannot be before start date ({start_date}).",
                code="TASK_INVALID_DATE",
            )

    def _validate_status(self, status: ScheduleTaskStatus, justification: Optional[str]) -> None:
        if status == ScheduleTaskStatus.PAUSED and not (justification or "").strip():
            raise ValidationError(
                "A justification is required when the task is paused.",
                code="TASK_JUSTIFICATION_REQUIRED",
            )

    def _validate_progress(self, progress: Optional[int]) -> None:
        if progress is None:
            return
        if progress < 0 or progress > 100:
            raise ValidationError(
                "Task progress must be between 0 and 100.", code="TASK_INVALID_PROGRESS"
            )

    def _validate_task_fields(self, task: ScheduleTask) -> None:
        self._validate_task_name(task.name)
        self._validate_dates(task.start_date, task.end_date)
        self._validate_status(task.status, task.justification)
        self._validate_progress(task.progress)

    def _validate_dependencies(self, task: ScheduleTask) -> None:
        """
        Dependencies of a single saved task must name dated tasks of the same
        schedule and must not close a cycle.
        """
        if not task.dependencies:
            return
        if task.id in task.dependencies:
            raise ValidationError("A task cannot depend on itself.", code="DEPENDENCY_SELF")

        tasks_by_id: Dict[str, ScheduleTask] = {
            t.id: t for t in self._task_repo.list_by_schedule(task.schedule_type)
        }
        for dep_id in task.dependencies:
            dep = tasks_by_id.get(dep_id)
            if dep is None:
                raise ValidationError(
                    f"Dependency '{dep_id}' does not exist in this schedule.",
                    code="DEPENDENCY_NOT_FOUND",
                )
            if dep.is_phase_header:
                raise ValidationError(
                    f"'{dep.name}' is a phase header and cannot be a dependency.",
                    code="DEPENDENCY_NOT_SCHEDULABLE",
                )

        self._check_no_circular_dependency(task, tasks_by_id)

    def _check_no_circular_dependency(
        self, task: ScheduleTask, tasks_by_id: Dict[str, ScheduleTask]
    ) -> None:
        # predecessor -> successors, with the task's stored edges replaced by the new ones
        graph: dict[str, list[str]] = {}
        for other in tasks_by_id.values():
            if other.id == task.id:
                continue
            for dep_id in other.dependencies or []:
                graph.setdefault(dep_id, []).append(other.id)

        targets = set(task.dependencies)
        stack = [task.id]
        visited = set()

        while stack:
            cur = stack.pop()
            if cur in targets:
                raise BusinessRuleError(
                    "These dependencies would create a circular dependency.",
                    code="DEPENDENCY_CYCLE",
                )
            if cur in visited:
                continue
            visited.add(cur)
            for nxt in graph.get(cur, []):
                if nxt not in visited:
                    stack.append(nxt)
