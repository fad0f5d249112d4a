from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import ScheduleTaskRepository
from core.models import ScheduleTask, ScheduleTaskPriority, ScheduleTaskStatus, ScheduleType


logger = logging.getLogger(__name__)


class TaskLifecycleMixin:
    _session: Session
    _task_repo: ScheduleTaskRepository

    def create_task(
        self,
        schedule_type: ScheduleType,
        name: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: ScheduleTaskStatus = ScheduleTaskStatus.NOT_STARTED,
        priority: Optional[ScheduleTaskPriority] = None,
        justification: str = "",
        assigned_to: str = "",
        progress: Optional[int] = None,
        dependencies: Optional[Iterable[str]] = None,
        observations: str = "",
    ) -> ScheduleTask:
        task = ScheduleTask.create(
            schedule_type=schedule_type,
            name=(name or "").strip(),
            start_date=start_date,
            end_date=end_date,
            status=status,
            priority=priority,
            justification=justification or "",
            assigned_to=assigned_to or "",
            progress=progress,
            dependencies=list(dependencies or []),
            observations=observations or "",
        )
        self._validate_task_fields(task)
        self._validate_dependencies(task)

        try:
            self._task_repo.add(task)
            self._session.commit()
            logger.info(f"Created schedule task {task.id} - {task.name} ({schedule_type.value})")
        except Exception as exc:
            self._session.rollback()
            logger.error(f"Error creating schedule task: {exc}")
            raise

        domain_events.tasks_changed.emit(schedule_type.value)
        return task

    def update_task(
        self,
        task_id: str,
        name: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        clear_dates: bool = False,
        clear_end_date: bool = False,
        status: Optional[ScheduleTaskStatus] = None,
        priority: Optional[ScheduleTaskPriority] = None,
        justification: Optional[str] = None,
        assigned_to: Optional[str] = None,
        progress: Optional[int] = None,
        dependencies: Optional[Iterable[str]] = None,
        observations: Optional[str] = None,
    ) -> ScheduleTask:
        """
        Partial update: arguments left as None keep their stored value.
        clear_dates turns the task into a phase header, clear_end_date into a milestone.
        """
        current = self._require_task(task_id)
        task = replace(current, dependencies=list(current.dependencies))

        if name is not None:
            task.name = name.strip()
        if clear_dates:
            task.start_date = None
            task.end_date = None
        else:
            if start_date is not None:
                task.start_date = start_date
            if clear_end_date:
                task.end_date = None
            elif end_date is not None:
                task.end_date = end_date
        if status is not None:
            task.status = status
        if priority is not None:
            task.priority = priority
        if justification is not None:
            task.justification = justification
        if assigned_to is not None:
            task.assigned_to = assigned_to
        if progress is not None:
            task.progress = progress
        if dependencies is not None:
            task.dependencies = list(dependencies)
        if observations is not None:
            task.observations = observations

        self._validate_task_fields(task)
        if dependencies is not None:
            self._validate_dependencies(task)

        self._save(task, action="Updated")
        return task

    def set_status(
        self,
        task_id: str,
        status: ScheduleTaskStatus,
        justification: Optional[str] = None,
    ) -> ScheduleTask:
        task = self._require_task(task_id)
        if justification is not None:
            task.justification = justification
        self._validate_status(status, task.justification)
        task.status = status
        self._save(task, action=f"Set status {status.value} on")
        return task

    def set_progress(self, task_id: str, progress: int) -> ScheduleTask:
        task = self._require_task(task_id)
        self._validate_progress(progress)
        task.progress = progress
        self._save(task, action=f"Set progress {progress}% on")
        return task

    def delete_task(self, task_id: str) -> None:
        # Other tasks keep their references to the deleted id; the analyzer
        # reports them as dangling.
        task = self._require_task(task_id)
        try:
            self._task_repo.delete(task_id)
            self._session.commit()
            logger.info(f"Deleted schedule task {task_id} - {task.name}")
        except Exception as exc:
            self._session.rollback()
            logger.error(f"Error deleting schedule task {task_id}: {exc}")
            raise

        domain_events.tasks_changed.emit(task.schedule_type.value)

    def _require_task(self, task_id: str) -> ScheduleTask:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        return task

    def _save(self, task: ScheduleTask, action: str) -> None:
        try:
            self._task_repo.update(task)
            self._session.commit()
            logger.info(f"{action} schedule task {task.id} - {task.name}")
        except Exception as exc:
            self._session.rollback()
            logger.error(f"Error saving schedule task {task.id}: {exc}")
            raise
        domain_events.tasks_changed.emit(task.schedule_type.value)
