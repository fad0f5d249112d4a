from __future__ import annotations

import os

from sqlalchemy.orm import Session

from core.interfaces import ScheduleTaskRepository
from core.services.task.bulk_import import TaskBulkImportMixin
from core.services.task.lifecycle import TaskLifecycleMixin
from core.services.task.query import TaskQueryMixin
from core.services.task.validation import TaskValidationMixin

DEFAULT_DUE_SOON_DAYS = 10


def _due_soon_days_from_env() -> int:
    raw = os.getenv("ISL_DUE_SOON_DAYS", "").strip()
    try:
        return int(raw) if raw else DEFAULT_DUE_SOON_DAYS
    except ValueError:
        return DEFAULT_DUE_SOON_DAYS


class ScheduleTaskService(
    TaskLifecycleMixin,
    TaskBulkImportMixin,
    TaskQueryMixin,
    TaskValidationMixin,
):
    def __init__(
        self,
        session: Session,
        task_repo: ScheduleTaskRepository,
    ):
        self._session: Session = session
        self._task_repo: ScheduleTaskRepository = task_repo
        self._due_soon_days: int = _due_soon_days_from_env()
