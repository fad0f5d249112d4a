from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import ValidationError
from core.interfaces import ScheduleTaskRepository
from core.models import ScheduleTask, ScheduleTaskPriority, ScheduleTaskStatus, ScheduleType

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*[-+]?\d+")

# Values written by spreadsheets exported from the earlier Spanish-language tool.
_LEGACY_STATUS = {
    "por_iniciar": ScheduleTaskStatus.NOT_STARTED,
    "iniciada": ScheduleTaskStatus.STARTED,
    "en_ejecucion": ScheduleTaskStatus.IN_PROGRESS,
    "pausada": ScheduleTaskStatus.PAUSED,
    "ejecutada": ScheduleTaskStatus.DONE,
}
_LEGACY_PRIORITY = {
    "baja": ScheduleTaskPriority.LOW,
    "media": ScheduleTaskPriority.MEDIUM,
    "alta": ScheduleTaskPriority.HIGH,
    "urgente": ScheduleTaskPriority.URGENT,
}


def _field(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in row and row[key] not in (None, ""):
            return row[key]
    return None


def _parse_date(value: Any) -> date | None:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def _as_status(value: Any) -> ScheduleTaskStatus:
    if isinstance(value, ScheduleTaskStatus):
        return value
    text = str(value or "").strip()
    if text.lower() in _LEGACY_STATUS:
        return _LEGACY_STATUS[text.lower()]
    try:
        return ScheduleTaskStatus(text.upper())
    except ValueError:
        return ScheduleTaskStatus.NOT_STARTED


def _as_priority(value: Any) -> ScheduleTaskPriority:
    if isinstance(value, ScheduleTaskPriority):
        return value
    text = str(value or "").strip()
    if text.lower() in _LEGACY_PRIORITY:
        return _LEGACY_PRIORITY[text.lower()]
    try:
        return ScheduleTaskPriority(text.upper())
    except ValueError:
        return ScheduleTaskPriority.MEDIUM


def _as_progress(value: Any) -> int:
    """Leading integer of the cell, so "75%" gives 75 and "50.5" gives 50; anything else is 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, float):
        # blank spreadsheet cells arrive as NaN
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 0
    match = _LEADING_INT.match(str(value))
    return int(match.group(0)) if match else 0


def _as_dependencies(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    else:
        items = value
    return [str(item).strip() for item in items if str(item).strip()]


def task_from_row(schedule_type: ScheduleType, row: Mapping[str, Any]) -> ScheduleTask:
    """Build an unsaved task from one imported row, applying the import defaults."""
    return ScheduleTask.create(
        schedule_type=schedule_type,
        name=str(_field(row, "name") or "").strip(),
        start_date=_parse_date(_field(row, "startDate", "start_date")),
        end_date=_parse_date(_field(row, "endDate", "end_date")),
        status=_as_status(_field(row, "status")),
        priority=_as_priority(_field(row, "priority")),
        justification=str(_field(row, "justification") or ""),
        assigned_to=str(_field(row, "assignedTo", "assigned_to") or ""),
        progress=_as_progress(_field(row, "progress")),
        dependencies=_as_dependencies(_field(row, "dependencies")),
        observations=str(_field(row, "observations") or ""),
    )


class TaskBulkImportMixin:
    _session: Session
    _task_repo: ScheduleTaskRepository

    def bulk_import_tasks(
        self,
        schedule_type: ScheduleType,
        rows: Iterable[Mapping[str, Any]],
    ) -> List[ScheduleTask]:
        """
        All-or-nothing import of parsed rows. Rows without a name are skipped;
        any other invalid row rejects the whole batch.
        """
        tasks: List[ScheduleTask] = []
        errors: List[str] = []

        for index, row in enumerate(rows, start=1):
            if not str(_field(row, "name") or "").strip():
                continue
            task = task_from_row(schedule_type, row)
            try:
                self._validate_task_fields(task)
            except ValidationError as exc:
                errors.append(f"Row {index}: {exc}")
                continue
            tasks.append(task)

        if errors:
            raise ValidationError(
                "Some imported tasks are invalid:\n" + "\n".join(errors),
                code="BULK_IMPORT_INVALID",
            )
        if not tasks:
            raise ValidationError("There are no valid tasks to import.", code="BULK_IMPORT_EMPTY")

        try:
            self._task_repo.add_many(tasks)
            self._session.commit()
            logger.info(f"Imported {len(tasks)} tasks into the {schedule_type.value} schedule")
        except Exception as exc:
            self._session.rollback()
            logger.error(f"Error importing schedule tasks: {exc}")
            raise

        domain_events.tasks_changed.emit(schedule_type.value)
        return tasks


__all__ = ["TaskBulkImportMixin", "task_from_row"]
