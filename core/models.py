from __future__ import annotations

from core.domain import (
    ScheduleTask,
    ScheduleTaskPriority,
    ScheduleTaskStatus,
    ScheduleType,
    generate_id,
)

__all__ = [
    "generate_id",
    "ScheduleTaskStatus",
    "ScheduleTaskPriority",
    "ScheduleType",
    "ScheduleTask",
]
