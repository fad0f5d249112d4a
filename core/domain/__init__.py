from core.domain.enums import ScheduleTaskPriority, ScheduleTaskStatus, ScheduleType
from core.domain.identifiers import generate_id
from core.domain.task import ScheduleTask

__all__ = [
    "generate_id",
    "ScheduleTaskStatus",
    "ScheduleTaskPriority",
    "ScheduleType",
    "ScheduleTask",
]
