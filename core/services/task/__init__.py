from core.services.task.models import ScheduleProgressSummary
from core.services.task.service import ScheduleTaskService

__all__ = ["ScheduleTaskService", "ScheduleProgressSummary"]
