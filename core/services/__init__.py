from .scheduling import CriticalPathAnalyzer, CriticalPathResult, SchedulingEngine
from .task import ScheduleProgressSummary, ScheduleTaskService

__all__ = [
    "ScheduleTaskService",
    "ScheduleProgressSummary",
    "CriticalPathAnalyzer",
    "CriticalPathResult",
    "SchedulingEngine",
]
