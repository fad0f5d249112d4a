from __future__ import annotations

from dataclasses import dataclass, field

from core.models import ScheduleTaskStatus


@dataclass
class ScheduleProgressSummary:
    total_tasks: int = 0
    phase_headers: int = 0
    milestones: int = 0
    by_status: dict[ScheduleTaskStatus, int] = field(default_factory=dict)
    average_progress: float = 0.0

    @property
    def schedulable_tasks(self) -> int:
        return self.total_tasks - self.phase_headers

    @property
    def done_tasks(self) -> int:
        return self.by_status.get(ScheduleTaskStatus.DONE, 0)


__all__ = ["ScheduleProgressSummary"]
