from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from core.domain.enums import ScheduleTaskPriority, ScheduleTaskStatus, ScheduleType
from core.domain.identifiers import generate_id


@dataclass
class ScheduleTask:
    """
    One row of a schedule.

    - no start date      => phase header (grouping label, never analysed)
    - start date only,
      or end == start    => milestone
    - otherwise          => regular task spanning start..end inclusive
    """

    id: str
    schedule_type: ScheduleType
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: ScheduleTaskStatus = ScheduleTaskStatus.NOT_STARTED
    priority: Optional[ScheduleTaskPriority] = None
    justification: str = ""
    assigned_to: str = ""
    progress: Optional[int] = None
    dependencies: list[str] = field(default_factory=list)
    observations: str = ""

    @property
    def is_phase_header(self) -> bool:
        return self.start_date is None

    @property
    def is_milestone(self) -> bool:
        if self.start_date is None:
            return False
        return self.end_date is None or self.end_date == self.start_date

    @property
    def duration_days(self) -> Optional[int]:
        # Inclusive of both endpoints, so a milestone counts as one day.
        if self.start_date is None:
            return None
        end = self.end_date or self.start_date
        return (end - self.start_date).days + 1

    @property
    def effective_progress(self) -> int:
        if self.status == ScheduleTaskStatus.DONE:
            return 100
        return int(self.progress or 0)

    @staticmethod
    def create(schedule_type: ScheduleType, name: str, **extra) -> "ScheduleTask":
        return ScheduleTask(
            id=generate_id(),
            schedule_type=schedule_type,
            name=name,
            **extra,
        )


__all__ = ["ScheduleTask"]
