from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.models import ScheduleTask, ScheduleType


class ScheduleTaskRepository(ABC):
    @abstractmethod
    def add(self, task: ScheduleTask) -> None: ...

    @abstractmethod
    def add_many(self, tasks: List[ScheduleTask]) -> None: ...

    @abstractmethod
    def update(self, task: ScheduleTask) -> None: ...

    @abstractmethod
    def delete(self, task_id: str) -> None: ...

    @abstractmethod
    def get(self, task_id: str) -> Optional[ScheduleTask]: ...

    @abstractmethod
    def list_by_schedule(self, schedule_type: ScheduleType) -> List[ScheduleTask]: ...


__all__ = ["ScheduleTaskRepository"]
