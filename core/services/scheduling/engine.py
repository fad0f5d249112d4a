# core/services/scheduling/engine.py
from __future__ import annotations

import logging
from typing import List, Optional

from core.interfaces import ScheduleTaskRepository
from core.models import ScheduleType
from core.services.scheduling.analyzer import CriticalPathAnalyzer
from core.services.scheduling.models import CriticalPathResult

logger = logging.getLogger(__name__)


class SchedulingEngine:
    """
    Runs critical path analysis over the stored tasks of one schedule.
    Read-only: nothing computed here is written back.
    """

    def __init__(
        self,
        task_repo: ScheduleTaskRepository,
        analyzer: Optional[CriticalPathAnalyzer] = None,
    ):
        self._task_repo: ScheduleTaskRepository = task_repo
        self._analyzer: CriticalPathAnalyzer = analyzer or CriticalPathAnalyzer()

    def analyze_schedule(self, schedule_type: ScheduleType) -> CriticalPathResult:
        tasks = self._task_repo.list_by_schedule(schedule_type)
        result = self._analyzer.analyze(tasks)
        logger.info(
            f"Analyzed {schedule_type.value} schedule: {len(result.nodes)} dated tasks, "
            f"{len(result.critical_task_ids)} critical, {len(result.dangling)} dangling dependencies"
        )
        return result

    def critical_task_ids(self, schedule_type: ScheduleType) -> List[str]:
        return self.analyze_schedule(schedule_type).critical_task_ids
