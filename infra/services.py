from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.scheduling import CriticalPathAnalyzer, SchedulingEngine
from core.services.task import ScheduleTaskService
from infra.db.task import SqlAlchemyScheduleTaskRepository


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    task_service: ScheduleTaskService
    scheduling_engine: SchedulingEngine

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "task_service": self.task_service,
            "scheduling_engine": self.scheduling_engine,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    task_repo = SqlAlchemyScheduleTaskRepository(session)

    task_service = ScheduleTaskService(session, task_repo)
    scheduling_engine = SchedulingEngine(task_repo, analyzer=CriticalPathAnalyzer())

    return ServiceGraph(
        session=session,
        task_service=task_service,
        scheduling_engine=scheduling_engine,
    )


def build_service_dict(session: Session) -> dict[str, Any]:
    return build_service_graph(session).as_dict()
