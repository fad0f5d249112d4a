from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.interfaces import ScheduleTaskRepository
from core.models import ScheduleTask, ScheduleType
from infra.db.models import ScheduleTaskORM
from infra.db.task.mapper import task_from_orm, task_to_orm


class SqlAlchemyScheduleTaskRepository(ScheduleTaskRepository):
    """Tasks are listed in the order they were added (position column)."""

    def __init__(self, session: Session):
        self.session = session

    def _next_position(self) -> int:
        current = self.session.execute(select(func.max(ScheduleTaskORM.position))).scalar()
        return int(current or 0) + 1

    def add(self, task: ScheduleTask) -> None:
        self.session.add(task_to_orm(task, position=self._next_position()))

    def add_many(self, tasks: List[ScheduleTask]) -> None:
        start = self._next_position()
        self.session.add_all(
            [task_to_orm(task, position=start + offset) for offset, task in enumerate(tasks)]
        )

    def update(self, task: ScheduleTask) -> None:
        existing = self.session.get(ScheduleTaskORM, task.id)
        position = existing.position if existing is not None else self._next_position()
        self.session.merge(task_to_orm(task, position=position))

    def delete(self, task_id: str) -> None:
        self.session.query(ScheduleTaskORM).filter_by(id=task_id).delete()

    def get(self, task_id: str) -> Optional[ScheduleTask]:
        obj = self.session.get(ScheduleTaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_by_schedule(self, schedule_type: ScheduleType) -> List[ScheduleTask]:
        stmt = (
            select(ScheduleTaskORM)
            .where(ScheduleTaskORM.schedule_type == schedule_type)
            .order_by(ScheduleTaskORM.position, ScheduleTaskORM.id)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyScheduleTaskRepository"]
