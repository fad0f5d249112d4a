# infra/db/models.py
from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import (
    JSON,
    String,
    Date,
    Enum as SAEnum,
    Index,
    Integer,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import (
    ScheduleTaskPriority,
    ScheduleTaskStatus,
    ScheduleType,
)


class ScheduleTaskORM(Base):
    __tablename__ = "schedule_tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    schedule_type: Mapped[ScheduleType] = mapped_column(SAEnum(ScheduleType), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[ScheduleTaskStatus] = mapped_column(
        SAEnum(ScheduleTaskStatus), default=ScheduleTaskStatus.NOT_STARTED, nullable=False
    )
    priority: Mapped[Optional[ScheduleTaskPriority]] = mapped_column(
        SAEnum(ScheduleTaskPriority), nullable=True
    )
    justification: Mapped[Optional[str]] = mapped_column(String, nullable=True, default="")
    assigned_to: Mapped[Optional[str]] = mapped_column(String, nullable=True, default="")
    progress: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # ordered ids of other tasks; not foreign keys, deleted targets stay referenced
    dependencies: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    observations: Mapped[Optional[str]] = mapped_column(String, nullable=True, default="")
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))

Index("idx_schedule_tasks_type", ScheduleTaskORM.schedule_type)
