from __future__ import annotations

from enum import Enum


class ScheduleTaskStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    STARTED = "STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    PAUSED = "PAUSED"
    DONE = "DONE"


class ScheduleTaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class ScheduleType(str, Enum):
    PROJECT = "PROJECT"
    SUPERVISION = "SUPERVISION"


__all__ = ["ScheduleTaskStatus", "ScheduleTaskPriority", "ScheduleType"]
