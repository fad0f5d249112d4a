"""Change notifications for schedule data; listeners re-run the analysis."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.tasks_changed: Signal[str] = Signal()  # schedule_type value


# SINGLE global instance
domain_events = DomainEvents()
