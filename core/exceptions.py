# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., circular dependencies)."""


class CyclicDependencyError(BusinessRuleError):
    """Raised when the schedule graph contains a dependency cycle."""
    def __init__(self, message: str, *, cycle: list[str], code: str | None = "SCHEDULE_CYCLE"):
        super().__init__(message, code=code)
        self.cycle = list(cycle)


class ScheduleConvergenceError(BusinessRuleError):
    """Raised when a CPM pass does not settle within its iteration cap."""
    def __init__(self, message: str, *, iterations: int, code: str | None = "SCHEDULE_NOT_CONVERGED"):
        super().__init__(message, code=code)
        self.iterations = iterations
