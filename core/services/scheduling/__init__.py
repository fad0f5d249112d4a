from .analyzer import CriticalPathAnalyzer
from .engine import SchedulingEngine
from .models import CPMNode, CriticalPathResult, DanglingDependency

__all__ = [
    "CriticalPathAnalyzer",
    "SchedulingEngine",
    "CPMNode",
    "CriticalPathResult",
    "DanglingDependency",
]
