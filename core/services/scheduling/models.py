from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class DanglingDependency:
    task_id: str
    dependency_id: str


@dataclass(frozen=True)
class GraphNode:
    task_id: str
    name: str
    duration: int
    dependencies: tuple[str, ...] = ()
    successors: tuple[str, ...] = ()


@dataclass(frozen=True)
class DependencyGraph:
    nodes: Dict[str, GraphNode]
    dangling: List[DanglingDependency] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True)
class CPMNode:
    """Timing of one schedulable task; all values are day offsets from day 0."""

    task_id: str
    name: str
    duration: int
    dependencies: tuple[str, ...]
    successors: tuple[str, ...]
    earliest_start: int
    earliest_finish: int
    latest_start: int
    latest_finish: int
    slack: int
    is_critical: bool


@dataclass
class CriticalPathResult:
    nodes: Dict[str, CPMNode] = field(default_factory=dict)
    project_end: int = 0
    critical_task_ids: List[str] = field(default_factory=list)
    dangling: List[DanglingDependency] = field(default_factory=list)
    forward_iterations: int = 0
    backward_iterations: int = 0

    def get(self, task_id: str) -> Optional[CPMNode]:
        return self.nodes.get(task_id)

    def is_critical(self, task_id: str) -> bool:
        node = self.nodes.get(task_id)
        return bool(node and node.is_critical)


__all__ = [
    "DanglingDependency",
    "GraphNode",
    "DependencyGraph",
    "CPMNode",
    "CriticalPathResult",
]
