from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.models import ScheduleTask
from core.services.scheduling.models import DanglingDependency, DependencyGraph, GraphNode

_WHITE, _GREY, _BLACK = 0, 1, 2


def build_dependency_graph(tasks: Iterable[ScheduleTask]) -> DependencyGraph:
    """
    Node map of every task with a start date, keyed by id in input order.

    Dependencies that point outside the map (unknown ids, phase headers) are
    dropped from the edges and reported as dangling.
    """
    schedulable: Dict[str, ScheduleTask] = {}
    for task in tasks:
        if task.is_phase_header:
            continue
        schedulable.setdefault(task.id, task)

    dangling: List[DanglingDependency] = []
    deps_by_id: Dict[str, List[str]] = {}
    for task_id, task in schedulable.items():
        resolved: List[str] = []
        for dep_id in task.dependencies or []:
            if dep_id not in schedulable:
                dangling.append(DanglingDependency(task_id=task_id, dependency_id=dep_id))
                continue
            if dep_id not in resolved:
                resolved.append(dep_id)
        deps_by_id[task_id] = resolved

    successors: Dict[str, List[str]] = {task_id: [] for task_id in schedulable}
    for task_id, deps in deps_by_id.items():
        for dep_id in deps:
            successors[dep_id].append(task_id)

    nodes = {
        task_id: GraphNode(
            task_id=task_id,
            name=task.name,
            duration=int(task.duration_days or 0),
            dependencies=tuple(deps_by_id[task_id]),
            successors=tuple(successors[task_id]),
        )
        for task_id, task in schedulable.items()
    }
    return DependencyGraph(nodes=nodes, dangling=dangling)


def find_dependency_cycle(graph: DependencyGraph) -> Optional[List[str]]:
    """
    Three-colour DFS along successor edges.
    Returns the cycle as [a, b, ..., a] in precedence order, or None.
    """
    color: Dict[str, int] = {task_id: _WHITE for task_id in graph.nodes}

    for root in graph.nodes:
        if color[root] != _WHITE:
            continue
        color[root] = _GREY
        path: List[str] = [root]
        stack = [iter(graph.nodes[root].successors)]

        while stack:
            advanced = False
            for child in stack[-1]:
                if color[child] == _GREY:
                    return path[path.index(child):] + [child]
                if color[child] == _WHITE:
                    color[child] = _GREY
                    path.append(child)
                    stack.append(iter(graph.nodes[child].successors))
                    advanced = True
                    break
            if not advanced:
                color[path.pop()] = _BLACK
                stack.pop()

    return None


__all__ = ["build_dependency_graph", "find_dependency_cycle"]
