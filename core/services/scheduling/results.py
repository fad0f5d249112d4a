from __future__ import annotations

from typing import Dict

from core.services.scheduling.models import CPMNode, CriticalPathResult, DependencyGraph


def build_critical_path_result(
    graph: DependencyGraph,
    es: Dict[str, int],
    ef: Dict[str, int],
    ls: Dict[str, int],
    lf: Dict[str, int],
    project_end: int,
    forward_iterations: int = 0,
    backward_iterations: int = 0,
) -> CriticalPathResult:
    nodes: Dict[str, CPMNode] = {}
    critical: list[str] = []

    for task_id, node in graph.nodes.items():
        slack = lf[task_id] - ef[task_id]
        is_critical = slack <= 0
        if is_critical:
            critical.append(task_id)
        nodes[task_id] = CPMNode(
            task_id=task_id,
            name=node.name,
            duration=node.duration,
            dependencies=node.dependencies,
            successors=node.successors,
            earliest_start=es[task_id],
            earliest_finish=ef[task_id],
            latest_start=ls[task_id],
            latest_finish=lf[task_id],
            slack=slack,
            is_critical=is_critical,
        )

    return CriticalPathResult(
        nodes=nodes,
        project_end=project_end,
        critical_task_ids=critical,
        dangling=list(graph.dangling),
        forward_iterations=forward_iterations,
        backward_iterations=backward_iterations,
    )


__all__ = ["build_critical_path_result"]
