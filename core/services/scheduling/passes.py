from __future__ import annotations

from typing import Dict

from core.exceptions import ScheduleConvergenceError
from core.services.scheduling.models import DependencyGraph


def run_forward_pass(
    graph: DependencyGraph,
    max_iterations: int,
) -> tuple[Dict[str, int], Dict[str, int], int, int]:
    """
    Earliest times by fixed-point iteration.

    Every iteration derives a fresh ES/EF map from the previous one, so the
    node map needs no topological order. Returns (es, ef, project_end, iterations).
    """
    es: Dict[str, int] = {task_id: 0 for task_id in graph.nodes}
    ef: Dict[str, int] = {task_id: node.duration for task_id, node in graph.nodes.items()}

    iterations = 0
    changed = bool(graph.nodes)
    while changed:
        if iterations >= max_iterations:
            raise ScheduleConvergenceError(
                f"Forward pass did not converge after {iterations} iterations.",
                iterations=iterations,
            )
        iterations += 1
        changed = False
        next_es: Dict[str, int] = {}
        next_ef: Dict[str, int] = {}
        for task_id, node in graph.nodes.items():
            start = max((ef[dep_id] for dep_id in node.dependencies), default=0)
            finish = start + node.duration
            next_es[task_id] = start
            next_ef[task_id] = finish
            if start != es[task_id] or finish != ef[task_id]:
                changed = True
        es, ef = next_es, next_ef

    project_end = max(ef.values(), default=0)
    return es, ef, project_end, iterations


def run_backward_pass(
    graph: DependencyGraph,
    project_end: int,
    max_iterations: int,
) -> tuple[Dict[str, int], Dict[str, int], int]:
    """
    Latest times, same convergence pattern as the forward pass.
    End nodes (no successors) finish at project_end. Returns (ls, lf, iterations).
    """
    lf: Dict[str, int] = {task_id: project_end for task_id in graph.nodes}
    ls: Dict[str, int] = {
        task_id: project_end - node.duration for task_id, node in graph.nodes.items()
    }

    iterations = 0
    changed = bool(graph.nodes)
    while changed:
        if iterations >= max_iterations:
            raise ScheduleConvergenceError(
                f"Backward pass did not converge after {iterations} iterations.",
                iterations=iterations,
            )
        iterations += 1
        changed = False
        next_ls: Dict[str, int] = {}
        next_lf: Dict[str, int] = {}
        for task_id, node in graph.nodes.items():
            finish = min((ls[succ_id] for succ_id in node.successors), default=project_end)
            start = finish - node.duration
            next_lf[task_id] = finish
            next_ls[task_id] = start
            if start != ls[task_id] or finish != lf[task_id]:
                changed = True
        ls, lf = next_ls, next_lf

    return ls, lf, iterations


__all__ = ["run_forward_pass", "run_backward_pass"]
