from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from core.exceptions import CyclicDependencyError
from core.models import ScheduleTask
from core.services.scheduling.graph import build_dependency_graph, find_dependency_cycle
from core.services.scheduling.models import CriticalPathResult
from core.services.scheduling.passes import run_backward_pass, run_forward_pass
from core.services.scheduling.results import build_critical_path_result

logger = logging.getLogger(__name__)


def default_iteration_cap(node_count: int) -> int:
    fallback = max(100, 2 * node_count + 2)
    configured = os.getenv("ISL_CPM_MAX_ITERATIONS", "").strip()
    if not configured:
        return fallback
    try:
        return max(1, int(configured))
    except ValueError:
        logger.warning(f"Ignoring ISL_CPM_MAX_ITERATIONS={configured!r}; using {fallback}")
        return fallback


class CriticalPathAnalyzer:
    """
    Critical path analysis over a snapshot of schedule tasks:
    - phase headers (no start date) are excluded
    - forward pass: ES/EF, backward pass: LS/LF
    - slack = LF - EF, critical when slack <= 0

    Pure computation: the input tasks are never modified.
    """

    def __init__(self, max_iterations: Optional[int] = None):
        self._max_iterations: Optional[int] = max_iterations

    def analyze(self, tasks: Iterable[ScheduleTask]) -> CriticalPathResult:
        graph = build_dependency_graph(tasks)
        if not graph.nodes:
            return CriticalPathResult(dangling=list(graph.dangling))

        for dangling in graph.dangling:
            logger.warning(
                "Task %s depends on %s, which is not a dated task; ignoring that dependency.",
                dangling.task_id,
                dangling.dependency_id,
            )

        cycle = find_dependency_cycle(graph)
        if cycle is not None:
            names = " -> ".join(graph.nodes[task_id].name for task_id in cycle)
            raise CyclicDependencyError(
                f"Cannot analyze schedule: circular dependency detected ({names}).",
                cycle=cycle,
            )

        if self._max_iterations is not None:
            cap = self._max_iterations
        else:
            cap = default_iteration_cap(len(graph))
        es, ef, project_end, forward_iterations = run_forward_pass(graph, cap)
        ls, lf, backward_iterations = run_backward_pass(graph, project_end, cap)

        result = build_critical_path_result(
            graph=graph,
            es=es,
            ef=ef,
            ls=ls,
            lf=lf,
            project_end=project_end,
            forward_iterations=forward_iterations,
            backward_iterations=backward_iterations,
        )
        logger.debug(
            "Critical path: %d of %d tasks critical, project end day %d",
            len(result.critical_task_ids),
            len(result.nodes),
            project_end,
        )
        return result


__all__ = ["CriticalPathAnalyzer", "default_iteration_cap"]
