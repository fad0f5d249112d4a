from datetime import date

import pytest

from core.exceptions import ScheduleConvergenceError
from core.models import ScheduleTask, ScheduleType
from core.services.scheduling.graph import build_dependency_graph, find_dependency_cycle
from core.services.scheduling.passes import run_backward_pass, run_forward_pass


def _task(task_id, start=None, end=None, deps=()):
    return ScheduleTask(
        id=task_id,
        schedule_type=ScheduleType.SUPERVISION,
        name=f"Task {task_id}",
        start_date=start,
        end_date=end,
        dependencies=list(deps),
    )


def test_graph_dedupes_dependencies_and_links_successors():
    tasks = [
        _task("a", date(2024, 2, 1), date(2024, 2, 2)),
        _task("b", date(2024, 2, 3), date(2024, 2, 3), deps=["a", "a"]),
        _task("c", date(2024, 2, 4), date(2024, 2, 6), deps=["a", "b"]),
    ]

    graph = build_dependency_graph(tasks)

    assert len(graph) == 3
    assert graph.nodes["b"].dependencies == ("a",)
    assert graph.nodes["a"].successors == ("b", "c")
    assert graph.nodes["c"].duration == 3
    assert graph.dangling == []


def test_graph_keeps_first_task_for_duplicate_ids():
    first = _task("a", date(2024, 2, 1), date(2024, 2, 1))
    second = _task("a", date(2024, 2, 1), date(2024, 2, 10))

    graph = build_dependency_graph([first, second])

    assert len(graph) == 1
    assert graph.nodes["a"].duration == 1


def test_find_cycle_returns_none_for_acyclic_graph():
    graph = build_dependency_graph(
        [
            _task("a", date(2024, 2, 1)),
            _task("b", date(2024, 2, 2), deps=["a"]),
            _task("c", date(2024, 2, 3), deps=["a", "b"]),
        ]
    )
    assert find_dependency_cycle(graph) is None


def test_find_cycle_reports_path_in_precedence_order():
    graph = build_dependency_graph(
        [
            _task("a", date(2024, 2, 1), deps=["c"]),
            _task("b", date(2024, 2, 2), deps=["a"]),
            _task("c", date(2024, 2, 3), deps=["b"]),
            _task("d", date(2024, 2, 4), deps=["c"]),
        ]
    )

    cycle = find_dependency_cycle(graph)

    assert cycle == ["a", "b", "c", "a"]


def test_forward_pass_raises_when_graph_never_settles():
    graph = build_dependency_graph(
        [
            _task("a", date(2024, 2, 1), deps=["b"]),
            _task("b", date(2024, 2, 2), deps=["a"]),
        ]
    )

    with pytest.raises(ScheduleConvergenceError) as exc:
        run_forward_pass(graph, max_iterations=5)

    assert exc.value.iterations == 5


def test_passes_on_empty_graph_do_no_work():
    graph = build_dependency_graph([])

    es, ef, project_end, forward_iterations = run_forward_pass(graph, max_iterations=10)
    ls, lf, backward_iterations = run_backward_pass(graph, project_end, max_iterations=10)

    assert (es, ef, ls, lf) == ({}, {}, {}, {})
    assert project_end == 0
    assert forward_iterations == 0
    assert backward_iterations == 0


def test_backward_pass_sinks_finish_at_project_end():
    graph = build_dependency_graph(
        [
            _task("a", date(2024, 2, 1), date(2024, 2, 4)),
            _task("b", date(2024, 2, 5), date(2024, 2, 5), deps=["a"]),
            _task("c", date(2024, 2, 1), date(2024, 2, 2)),
        ]
    )

    es, ef, project_end, _ = run_forward_pass(graph, max_iterations=10)
    ls, lf, _ = run_backward_pass(graph, project_end, max_iterations=10)

    assert project_end == 5
    assert lf["b"] == 5 and lf["c"] == 5
    assert lf["a"] == ls["b"] == 4
    assert ls["c"] == 3
