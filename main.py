# main.py
import logging

from infra.db.base import SessionLocal
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.operational_support import bind_trace_id
from infra.path import database_url
from infra.services import ServiceGraph, build_service_graph

from core.exceptions import DomainError
from core.models import ScheduleType

logger = logging.getLogger(__name__)


def build_services() -> ServiceGraph:
    run_migrations(db_url=database_url())
    session = SessionLocal()
    return build_service_graph(session)


def main() -> int:
    setup_logging()
    services = build_services()
    exit_code = 0
    try:
        for schedule_type in ScheduleType:
            with bind_trace_id():
                try:
                    result = services.scheduling_engine.analyze_schedule(schedule_type)
                except DomainError as exc:
                    logger.error(f"{schedule_type.value} schedule: {exc} [{exc.code}]")
                    exit_code = 1
                    continue
                critical = [result.nodes[task_id].name for task_id in result.critical_task_ids]
                logger.info(
                    f"{schedule_type.value} schedule ends on day {result.project_end}; "
                    f"critical path: {', '.join(critical) or '-'}"
                )
    finally:
        services.session.close()
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
