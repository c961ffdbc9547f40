# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Schedule management — use cases behind the CLI commands.
Builds validated records, delegates persistence to the repository, logs outcomes.
"""

from typing import Optional

from scheduler.core.errors import ScheduleNotFoundError
from scheduler.core.logging import get_logger
from scheduler.models.domain import Schedule, ScheduleFields
from scheduler.repositories.schedule_repository import JSONScheduleRepository

logger = get_logger(__name__)


class ScheduleService:
    """Business logic for schedule management."""

    def __init__(self, schedule_repo: JSONScheduleRepository) -> None:
        self._schedules = schedule_repo

    # ── Lifecycle ──

    def prepare_storage(self) -> None:
        self._schedules.initialize()

    # ── Commands ──

    def add_schedule(self, title: str, time: str, details: Optional[str] = None) -> Schedule:
        """Create a schedule. Raises StoreError."""
        schedule = self._schedules.create(
            ScheduleFields(title=title, time=time, details=details)
        )
        logger.info(
            "Schedule created: id=%d, title=%s",
            schedule.id,
            schedule.title,
            extra={"operation": "create", "schedule_id": schedule.id},
        )
        return schedule

    def edit_schedule(
        self,
        schedule_id: int,
        title: str,
        time: str,
        details: Optional[str] = None,
    ) -> Schedule:
        """Replace a schedule's fields. Raises ScheduleNotFoundError / StoreError."""
        try:
            schedule = self._schedules.update(
                schedule_id, ScheduleFields(title=title, time=time, details=details)
            )
        except ScheduleNotFoundError:
            logger.info(
                "Schedule not found for update: id=%d",
                schedule_id,
                extra={"operation": "update", "schedule_id": schedule_id},
            )
            raise
        logger.info(
            "Schedule updated: id=%d",
            schedule_id,
            extra={"operation": "update", "schedule_id": schedule_id},
        )
        return schedule

    def delete_schedule(self, schedule_id: int) -> Schedule:
        """Delete a schedule. Raises ScheduleNotFoundError / StoreError."""
        try:
            removed = self._schedules.delete(schedule_id)
        except ScheduleNotFoundError:
            logger.info(
                "Schedule not found for delete: id=%d",
                schedule_id,
                extra={"operation": "delete", "schedule_id": schedule_id},
            )
            raise
        logger.info(
            "Schedule deleted: id=%d",
            schedule_id,
            extra={"operation": "delete", "schedule_id": schedule_id},
        )
        return removed

    # ── Queries ──

    def list_schedules(self) -> list[Schedule]:
        return self._schedules.read_all()
