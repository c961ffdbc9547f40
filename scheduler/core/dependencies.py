# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Wiring — build the repository and service for one CLI run.
No module-level singletons: each call returns fresh instances bound to a path.
"""

from pathlib import Path
from typing import Optional, Union

from scheduler.core.config import settings
from scheduler.repositories.schedule_repository import JSONScheduleRepository
from scheduler.services.schedule_service import ScheduleService


def get_schedule_repo(path: Optional[Union[str, Path]] = None) -> JSONScheduleRepository:
    return JSONScheduleRepository(path if path is not None else settings.STORAGE_FILE)


def get_schedule_service(path: Optional[Union[str, Path]] = None) -> ScheduleService:
    return ScheduleService(schedule_repo=get_schedule_repo(path))
