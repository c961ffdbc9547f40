# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Schedule data access.
Encapsulates all read/write operations on the schedules JSON file.
Every write is a full load-mutate-save cycle; nothing is cached between calls.
NO business rules here — pure CRUD.
"""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from scheduler.core.config import settings
from scheduler.core.errors import (
    ScheduleNotFoundError,
    StorageIOError,
    StorageParseError,
    StoreError,
)
from scheduler.core.logging import get_logger
from scheduler.models.domain import Schedule, ScheduleFields, ScheduleList

logger = get_logger(__name__)

EMPTY_DOCUMENT = "[]"


class JSONScheduleRepository:
    """Schedule records stored as a single JSON array on disk.

    Not safe under concurrent invocation: two processes racing on the same
    file can produce colliding ids, and the last writer wins. Writes are not
    atomic; a crash mid-write can leave the file truncated.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ── Lifecycle ──

    def initialize(self) -> None:
        """Create the file holding an empty array if it does not exist yet."""
        try:
            if self._path.exists():
                return
            self._path.write_text(EMPTY_DOCUMENT, encoding=settings.STORAGE_ENCODING)
        except OSError as exc:
            raise StorageIOError(
                "cannot create schedules file",
                operation="initialize",
                path=str(self._path),
                cause=exc,
            ) from exc
        logger.info("Schedules file created", extra={"path": str(self._path)})

    # ── Read ──

    def read_all(self) -> list[Schedule]:
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise StorageIOError(
                "cannot read schedules file",
                operation="read_all",
                path=str(self._path),
                cause=exc,
            ) from exc

        try:
            data = json.loads(raw.decode(settings.STORAGE_ENCODING))
            schedules = ScheduleList.validate_python(data)
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            raise StorageParseError(
                "cannot parse schedules file",
                operation="read_all",
                path=str(self._path),
                cause=exc,
            ) from exc

        seen: set[int] = set()
        for schedule in schedules:
            if schedule.id in seen:
                raise StorageParseError(
                    f"duplicate schedule id {schedule.id}",
                    operation="read_all",
                    schedule_id=schedule.id,
                    path=str(self._path),
                )
            seen.add(schedule.id)
        return schedules

    # ── Write ──

    def save_all(self, schedules: list[Schedule]) -> None:
        """Overwrite the whole file with ``schedules``, pretty-printed."""
        document = json.dumps(
            [s.to_document() for s in schedules],
            indent=settings.JSON_INDENT,
            ensure_ascii=False,
        )
        try:
            self._path.write_text(document, encoding=settings.STORAGE_ENCODING)
        except OSError as exc:
            raise StorageIOError(
                "cannot write schedules file",
                operation="save_all",
                path=str(self._path),
                cause=exc,
            ) from exc

    def create(self, fields: ScheduleFields) -> Schedule:
        """Append a new record with id = max existing id + 1 (1 when empty)."""
        schedules = self._load("create")
        next_id = max((s.id for s in schedules), default=0) + 1
        schedule = Schedule(id=next_id, **fields.field_values())
        schedules.append(schedule)
        self._save("create", schedules)
        return schedule

    def update(self, schedule_id: int, fields: ScheduleFields) -> Schedule:
        """Replace every field of the record with ``schedule_id`` except the id."""
        schedules = self._load("update", schedule_id)
        index = self._index_of(schedules, schedule_id)
        if index is None:
            raise ScheduleNotFoundError(schedule_id, operation="update", path=str(self._path))
        schedule = Schedule(id=schedule_id, **fields.field_values())
        schedules[index] = schedule
        self._save("update", schedules, schedule_id)
        return schedule

    def delete(self, schedule_id: int) -> Schedule:
        """Remove the record with ``schedule_id``, keeping the others in order."""
        schedules = self._load("delete", schedule_id)
        index = self._index_of(schedules, schedule_id)
        if index is None:
            raise ScheduleNotFoundError(schedule_id, operation="delete", path=str(self._path))
        removed = schedules.pop(index)
        self._save("delete", schedules, schedule_id)
        return removed

    # ── Internal ──

    @staticmethod
    def _index_of(schedules: list[Schedule], schedule_id: int) -> Optional[int]:
        for i, schedule in enumerate(schedules):
            if schedule.id == schedule_id:
                return i
        return None

    def _load(self, operation: str, schedule_id: Optional[int] = None) -> list[Schedule]:
        try:
            return self.read_all()
        except StoreError as exc:
            raise self._retag(exc, operation, schedule_id) from exc.cause

    def _save(self, operation: str, schedules: list[Schedule], schedule_id: Optional[int] = None) -> None:
        try:
            self.save_all(schedules)
        except StoreError as exc:
            raise self._retag(exc, operation, schedule_id) from exc.cause

    @staticmethod
    def _retag(exc: StoreError, operation: str, schedule_id: Optional[int]) -> StoreError:
        retagged = exc.with_operation(operation)
        if retagged.schedule_id is None:
            retagged.schedule_id = schedule_id
        return retagged
