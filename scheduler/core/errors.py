# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Storage error kinds.

Every failure of the record store surfaces as a ``StoreError`` subclass
tagged with an ``ErrorKind`` and carrying the operation that failed, the
schedule id it targeted (if any), the backing file path and the underlying
cause. Callers branch on the subclass or on ``kind``; nothing is retried.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    IO = "io"
    PARSE = "parse"
    NOT_FOUND = "not_found"


class StoreError(Exception):
    """Base class for all record store failures."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        schedule_id: Optional[int] = None,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.schedule_id = schedule_id
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        text = self.message
        if self.cause is not None:
            text = f"{text}: {self.cause}"
        return text

    def with_operation(self, operation: str) -> "StoreError":
        """Return a copy of this error re-tagged with the outer operation."""
        return type(self)(
            self.message,
            operation=operation,
            schedule_id=self.schedule_id,
            path=self.path,
            cause=self.cause,
        )


class StorageIOError(StoreError):
    """The backing file could not be read or written."""

    kind = ErrorKind.IO


class StorageParseError(StoreError):
    """The backing file is not a valid JSON array of schedule records."""

    kind = ErrorKind.PARSE


class ScheduleNotFoundError(StoreError):
    """No record with the requested id exists."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, schedule_id: int, *, operation: str, path: Optional[str] = None) -> None:
        super().__init__(
            f"schedule not found: id {schedule_id}",
            operation=operation,
            schedule_id=schedule_id,
            path=path,
        )

    def with_operation(self, operation: str) -> "ScheduleNotFoundError":
        return ScheduleNotFoundError(self.schedule_id, operation=operation, path=self.path)
