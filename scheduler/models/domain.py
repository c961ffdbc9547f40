# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO storage or CLI dependency.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, field_validator


class ScheduleFields(BaseModel):
    """The user-editable part of a schedule record (everything but the id)."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(..., description="Free-form title")
    time: StrictStr = Field(..., description="Free-form time, not validated")
    details: Optional[StrictStr] = Field(default=None, description="Optional notes")

    @field_validator("details", mode="before")
    @classmethod
    def empty_details_to_none(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    def field_values(self) -> dict[str, Any]:
        """Title/time/details only, even when called on a full Schedule."""
        return {"title": self.title, "time": self.time, "details": self.details}


class Schedule(ScheduleFields):
    """A stored schedule record. ``id`` is assigned by the store."""

    id: StrictInt = Field(..., description="Store-assigned identifier")

    def to_document(self) -> dict[str, Any]:
        """On-disk form: keys in id/title/time/details order, details omitted when absent."""
        document: dict[str, Any] = {"id": self.id, "title": self.title, "time": self.time}
        if self.details:
            document["details"] = self.details
        return document


ScheduleList = TypeAdapter(list[Schedule])
