# /club_admin/models/common.py

"""
Building blocks shared by every entity contract: calendar-day coercion,
the partial-update base model and small response envelopes.
"""

from datetime import date, datetime
from typing import Annotated, Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, BeforeValidator, model_validator


def calendar_day(value: Any) -> date:
    """
    Reduce a `date`, a `datetime` or an ISO-8601 string (date-only or
    date-time, with or without an offset) to its calendar day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValueError(f"Invalid date value: {value!r}") from None
    raise ValueError(f"Expected a date, datetime or ISO date string, got {type(value).__name__}")


def same_calendar_day(left: Any, right: Any) -> bool:
    """True when both values fall on the same year/month/day, ignoring time of day."""
    return calendar_day(left) == calendar_day(right)


# A date field that tolerates time-of-day noise and string input.
CalendarDate = Annotated[date, BeforeValidator(calendar_day)]


class NoUpdateDataError(ValueError):
    """Raised when a partial update carries no fields at all."""


class PartialModel(BaseModel):
    """
    Base class for partial-update payloads.

    Omitted fields are left untouched by the store. Fields listed in
    `nullable_fields` may be explicitly cleared with `null`; every other
    field rejects an explicit `null`, because the stored record requires it.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_cleared_required_fields(self):
        cleared = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable_fields
        )
        if cleared:
            raise ValueError(f"These fields cannot be null: {', '.join(cleared)}")
        return self

    def changes(self) -> Dict[str, Any]:
        """The fields the client actually sent, ready to merge onto a record."""
        update_data = self.model_dump(exclude_unset=True)
        if not update_data:
            raise NoUpdateDataError("No update data provided.")
        return update_data


class MessageResponse(BaseModel):
    message: str
