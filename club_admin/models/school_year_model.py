# /club_admin/models/school_year_model.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CalendarDate, PartialModel


class SchoolYearBase(BaseModel):
    """
    A school year, e.g. "2024-2025". Several years may be flagged active at
    the same time; nothing enforces a single active year.
    """
    name: str = Field(..., min_length=1, examples=["2024-2025"])
    startDate: CalendarDate
    endDate: CalendarDate
    active: bool = Field(default=True)


class SchoolYearCreate(SchoolYearBase):
    pass


class SchoolYearUpdate(PartialModel):
    name: Optional[str] = Field(default=None, min_length=1)
    startDate: Optional[CalendarDate] = None
    endDate: Optional[CalendarDate] = None
    active: Optional[bool] = None


class SchoolYear(SchoolYearBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    createdAt: datetime
