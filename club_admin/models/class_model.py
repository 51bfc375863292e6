# /club_admin/models/class_model.py

"""
Contracts for a Class: one teaching group (section) of a Course, with its own
level, age band, capacity and weekly schedule.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import PartialModel


class ClassLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ScheduleSlot(BaseModel):
    """One weekly meeting of a class."""
    day: str = Field(..., min_length=1, examples=["Monday"])
    startTime: str = Field(..., pattern=r"^\d{2}:\d{2}$", examples=["18:00"])
    endTime: str = Field(..., pattern=r"^\d{2}:\d{2}$", examples=["19:30"])
    location: str = Field(default="")


class ClassBase(BaseModel):
    name: str = Field(..., min_length=1)
    courseId: int
    level: ClassLevel
    minAge: Optional[int] = Field(default=None, ge=0)
    maxAge: Optional[int] = Field(default=None, ge=0)
    maxStudents: Optional[int] = Field(default=None, ge=1)
    # Kept in the order the client sends it.
    schedule: List[ScheduleSlot] = Field(default_factory=list)


class ClassCreate(ClassBase):
    pass


class ClassUpdate(PartialModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"minAge", "maxAge", "maxStudents"})

    name: Optional[str] = Field(default=None, min_length=1)
    courseId: Optional[int] = None
    level: Optional[ClassLevel] = None
    minAge: Optional[int] = Field(default=None, ge=0)
    maxAge: Optional[int] = Field(default=None, ge=0)
    maxStudents: Optional[int] = Field(default=None, ge=1)
    schedule: Optional[List[ScheduleSlot]] = None


class Class(ClassBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    createdAt: datetime
