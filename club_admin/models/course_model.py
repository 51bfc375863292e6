# /club_admin/models/course_model.py

from datetime import datetime
from enum import Enum
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import PartialModel


class CourseType(str, Enum):
    DANCE = "dance"
    MUSIC = "music"
    CULTURE = "culture"


class CourseBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    type: CourseType
    schoolYearId: int = Field(..., description="The school year this course runs in.")
    monthlyFee: int = Field(..., ge=0, description="Monthly fee in whole currency units.")
    active: bool = Field(default=True)


class CourseCreate(CourseBase):
    pass


class CourseUpdate(PartialModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"description"})

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type: Optional[CourseType] = None
    schoolYearId: Optional[int] = None
    monthlyFee: Optional[int] = Field(default=None, ge=0)
    active: Optional[bool] = None


class Course(CourseBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    createdAt: datetime
