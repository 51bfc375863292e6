# /club_admin/models/enrollment_model.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import PartialModel


class EnrollmentBase(BaseModel):
    """Links a student to a class. Deactivating keeps the history; deleting removes it."""
    studentId: int
    classId: int
    active: bool = Field(default=True)


class EnrollmentCreate(EnrollmentBase):
    pass


class EnrollmentUpdate(PartialModel):
    studentId: Optional[int] = None
    classId: Optional[int] = None
    active: Optional[bool] = None


class Enrollment(EnrollmentBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    enrolledAt: datetime
