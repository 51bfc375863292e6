# /club_admin/models/attendance_model.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CalendarDate, PartialModel


class AttendanceBase(BaseModel):
    """
    Whether a student was present at one class meeting. There is at most one
    record per (studentId, classId, calendar day).
    """
    studentId: int
    classId: int
    date: CalendarDate
    present: bool = Field(default=True)


class AttendanceCreate(AttendanceBase):
    pass


class AttendanceUpdate(PartialModel):
    studentId: Optional[int] = None
    classId: Optional[int] = None
    date: Optional[CalendarDate] = None
    present: Optional[bool] = None


class Attendance(AttendanceBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    createdAt: datetime


class BulkAttendanceRequest(BaseModel):
    records: List[AttendanceCreate] = Field(..., min_length=1)


class BulkAttendanceResponse(BaseModel):
    message: str
    count: int
    records: List[Attendance]
