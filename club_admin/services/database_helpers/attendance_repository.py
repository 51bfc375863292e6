# /club_admin/services/database_helpers/attendance_repository.py

"""
Repository for attendance records.

The one rule this repository enforces on its own is the attendance key: a
student has at most one record per class per calendar day. Single creates
and updates refuse a key that is already taken; the bulk upsert keeps the
rule by updating the matching record instead of inserting a second one.
"""

import logging
from typing import Dict, List, Optional, Sequence

from club_admin.models.attendance_model import Attendance
from club_admin.models.common import calendar_day
from .base_repository import EntityStore
from .filters import AttendanceFilter

logger = logging.getLogger("club_admin.store.attendance")

ATTENDANCE_KEY = ("studentId", "classId", "date")


class DuplicateAttendanceError(ValueError):
    """Another record already exists for the same student, class and day."""


class AttendanceRepository:
    def __init__(self):
        self.records: EntityStore[Attendance] = EntityStore(Attendance)

    def get_by_class(self, class_id: int, on_date=None) -> List[Attendance]:
        """Every record for the class, optionally narrowed to one calendar day."""
        day = calendar_day(on_date) if on_date is not None else None
        return self.records.list(AttendanceFilter(classId=class_id, date=day))

    def get_by_student(self, student_id: int, class_id: Optional[int] = None) -> List[Attendance]:
        return self.records.list(AttendanceFilter(studentId=student_id, classId=class_id))

    def get_attendance_by_id(self, attendance_id: int) -> Optional[Attendance]:
        return self.records.get(attendance_id)

    def find_for_day(self, student_id: int, class_id: int, on_date) -> Optional[Attendance]:
        return self.records.find(
            AttendanceFilter(studentId=student_id, classId=class_id, date=calendar_day(on_date))
        )

    def add_attendance(self, record: Dict) -> Attendance:
        """Creates a record. Raises DuplicateAttendanceError if its key is taken."""
        if all(record.get(key) is not None for key in ATTENDANCE_KEY):
            self._ensure_key_free(record["studentId"], record["classId"], record["date"])
        return self.records.add(record)

    def update_attendance(self, attendance_id: int, data: Dict) -> Optional[Attendance]:
        """
        Updates a record. Raises DuplicateAttendanceError if the change would
        move it onto the key of another record.
        """
        existing = self.records.get(attendance_id)
        if existing is None:
            return None
        if any(data.get(key) is not None for key in ATTENDANCE_KEY):
            merged = {
                key: data[key] if data.get(key) is not None else getattr(existing, key)
                for key in ATTENDANCE_KEY
            }
            self._ensure_key_free(merged["studentId"], merged["classId"], merged["date"], exclude_id=attendance_id)
        return self.records.update(attendance_id, data)

    def delete_attendance(self, attendance_id: int) -> bool:
        return self.records.delete(attendance_id)

    def bulk_upsert(self, records: Sequence[Dict]) -> List[Attendance]:
        """
        For each input, update the record with the same (studentId, classId,
        calendar day) if there is one, otherwise create it. Inputs are handled
        strictly in order, so two inputs for the same key end as one record
        carrying the later values. Returns one result per input, in input order.
        """
        results: List[Attendance] = []
        created = updated = 0
        for record in records:
            existing = self.find_for_day(record["studentId"], record["classId"], record["date"])
            if existing is not None:
                results.append(self.records.update(existing.id, record))
                updated += 1
            else:
                results.append(self.records.add(record))
                created += 1
        logger.info("Attendance upsert: %d created, %d updated", created, updated)
        return results

    def _ensure_key_free(self, student_id: int, class_id: int, on_date, exclude_id: Optional[int] = None) -> None:
        same_key = AttendanceFilter(studentId=student_id, classId=class_id, date=calendar_day(on_date))
        taken = self.records.find(lambda record: record.id != exclude_id and same_key(record))
        if taken is not None:
            raise DuplicateAttendanceError(
                f"Student {student_id} already has attendance record {taken.id} "
                f"for class {class_id} on {calendar_day(on_date).isoformat()}."
            )
