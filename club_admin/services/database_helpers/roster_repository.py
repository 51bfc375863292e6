# /club_admin/services/database_helpers/roster_repository.py

"""
Repository for students and their enrollments in classes.
"""

import logging
from typing import Dict, List, Optional, Sequence

from club_admin.models.enrollment_model import Enrollment
from club_admin.models.student_model import Student
from .base_repository import EntityStore
from .filters import EnrollmentFilter

logger = logging.getLogger("club_admin.store.roster")


class RosterRepository:
    def __init__(self):
        self.students: EntityStore[Student] = EntityStore(Student)
        self.enrollments: EntityStore[Enrollment] = EntityStore(Enrollment, timestamp_field="enrolledAt")

    # --- Student Methods ---

    def get_all_students(self) -> List[Student]:
        return self.students.list()

    def get_student_by_id(self, student_id: int) -> Optional[Student]:
        return self.students.get(student_id)

    def add_student(self, record: Dict) -> Student:
        return self.students.add(record)

    def add_many_students(self, records: Sequence[Dict]) -> List[Student]:
        """
        Creates the students one at a time, in input order.

        All or nothing: if any record fails, the students already created by
        this call are removed again before the error propagates. Their ids
        stay consumed.
        """
        created: List[Student] = []
        try:
            for record in records:
                created.append(self.students.add(record))
        except Exception:
            for student in created:
                self.students.delete(student.id)
            logger.warning(
                "Bulk student creation failed at record %d of %d; rolled back %d students",
                len(created) + 1, len(records), len(created),
            )
            raise
        return created

    def update_student(self, student_id: int, data: Dict) -> Optional[Student]:
        return self.students.update(student_id, data)

    def delete_student(self, student_id: int) -> bool:
        return self.students.delete(student_id)

    # --- Enrollment Methods ---

    def get_enrollments(self, criteria: Optional[EnrollmentFilter] = None) -> List[Enrollment]:
        return self.enrollments.list(criteria or EnrollmentFilter())

    def get_enrollment_by_id(self, enrollment_id: int) -> Optional[Enrollment]:
        return self.enrollments.get(enrollment_id)

    def add_enrollment(self, record: Dict) -> Enrollment:
        return self.enrollments.add(record)

    def update_enrollment(self, enrollment_id: int, data: Dict) -> Optional[Enrollment]:
        return self.enrollments.update(enrollment_id, data)

    def delete_enrollment(self, enrollment_id: int) -> bool:
        return self.enrollments.delete(enrollment_id)

    def count_active_enrollments(self) -> int:
        return self.enrollments.count(EnrollmentFilter(active=True))
