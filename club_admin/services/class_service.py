# /club_admin/services/class_service.py

"""
Business logic that spans classes and the students enrolled in them: the
class roster and its CSV export.
"""

from typing import List, Optional

from ..models.student_model import Student
from .database_service import DatabaseService
from .student_helpers.file_processors import students_to_csv

ROSTER_COLUMNS = ["First Name", "Last Name", "Phone", "Email", "Guardian Name", "Class Name"]


def get_enrolled_students(class_id: int, db: DatabaseService) -> Optional[List[Student]]:
    """
    Students with an active enrollment in the class, in enrollment order.
    Returns None if the class does not exist. Enrollments pointing at a
    deleted student are skipped.
    """
    if db.get_class(class_id) is None:
        return None

    students: List[Student] = []
    seen = set()
    for enrollment in db.get_enrollments(class_id=class_id, active=True):
        if enrollment.studentId in seen:
            continue
        student = db.get_student(enrollment.studentId)
        if student is not None:
            students.append(student)
            seen.add(enrollment.studentId)
    return students


def export_roster_as_csv(class_id: int, db: DatabaseService) -> str:
    class_info = db.get_class(class_id)
    if class_info is None:
        raise ValueError(f"Class with ID {class_id} not found.")

    export_data = [
        {
            "First Name": s.firstName,
            "Last Name": s.lastName,
            "Phone": s.phone,
            "Email": s.email or "",
            "Guardian Name": s.guardianName or "",
            "Class Name": class_info.name,
        }
        for s in get_enrolled_students(class_id, db) or []
    ]
    return students_to_csv(export_data, ROSTER_COLUMNS)
