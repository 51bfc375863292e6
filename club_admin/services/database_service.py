# /club_admin/services/database_service.py

"""
The query facade every router and service talks to.

`DatabaseService` owns one repository per concern and delegates to them. It is
built once per application by `create_app`, kept on `app.state`, and handed
to the routers through the `get_db_service` dependency. Nothing in here is a
module-level global.

Absence is never an error at this layer: lookups return None, updates of an
unknown id return None, deletes of an unknown id return False.
"""

from datetime import date
from typing import Dict, List, Optional, Sequence, Union

from fastapi import Request

from ..models.attendance_model import Attendance
from ..models.class_model import Class
from ..models.course_model import Course
from ..models.enrollment_model import Enrollment
from ..models.payment_model import Payment
from ..models.school_year_model import SchoolYear
from ..models.student_model import Student
from ..models.user_model import UserRecord
from .database_helpers.attendance_repository import AttendanceRepository
from .database_helpers.catalog_repository import CatalogRepository
from .database_helpers.filters import ClassFilter, CourseFilter, EnrollmentFilter, PaymentFilter
from .database_helpers.payment_repository import PaymentRepository
from .database_helpers.roster_repository import RosterRepository
from .database_helpers.user_repository import UserRepository

DateLike = Union[date, str]


class DatabaseService:
    def __init__(self):
        self.user_repo = UserRepository()
        self.catalog_repo = CatalogRepository()
        self.roster_repo = RosterRepository()
        self.attendance_repo = AttendanceRepository()
        self.payment_repo = PaymentRepository()

    # --- USER METHODS (DELEGATED) ---
    def get_user(self, user_id: int) -> Optional[UserRecord]: return self.user_repo.get_user_by_id(user_id)
    def get_user_by_username(self, username: str) -> Optional[UserRecord]: return self.user_repo.get_user_by_username(username)
    def get_all_users(self) -> List[UserRecord]: return self.user_repo.get_all_users()
    def add_user(self, user_record: Dict) -> UserRecord: return self.user_repo.add_user(user_record)
    def update_user(self, user_id: int, user_update_data: Dict) -> Optional[UserRecord]: return self.user_repo.update_user(user_id, user_update_data)
    def delete_user(self, user_id: int) -> bool: return self.user_repo.delete_user(user_id)

    # --- SCHOOL YEAR METHODS (DELEGATED) ---
    def get_all_school_years(self) -> List[SchoolYear]: return self.catalog_repo.get_all_school_years()
    def get_active_school_years(self) -> List[SchoolYear]: return self.catalog_repo.get_active_school_years()
    def get_school_year(self, school_year_id: int) -> Optional[SchoolYear]: return self.catalog_repo.get_school_year_by_id(school_year_id)
    def add_school_year(self, school_year_record: Dict) -> SchoolYear: return self.catalog_repo.add_school_year(school_year_record)
    def update_school_year(self, school_year_id: int, update_data: Dict) -> Optional[SchoolYear]: return self.catalog_repo.update_school_year(school_year_id, update_data)
    def delete_school_year(self, school_year_id: int) -> bool: return self.catalog_repo.delete_school_year(school_year_id)

    # --- COURSE METHODS (DELEGATED) ---
    def get_courses(self, school_year_id: Optional[int] = None) -> List[Course]:
        return self.catalog_repo.get_courses(CourseFilter(schoolYearId=school_year_id))
    def get_course(self, course_id: int) -> Optional[Course]: return self.catalog_repo.get_course_by_id(course_id)
    def add_course(self, course_record: Dict) -> Course: return self.catalog_repo.add_course(course_record)
    def update_course(self, course_id: int, update_data: Dict) -> Optional[Course]: return self.catalog_repo.update_course(course_id, update_data)
    def delete_course(self, course_id: int) -> bool: return self.catalog_repo.delete_course(course_id)

    # --- CLASS METHODS (DELEGATED) ---
    def get_classes(self, course_id: Optional[int] = None) -> List[Class]:
        return self.catalog_repo.get_classes(ClassFilter(courseId=course_id))
    def get_class(self, class_id: int) -> Optional[Class]: return self.catalog_repo.get_class_by_id(class_id)
    def add_class(self, class_record: Dict) -> Class: return self.catalog_repo.add_class(class_record)
    def update_class(self, class_id: int, update_data: Dict) -> Optional[Class]: return self.catalog_repo.update_class(class_id, update_data)
    def delete_class(self, class_id: int) -> bool: return self.catalog_repo.delete_class(class_id)

    # --- STUDENT METHODS (DELEGATED) ---
    def get_all_students(self) -> List[Student]: return self.roster_repo.get_all_students()
    def get_student(self, student_id: int) -> Optional[Student]: return self.roster_repo.get_student_by_id(student_id)
    def add_student(self, student_record: Dict) -> Student: return self.roster_repo.add_student(student_record)
    def add_many_students(self, student_records: Sequence[Dict]) -> List[Student]: return self.roster_repo.add_many_students(student_records)
    def update_student(self, student_id: int, update_data: Dict) -> Optional[Student]: return self.roster_repo.update_student(student_id, update_data)
    def delete_student(self, student_id: int) -> bool: return self.roster_repo.delete_student(student_id)

    # --- ENROLLMENT METHODS (DELEGATED) ---
    def get_enrollments(
        self,
        student_id: Optional[int] = None,
        class_id: Optional[int] = None,
        active: Optional[bool] = None,
    ) -> List[Enrollment]:
        return self.roster_repo.get_enrollments(
            EnrollmentFilter(studentId=student_id, classId=class_id, active=active)
        )
    def get_enrollment(self, enrollment_id: int) -> Optional[Enrollment]: return self.roster_repo.get_enrollment_by_id(enrollment_id)
    def add_enrollment(self, enrollment_record: Dict) -> Enrollment: return self.roster_repo.add_enrollment(enrollment_record)
    def update_enrollment(self, enrollment_id: int, update_data: Dict) -> Optional[Enrollment]: return self.roster_repo.update_enrollment(enrollment_id, update_data)
    def delete_enrollment(self, enrollment_id: int) -> bool: return self.roster_repo.delete_enrollment(enrollment_id)
    def count_active_enrollments(self) -> int: return self.roster_repo.count_active_enrollments()

    # --- ATTENDANCE METHODS (DELEGATED) ---
    def get_attendance_by_class(self, class_id: int, on_date: Optional[DateLike] = None) -> List[Attendance]:
        return self.attendance_repo.get_by_class(class_id, on_date)
    def get_attendance_by_student(self, student_id: int, class_id: Optional[int] = None) -> List[Attendance]:
        return self.attendance_repo.get_by_student(student_id, class_id)
    def get_attendance(self, attendance_id: int) -> Optional[Attendance]: return self.attendance_repo.get_attendance_by_id(attendance_id)
    def add_attendance(self, attendance_record: Dict) -> Attendance: return self.attendance_repo.add_attendance(attendance_record)
    def update_attendance(self, attendance_id: int, update_data: Dict) -> Optional[Attendance]: return self.attendance_repo.update_attendance(attendance_id, update_data)
    def delete_attendance(self, attendance_id: int) -> bool: return self.attendance_repo.delete_attendance(attendance_id)
    def bulk_upsert_attendance(self, attendance_records: Sequence[Dict]) -> List[Attendance]: return self.attendance_repo.bulk_upsert(attendance_records)

    # --- PAYMENT METHODS (DELEGATED) ---
    def get_payments(
        self,
        student_id: Optional[int] = None,
        course_id: Optional[int] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[Payment]:
        return self.payment_repo.get_payments(
            PaymentFilter(studentId=student_id, courseId=course_id, month=month, year=year)
        )
    def get_payment(self, payment_id: int) -> Optional[Payment]: return self.payment_repo.get_payment_by_id(payment_id)
    def add_payment(self, payment_record: Dict) -> Payment: return self.payment_repo.add_payment(payment_record)
    def update_payment(self, payment_id: int, update_data: Dict) -> Optional[Payment]: return self.payment_repo.update_payment(payment_id, update_data)
    def delete_payment(self, payment_id: int) -> bool: return self.payment_repo.delete_payment(payment_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(request: Request) -> DatabaseService:
    """
    FastAPI dependency that provides the application's single DatabaseService,
    created by `create_app` and kept on `app.state`.
    """
    return request.app.state.db_service
