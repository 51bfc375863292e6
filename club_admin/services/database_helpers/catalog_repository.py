# /club_admin/services/database_helpers/catalog_repository.py

"""
Repository for the club's offering: school years, the courses that run in
them and the classes (sections) each course is taught in.

References between them are plain ids. Deleting a school year or a course
does not cascade; dependent records keep their now-dangling ids.
"""

from typing import Dict, List, Optional

from club_admin.models.class_model import Class
from club_admin.models.course_model import Course
from club_admin.models.school_year_model import SchoolYear
from .base_repository import EntityStore
from .filters import ClassFilter, CourseFilter


class CatalogRepository:
    def __init__(self):
        self.school_years: EntityStore[SchoolYear] = EntityStore(SchoolYear)
        self.courses: EntityStore[Course] = EntityStore(Course)
        self.classes: EntityStore[Class] = EntityStore(Class)

    # --- School Year Methods ---

    def get_all_school_years(self) -> List[SchoolYear]:
        return self.school_years.list()

    def get_active_school_years(self) -> List[SchoolYear]:
        return self.school_years.list(lambda year: year.active)

    def get_school_year_by_id(self, school_year_id: int) -> Optional[SchoolYear]:
        return self.school_years.get(school_year_id)

    def add_school_year(self, record: Dict) -> SchoolYear:
        return self.school_years.add(record)

    def update_school_year(self, school_year_id: int, data: Dict) -> Optional[SchoolYear]:
        return self.school_years.update(school_year_id, data)

    def delete_school_year(self, school_year_id: int) -> bool:
        return self.school_years.delete(school_year_id)

    # --- Course Methods ---

    def get_courses(self, criteria: Optional[CourseFilter] = None) -> List[Course]:
        return self.courses.list(criteria or CourseFilter())

    def get_course_by_id(self, course_id: int) -> Optional[Course]:
        return self.courses.get(course_id)

    def add_course(self, record: Dict) -> Course:
        return self.courses.add(record)

    def update_course(self, course_id: int, data: Dict) -> Optional[Course]:
        return self.courses.update(course_id, data)

    def delete_course(self, course_id: int) -> bool:
        return self.courses.delete(course_id)

    # --- Class Methods ---

    def get_classes(self, criteria: Optional[ClassFilter] = None) -> List[Class]:
        return self.classes.list(criteria or ClassFilter())

    def get_class_by_id(self, class_id: int) -> Optional[Class]:
        return self.classes.get(class_id)

    def add_class(self, record: Dict) -> Class:
        return self.classes.add(record)

    def update_class(self, class_id: int, data: Dict) -> Optional[Class]:
        return self.classes.update(class_id, data)

    def delete_class(self, class_id: int) -> bool:
        return self.classes.delete(class_id)
