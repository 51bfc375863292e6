# /club_admin/services/database_helpers/filters.py

"""
Filter criteria for the list queries.

Each entity that supports filtering gets a frozen dataclass whose fields are
all optional. A field left as None places no constraint on the result; the
fields that are set are combined with AND. Equality is the default
comparison, and a filter class may swap in another comparison per field.
"""

import operator
from dataclasses import dataclass, fields
from datetime import date as date_type
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple

from club_admin.models.common import same_calendar_day


@dataclass(frozen=True)
class RecordFilter:
    comparators: ClassVar[Dict[str, Callable[[Any, Any], bool]]] = {}

    def criteria(self) -> List[Tuple[str, Any]]:
        """The (field, expected value) pairs that are actually set."""
        return [
            (f.name, getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]

    def matches(self, record: Any) -> bool:
        for name, expected in self.criteria():
            compare = self.comparators.get(name, operator.eq)
            if not compare(getattr(record, name), expected):
                return False
        return True

    def __call__(self, record: Any) -> bool:
        return self.matches(record)


@dataclass(frozen=True)
class CourseFilter(RecordFilter):
    schoolYearId: Optional[int] = None


@dataclass(frozen=True)
class ClassFilter(RecordFilter):
    courseId: Optional[int] = None


@dataclass(frozen=True)
class EnrollmentFilter(RecordFilter):
    studentId: Optional[int] = None
    classId: Optional[int] = None
    active: Optional[bool] = None


@dataclass(frozen=True)
class AttendanceFilter(RecordFilter):
    comparators: ClassVar[Dict[str, Callable[[Any, Any], bool]]] = {"date": same_calendar_day}

    studentId: Optional[int] = None
    classId: Optional[int] = None
    date: Optional[date_type] = None


@dataclass(frozen=True)
class PaymentFilter(RecordFilter):
    studentId: Optional[int] = None
    courseId: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None
