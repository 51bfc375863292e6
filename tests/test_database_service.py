# /tests/test_database_service.py

from datetime import date

import pytest
from pydantic import ValidationError

from club_admin.services.database_helpers.user_repository import DuplicateUsernameError


def _student(first_name="Μαρία", last_name="Παπαδάκη", **extra):
    return {"firstName": first_name, "lastName": last_name, "phone": "6900000000", **extra}


def test_add_and_get_student(db_service):
    """
    Tests that a student can be added and then retrieved with the assigned
    id and creation timestamp.
    """
    created = db_service.add_student(_student(email="maria@example.com"))
    retrieved = db_service.get_student(created.id)

    assert retrieved is not None
    assert retrieved == created
    assert retrieved.id == 1
    assert retrieved.createdAt is not None
    assert retrieved.email == "maria@example.com"


def test_get_non_existent_records(db_service):
    """Unknown ids are reported as absent, never raised."""
    assert db_service.get_student(99) is None
    assert db_service.get_class(99) is None
    assert db_service.update_course(99, {"name": "Anything"}) is None
    assert db_service.delete_payment(99) is False


def test_ids_are_sequential_per_entity(db_service):
    first = db_service.add_student(_student())
    second = db_service.add_student(_student(first_name="Γιώργος"))
    enrollment = db_service.add_enrollment({"studentId": second.id, "classId": 5})

    assert (first.id, second.id) == (1, 2)
    # Each entity type has its own counter.
    assert enrollment.id == 1


def test_ids_are_not_reused_after_delete(db_service):
    first = db_service.add_student(_student())
    assert db_service.delete_student(first.id) is True

    second = db_service.add_student(_student(first_name="Νίκος"))
    assert second.id == 2


def test_delete_twice_returns_true_then_false(db_service):
    year = db_service.add_school_year({"name": "2024-2025", "startDate": "2024-09-01", "endDate": "2025-06-30"})

    assert db_service.delete_school_year(year.id) is True
    assert db_service.delete_school_year(year.id) is False


def test_update_merges_only_given_fields(db_service):
    student = db_service.add_student(_student(guardianName="Ελένη"))

    updated = db_service.update_student(student.id, {"phone": "6911111111"})

    assert updated.phone == "6911111111"
    assert updated.firstName == student.firstName
    assert updated.guardianName == "Ελένη"
    assert updated.createdAt == student.createdAt


def test_update_cannot_change_id_or_timestamp(db_service):
    enrollment = db_service.add_enrollment({"studentId": 1, "classId": 2})

    updated = db_service.update_enrollment(enrollment.id, {"id": 500, "enrolledAt": "2000-01-01T00:00:00", "active": False})

    assert updated.id == enrollment.id
    assert updated.enrolledAt == enrollment.enrolledAt
    assert updated.active is False
    assert db_service.get_enrollment(500) is None


def test_invalid_record_is_not_stored(db_service):
    with pytest.raises(ValidationError):
        db_service.add_payment({"studentId": 1, "courseId": 1, "amount": 30, "month": 13, "year": 2024, "paymentDate": "2024-03-01"})

    assert db_service.get_payments() == []
    # The failed attempt did not consume an id.
    assert db_service.add_payment({"studentId": 1, "courseId": 1, "amount": 30, "month": 3, "year": 2024, "paymentDate": "2024-03-01"}).id == 1


def test_courses_filtered_by_school_year(db_service):
    """
    Creating a course in a school year makes it visible under that year's
    filter and under no other.
    """
    year = db_service.add_school_year({"name": "2024-2025", "startDate": "2024-09-01", "endDate": "2025-06-30"})
    other_year = db_service.add_school_year({"name": "2025-2026", "startDate": "2025-09-01", "endDate": "2026-06-30"})
    course = db_service.add_course({"name": "Κρητικοί Χοροί", "type": "dance", "schoolYearId": year.id, "monthlyFee": 30})

    assert db_service.get_courses(school_year_id=year.id) == [course]
    assert db_service.get_courses(school_year_id=other_year.id) == []
    assert db_service.get_courses() == [course]


def test_enrollment_scenario(db_service):
    student = db_service.add_student(_student())
    db_service.add_enrollment({"studentId": student.id, "classId": 5})

    enrollments = db_service.get_enrollments(student_id=student.id)

    assert len(enrollments) == 1
    assert enrollments[0].classId == 5
    assert enrollments[0].active is True


def test_enrollment_filters_combine_with_and(db_service):
    db_service.add_enrollment({"studentId": 1, "classId": 1})
    db_service.add_enrollment({"studentId": 1, "classId": 2, "active": False})
    db_service.add_enrollment({"studentId": 2, "classId": 2})

    assert [e.id for e in db_service.get_enrollments(class_id=2)] == [2, 3]
    assert [e.id for e in db_service.get_enrollments(student_id=1, class_id=2)] == [2]
    assert [e.id for e in db_service.get_enrollments(class_id=2, active=True)] == [3]
    assert db_service.count_active_enrollments() == 2


def test_classes_filtered_by_course(db_service):
    first = db_service.add_class({"name": "Παιδικό Α", "courseId": 1, "level": "beginner"})
    db_service.add_class({"name": "Ενηλίκων", "courseId": 2, "level": "advanced"})

    assert db_service.get_classes(course_id=1) == [first]
    assert len(db_service.get_classes()) == 2


def test_payment_filters(db_service):
    base = {"amount": 30, "year": 2024, "paymentDate": date(2024, 3, 5)}
    db_service.add_payment({**base, "studentId": 1, "courseId": 1, "month": 3})
    db_service.add_payment({**base, "studentId": 1, "courseId": 2, "month": 3})
    db_service.add_payment({**base, "studentId": 2, "courseId": 1, "month": 4})

    assert len(db_service.get_payments()) == 3
    assert [p.id for p in db_service.get_payments(student_id=1)] == [1, 2]
    assert [p.id for p in db_service.get_payments(course_id=1, month=4)] == [3]
    assert db_service.get_payments(year=2023) == []


def test_active_school_years(db_service):
    db_service.add_school_year({"name": "2022-2023", "startDate": "2022-09-01", "endDate": "2023-06-30", "active": False})
    current = db_service.add_school_year({"name": "2023-2024", "startDate": "2023-09-01", "endDate": "2024-06-30"})

    assert db_service.get_active_school_years() == [current]


def test_reads_are_snapshots(db_service):
    """Mutating a returned record does not touch the stored one."""
    created = db_service.add_class({
        "name": "Λύρα",
        "courseId": 1,
        "level": "intermediate",
        "schedule": [{"day": "Monday", "startTime": "18:00", "endTime": "19:00"}],
    })

    fetched = db_service.get_class(created.id)
    fetched.name = "Changed"
    fetched.schedule.clear()

    stored = db_service.get_class(created.id)
    assert stored.name == "Λύρα"
    assert len(stored.schedule) == 1


def test_user_lookup_update_and_delete(db_service):
    user = db_service.add_user({"username": "teacher", "password": "secret", "name": "Teacher"})

    assert db_service.get_user_by_username("teacher") == user
    assert db_service.get_user_by_username("nobody") is None

    renamed = db_service.update_user(user.id, {"name": "Δάσκαλος"})
    assert renamed.name == "Δάσκαλος"
    assert renamed.password == "secret"

    assert db_service.delete_user(user.id) is True
    assert db_service.get_all_users() == []


def test_usernames_stay_unique(db_service):
    """Neither a new user nor a rename may take a username that is already in use."""
    first = db_service.add_user({"username": "a", "password": "x", "name": "A"})
    second = db_service.add_user({"username": "b", "password": "x", "name": "B"})

    with pytest.raises(DuplicateUsernameError):
        db_service.add_user({"username": "a", "password": "y", "name": "Other A"})
    with pytest.raises(DuplicateUsernameError):
        db_service.update_user(second.id, {"username": "a"})

    assert [u.username for u in db_service.get_all_users()] == ["a", "b"]
    # Keeping one's own name is not a conflict.
    assert db_service.update_user(first.id, {"username": "a", "name": "Alpha"}).name == "Alpha"
    assert db_service.update_user(99, {"username": "a"}) is None
