# /tests/test_attendance.py

from datetime import date

import pytest

from club_admin.services.database_helpers.attendance_repository import DuplicateAttendanceError


def test_bulk_upsert_updates_record_for_same_day(db_service):
    """
    An input for an existing (student, class, day) updates that record in
    place: same id, one record, new values.
    """
    original = db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-04", "present": False})

    results = db_service.bulk_upsert_attendance([
        {"studentId": 1, "classId": 2, "date": "2024-03-04T18:00:00Z", "present": True},
    ])

    assert [r.id for r in results] == [original.id]
    records = db_service.get_attendance_by_class(2, "2024-03-04")
    assert len(records) == 1
    assert records[0].id == original.id
    assert records[0].present is True


def test_bulk_upsert_creates_missing_record(db_service):
    db_service.add_attendance({"studentId": 1, "classId": 2, "date": date(2024, 3, 4), "present": True})
    before = len(db_service.get_attendance_by_class(2))

    results = db_service.bulk_upsert_attendance([
        {"studentId": 3, "classId": 2, "date": date(2024, 3, 4), "present": False},
    ])

    assert len(db_service.get_attendance_by_class(2)) == before + 1
    assert results[0].studentId == 3
    assert results[0].present is False


def test_bulk_upsert_mixed_batch_keeps_input_order(db_service):
    existing = db_service.add_attendance({"studentId": 2, "classId": 1, "date": "2024-03-04", "present": True})

    results = db_service.bulk_upsert_attendance([
        {"studentId": 1, "classId": 1, "date": "2024-03-04", "present": True},
        {"studentId": 2, "classId": 1, "date": "2024-03-04", "present": False},
    ])

    assert [r.studentId for r in results] == [1, 2]
    assert results[1].id == existing.id
    assert results[1].present is False


def test_bulk_upsert_repeated_key_collapses_to_last_value(db_service):
    results = db_service.bulk_upsert_attendance([
        {"studentId": 1, "classId": 1, "date": "2024-03-04", "present": True},
        {"studentId": 1, "classId": 1, "date": "2024-03-04T20:00:00", "present": False},
    ])

    assert results[0].id == results[1].id
    records = db_service.get_attendance_by_student(1)
    assert len(records) == 1
    assert records[0].present is False


def test_different_day_is_a_different_record(db_service):
    db_service.add_attendance({"studentId": 1, "classId": 1, "date": "2024-03-04"})

    db_service.bulk_upsert_attendance([{"studentId": 1, "classId": 1, "date": "2024-03-05"}])

    assert len(db_service.get_attendance_by_student(1)) == 2
    assert len(db_service.get_attendance_by_class(1, date(2024, 3, 5))) == 1


def test_student_attendance_optionally_narrowed_by_class(db_service):
    db_service.add_attendance({"studentId": 1, "classId": 1, "date": "2024-03-04"})
    db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-04"})
    db_service.add_attendance({"studentId": 2, "classId": 2, "date": "2024-03-04"})

    assert len(db_service.get_attendance_by_student(1)) == 2
    assert [r.classId for r in db_service.get_attendance_by_student(1, class_id=2)] == [2]


def test_single_create_refuses_a_taken_day(db_service):
    """A second record for the same student, class and day is refused, even with a different time of day."""
    db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-04", "present": False})

    with pytest.raises(DuplicateAttendanceError):
        db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-04T18:00:00Z", "present": True})

    records = db_service.get_attendance_by_class(2, "2024-03-04")
    assert len(records) == 1
    assert records[0].present is False


def test_update_refuses_to_move_onto_another_record(db_service):
    db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-04"})
    later = db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-05"})

    with pytest.raises(DuplicateAttendanceError):
        db_service.update_attendance(later.id, {"date": date(2024, 3, 4)})

    assert db_service.get_attendance(later.id).date == date(2024, 3, 5)
    assert len(db_service.get_attendance_by_class(2, "2024-03-04")) == 1


def test_update_may_keep_its_own_key(db_service):
    record = db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-04", "present": True})

    updated = db_service.update_attendance(record.id, {"date": "2024-03-04T10:00:00", "present": False})

    assert updated.id == record.id
    assert updated.present is False


def test_bulk_upsert_after_refused_duplicate_updates_the_only_record(db_service):
    db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-04", "present": False})
    with pytest.raises(DuplicateAttendanceError):
        db_service.add_attendance({"studentId": 1, "classId": 2, "date": "2024-03-04", "present": False})

    db_service.bulk_upsert_attendance([{"studentId": 1, "classId": 2, "date": "2024-03-04", "present": True}])

    assert [r.present for r in db_service.get_attendance_by_class(2, "2024-03-04")] == [True]
