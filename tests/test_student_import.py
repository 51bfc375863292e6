# /tests/test_student_import.py

import asyncio

import pytest
from pydantic import ValidationError

from club_admin.services import class_service, student_service
from club_admin.services.student_helpers import file_processors


def test_extract_students_with_english_headers():
    csv_bytes = (
        "First Name,Last Name,Phone,Email,Guardian Name\n"
        "Maria,Papadaki,6900000000,maria@example.com,\n"
        "Nikos,Daskalakis,0030281000000,,Eleni\n"
    ).encode("utf-8")

    rows = file_processors.extract_students_from_csv(csv_bytes)

    assert rows == [
        {"firstName": "Maria", "lastName": "Papadaki", "phone": "6900000000", "email": "maria@example.com"},
        {"firstName": "Nikos", "lastName": "Daskalakis", "phone": "0030281000000", "guardianName": "Eleni"},
    ]


def test_extract_students_with_greek_headers_and_bom():
    csv_bytes = "Όνομα,Επώνυμο,Τηλέφωνο,Κηδεμόνας\nΜαρία,Παπαδάκη,6900000000,Ελένη\n".encode("utf-8-sig")

    rows = file_processors.extract_students_from_csv(csv_bytes)

    assert rows == [{"firstName": "Μαρία", "lastName": "Παπαδάκη", "phone": "6900000000", "guardianName": "Ελένη"}]


def test_extract_rejects_empty_and_non_utf8_files():
    with pytest.raises(ValueError):
        file_processors.extract_students_from_csv(b"   \n")
    with pytest.raises(ValueError):
        file_processors.extract_students_from_csv("Όνομα\nΜαρία\n".encode("iso-8859-7"))


def test_validate_collects_every_bad_row():
    rows = [
        {"firstName": "Maria", "lastName": "Papadaki", "phone": "1"},
        {"firstName": "Nikos", "phone": "2"},
        {"lastName": "Xylouri"},
    ]

    with pytest.raises(student_service.StudentImportError) as exc_info:
        student_service.validate_student_rows(rows)

    error = exc_info.value
    assert error.total_records == 3
    assert [e["row"] for e in error.errors] == [2, 3]
    missing_in_row_3 = {tuple(e["loc"]) for e in error.errors[1]["errors"]}
    assert missing_in_row_3 == {("firstName",), ("phone",)}


def test_add_many_students_rolls_back_on_failure(db_service):
    records = [
        {"firstName": "Maria", "lastName": "Papadaki", "phone": "1"},
        {"firstName": "Nikos", "lastName": "Daskalakis", "phone": "2"},
        {"firstName": "", "lastName": "Broken", "phone": "3"},
    ]

    with pytest.raises(ValidationError):
        db_service.add_many_students(records)

    assert db_service.get_all_students() == []
    # Ids handed out before the failure stay consumed.
    assert db_service.add_student({"firstName": "Eleni", "lastName": "K", "phone": "4"}).id == 3


def test_add_many_students_returns_records_in_input_order(db_service):
    created = db_service.add_many_students([
        {"firstName": "Maria", "lastName": "Papadaki", "phone": "1"},
        {"firstName": "Nikos", "lastName": "Daskalakis", "phone": "2"},
    ])

    assert [s.firstName for s in created] == ["Maria", "Nikos"]
    assert [s.id for s in created] == [1, 2]


def test_roster_export_lists_active_students_only(db_service):
    school_class = db_service.add_class({"name": "Λύρα Αρχαρίων", "courseId": 1, "level": "beginner"})
    maria = db_service.add_student({"firstName": "Μαρία", "lastName": "Παπαδάκη", "phone": "1"})
    nikos = db_service.add_student({"firstName": "Νίκος", "lastName": "Δασκαλάκης", "phone": "2", "email": "n@example.com"})
    db_service.add_enrollment({"studentId": maria.id, "classId": school_class.id, "active": False})
    db_service.add_enrollment({"studentId": nikos.id, "classId": school_class.id})

    lines = class_service.export_roster_as_csv(school_class.id, db_service).splitlines()

    assert lines[0] == ",".join(class_service.ROSTER_COLUMNS)
    assert lines[1:] == ["Νίκος,Δασκαλάκης,2,n@example.com,,Λύρα Αρχαρίων"]


def test_roster_export_of_empty_class_has_header_only(db_service):
    school_class = db_service.add_class({"name": "Empty", "courseId": 1, "level": "beginner"})

    lines = class_service.export_roster_as_csv(school_class.id, db_service).splitlines()

    assert lines == [",".join(class_service.ROSTER_COLUMNS)]


def test_enrolled_students_of_unknown_class_is_none(db_service):
    assert class_service.get_enrolled_students(99, db_service) is None
    with pytest.raises(ValueError):
        class_service.export_roster_as_csv(99, db_service)


def test_upload_read_stops_just_past_the_limit(db_service, mocker):
    upload = mocker.Mock(filename="huge.csv")
    upload.read = mocker.AsyncMock(return_value=b"x" * (2 * 1024 * 1024 + 1))

    with pytest.raises(ValueError, match="exceeds the 2 MB limit"):
        asyncio.run(student_service.import_students_from_upload(file=upload, db=db_service, max_bytes=2 * 1024 * 1024))

    upload.read.assert_awaited_once_with(2 * 1024 * 1024 + 1)
