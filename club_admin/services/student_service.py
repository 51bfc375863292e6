# /club_admin/services/student_service.py

"""
Business logic for bulk student intake from an uploaded CSV file.

Import is all-or-nothing: every row is validated first, and students are only
created when the whole file is clean.
"""

import logging
from typing import Dict, List

from fastapi import UploadFile
from pydantic import ValidationError

from ..models.student_model import StudentCreate
from .database_service import DatabaseService
from .student_helpers import file_processors

logger = logging.getLogger("club_admin.students")


class StudentImportError(ValueError):
    """One or more rows of an import failed validation; nothing was created."""

    def __init__(self, errors: List[Dict], total_records: int):
        super().__init__("Invalid data in CSV file")
        self.errors = errors
        self.total_records = total_records


def validate_student_rows(rows: List[Dict]) -> List[StudentCreate]:
    """
    Validates every row and collects all failures before deciding, so the
    caller sees every bad row in one response. Row numbers are 1-based.
    """
    students: List[StudentCreate] = []
    errors: List[Dict] = []
    for index, row in enumerate(rows, start=1):
        try:
            students.append(StudentCreate.model_validate(row))
        except ValidationError as e:
            errors.append({"row": index, "errors": e.errors(include_url=False, include_context=False)})

    if errors:
        raise StudentImportError(errors=errors, total_records=len(rows))
    return students


def _describe_limit(max_bytes: int) -> str:
    if max_bytes >= 1024 * 1024:
        return f"{max_bytes / (1024 * 1024):g} MB"
    return f"{max_bytes} bytes"


async def import_students_from_upload(file: UploadFile, db: DatabaseService, max_bytes: int) -> Dict:
    # One byte past the limit is enough to tell that the file is too big.
    file_bytes = await file.read(max_bytes + 1)
    if len(file_bytes) > max_bytes:
        raise ValueError(f"The uploaded file exceeds the {_describe_limit(max_bytes)} limit.")

    rows = file_processors.extract_students_from_csv(file_bytes)
    if not rows:
        raise ValueError("The uploaded file contains no student rows.")

    try:
        students = validate_student_rows(rows)
    except StudentImportError as e:
        logger.info("Rejected import of %s: %d of %d rows invalid", file.filename, len(e.errors), e.total_records)
        raise

    created = db.add_many_students([student.model_dump() for student in students])
    logger.info("Imported %d students from %s", len(created), file.filename)
    return {
        "message": "Students imported successfully",
        "count": len(created),
        "students": created,
    }
