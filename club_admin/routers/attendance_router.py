# /club_admin/routers/attendance_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ..models import attendance_model
from ..models.common import calendar_day
from ..services.database_helpers.attendance_repository import DuplicateAttendanceError
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[attendance_model.Attendance], summary="Get Attendance for a Class")
def get_class_attendance(
    classId: int = Query(..., description="Required; attendance is always read per class."),
    on_date: Optional[str] = Query(default=None, alias="date", description="Any ISO date or date-time; only the day counts."),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        day = calendar_day(on_date) if on_date else None
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return db.get_attendance_by_class(classId, day)


@router.get("/student/{student_id}", response_model=List[attendance_model.Attendance], summary="Get a Student's Attendance")
def get_student_attendance(student_id: int, classId: Optional[int] = None, db: DatabaseService = Depends(get_db_service)):
    return db.get_attendance_by_student(student_id, class_id=classId)


@router.post("", response_model=attendance_model.Attendance, status_code=status.HTTP_201_CREATED, summary="Record Attendance")
def create_attendance(attendance: attendance_model.AttendanceCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return db.add_attendance(attendance.model_dump())
    except DuplicateAttendanceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post(
    "/bulk",
    response_model=attendance_model.BulkAttendanceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create or Update Many Attendance Records",
)
def bulk_upsert_attendance(payload: attendance_model.BulkAttendanceRequest, db: DatabaseService = Depends(get_db_service)):
    """
    Every record in the payload is validated before anything is written. Each
    one then updates the existing record for the same student, class and day,
    or creates it.
    """
    results = db.bulk_upsert_attendance([record.model_dump() for record in payload.records])
    return attendance_model.BulkAttendanceResponse(
        message="Attendance records updated",
        count=len(results),
        records=results,
    )


@router.get("/{attendance_id}", response_model=attendance_model.Attendance, summary="Get an Attendance Record")
def get_attendance(attendance_id: int, db: DatabaseService = Depends(get_db_service)):
    record = db.get_attendance(attendance_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Attendance record not found")
    return record


@router.put("/{attendance_id}", response_model=attendance_model.Attendance, summary="Update an Attendance Record")
def update_attendance(attendance_id: int, attendance_update: attendance_model.AttendanceUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated = db.update_attendance(attendance_id, attendance_update.changes())
    except DuplicateAttendanceError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Attendance record not found")
    return updated


@router.delete("/{attendance_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Attendance Record")
def delete_attendance(attendance_id: int, db: DatabaseService = Depends(get_db_service)):
    if not db.delete_attendance(attendance_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Attendance record not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
