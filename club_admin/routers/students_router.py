# /club_admin/routers/students_router.py

import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status
from fastapi.responses import JSONResponse

from ..core.config import Settings
from ..core.deps import get_settings
from ..models import student_model
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger("club_admin.routers.students")

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[student_model.Student], summary="Get All Students")
def get_all_students(db: DatabaseService = Depends(get_db_service)):
    return db.get_all_students()

@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Create a Student")
def create_student(student_create: student_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    return db.add_student(student_create.model_dump())

@router.post(
    "/import",
    response_model=student_model.StudentImportResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Import Students from a CSV File",
    responses={400: {"model": student_model.StudentImportErrorResponse}},
)
async def import_students(
    file: UploadFile = File(...),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    try:
        return await student_service.import_students_from_upload(file=file, db=db, max_bytes=settings.max_upload_bytes)
    except student_service.StudentImportError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": str(e),
                "errors": e.errors,
                "totalErrors": len(e.errors),
                "totalRecords": e.total_records,
            },
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Student import from %s failed", file.filename)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"An unexpected server error occurred: {e}")

# --- INDIVIDUAL STUDENT ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Student")
def get_student(student_id: int, db: DatabaseService = Depends(get_db_service)):
    student = db.get_student(student_id)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return student

@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student")
def update_student_details(student_id: int, student_update: student_model.StudentUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated_student = db.update_student(student_id, student_update.changes())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return updated_student

@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student")
def delete_student(student_id: int, db: DatabaseService = Depends(get_db_service)):
    if not db.delete_student(student_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
