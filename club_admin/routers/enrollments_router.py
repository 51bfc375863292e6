# /club_admin/routers/enrollments_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..models import enrollment_model
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[enrollment_model.Enrollment], summary="Get Enrollments by Student and/or Class")
def get_enrollments(
    studentId: Optional[int] = None,
    classId: Optional[int] = None,
    db: DatabaseService = Depends(get_db_service),
):
    return db.get_enrollments(student_id=studentId, class_id=classId)


@router.post("", response_model=enrollment_model.Enrollment, status_code=status.HTTP_201_CREATED, summary="Enroll a Student in a Class")
def create_enrollment(enrollment: enrollment_model.EnrollmentCreate, db: DatabaseService = Depends(get_db_service)):
    return db.add_enrollment(enrollment.model_dump())


@router.get("/{enrollment_id}", response_model=enrollment_model.Enrollment, summary="Get an Enrollment")
def get_enrollment(enrollment_id: int, db: DatabaseService = Depends(get_db_service)):
    enrollment = db.get_enrollment(enrollment_id)
    if enrollment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Enrollment not found")
    return enrollment


@router.put("/{enrollment_id}", response_model=enrollment_model.Enrollment, summary="Update an Enrollment")
def update_enrollment(enrollment_id: int, enrollment_update: enrollment_model.EnrollmentUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated = db.update_enrollment(enrollment_id, enrollment_update.changes())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Enrollment not found")
    return updated


@router.delete("/{enrollment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove an Enrollment")
def delete_enrollment(enrollment_id: int, db: DatabaseService = Depends(get_db_service)):
    if not db.delete_enrollment(enrollment_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Enrollment not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
