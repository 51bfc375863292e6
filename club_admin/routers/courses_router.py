# /club_admin/routers/courses_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..models import course_model
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[course_model.Course], summary="Get Courses, Optionally by School Year")
def get_courses(schoolYearId: Optional[int] = None, db: DatabaseService = Depends(get_db_service)):
    return db.get_courses(school_year_id=schoolYearId)


@router.post("", response_model=course_model.Course, status_code=status.HTTP_201_CREATED, summary="Create a Course")
def create_course(course: course_model.CourseCreate, db: DatabaseService = Depends(get_db_service)):
    return db.add_course(course.model_dump())


@router.get("/{course_id}", response_model=course_model.Course, summary="Get a Course")
def get_course(course_id: int, db: DatabaseService = Depends(get_db_service)):
    course = db.get_course(course_id)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return course


@router.put("/{course_id}", response_model=course_model.Course, summary="Update a Course")
def update_course(course_id: int, course_update: course_model.CourseUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated = db.update_course(course_id, course_update.changes())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return updated


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Course")
def delete_course(course_id: int, db: DatabaseService = Depends(get_db_service)):
    if not db.delete_course(course_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
