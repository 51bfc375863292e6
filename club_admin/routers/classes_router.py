# /club_admin/routers/classes_router.py

from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import StreamingResponse

from ..models import class_model, student_model
from ..services import class_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- CLASS COLLECTION ENDPOINTS (/api/classes) ---

@router.get("", response_model=List[class_model.Class], summary="Get Classes, Optionally by Course")
def get_classes(courseId: Optional[int] = None, db: DatabaseService = Depends(get_db_service)):
    return db.get_classes(course_id=courseId)

@router.post("", response_model=class_model.Class, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_class(class_create: class_model.ClassCreate, db: DatabaseService = Depends(get_db_service)):
    return db.add_class(class_create.model_dump())

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.get("/{class_id}", response_model=class_model.Class, summary="Get a Single Class")
def get_class_by_id(class_id: int, db: DatabaseService = Depends(get_db_service)):
    class_info = db.get_class(class_id)
    if class_info is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return class_info

@router.put("/{class_id}", response_model=class_model.Class, summary="Update a Class")
def update_class_details(class_id: int, class_update: class_model.ClassUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated_class = db.update_class(class_id, class_update.changes())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_class is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return updated_class

@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Class")
def delete_class(class_id: int, db: DatabaseService = Depends(get_db_service)):
    if not db.delete_class(class_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# --- ROSTER SUB-RESOURCE ENDPOINTS ---

@router.get("/{class_id}/students", response_model=List[student_model.Student], summary="Get Students Actively Enrolled in a Class")
def get_class_students(class_id: int, db: DatabaseService = Depends(get_db_service)):
    students = class_service.get_enrolled_students(class_id=class_id, db=db)
    if students is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return students

@router.get("/{class_id}/export", summary="Export Class Roster as CSV", response_class=StreamingResponse)
def export_class_roster_csv(class_id: int, db: DatabaseService = Depends(get_db_service)):
    try:
        csv_string = class_service.export_roster_as_csv(class_id=class_id, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    class_name = db.get_class(class_id).name
    file_name = f"roster_{class_name.replace(' ', '_').lower()}.csv"
    # Header values must be latin-1; the real (often Greek) name travels in filename*.
    disposition = f"attachment; filename=roster_{class_id}.csv; filename*=UTF-8''{quote(file_name)}"
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": disposition},
    )
