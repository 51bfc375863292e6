# /club_admin/routers/school_years_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..models import school_year_model
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[school_year_model.SchoolYear], summary="Get All School Years")
def get_all_school_years(db: DatabaseService = Depends(get_db_service)):
    return db.get_all_school_years()


@router.post("", response_model=school_year_model.SchoolYear, status_code=status.HTTP_201_CREATED, summary="Create a School Year")
def create_school_year(school_year: school_year_model.SchoolYearCreate, db: DatabaseService = Depends(get_db_service)):
    return db.add_school_year(school_year.model_dump())


@router.get("/{school_year_id}", response_model=school_year_model.SchoolYear, summary="Get a School Year")
def get_school_year(school_year_id: int, db: DatabaseService = Depends(get_db_service)):
    school_year = db.get_school_year(school_year_id)
    if school_year is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="School year not found")
    return school_year


@router.put("/{school_year_id}", response_model=school_year_model.SchoolYear, summary="Update a School Year")
def update_school_year(school_year_id: int, school_year_update: school_year_model.SchoolYearUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated = db.update_school_year(school_year_id, school_year_update.changes())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="School year not found")
    return updated


@router.delete("/{school_year_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a School Year")
def delete_school_year(school_year_id: int, db: DatabaseService = Depends(get_db_service)):
    if not db.delete_school_year(school_year_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="School year not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
