# /club_admin/routers/users_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.user_model import User, UserCreate
from ..services import auth_service
from ..services.database_service import DatabaseService, get_db_service

# Mounted behind `require_admin` in main.py.
router = APIRouter()


@router.get("", response_model=List[User], summary="List Staff Accounts")
def get_all_users(db: DatabaseService = Depends(get_db_service)):
    return auth_service.list_users(db)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED, summary="Create a Staff Account")
def create_user(user_in: UserCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return auth_service.create_user(db=db, user=user_in)
    except auth_service.DuplicateUsernameError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
