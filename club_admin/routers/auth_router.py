# /club_admin/routers/auth_router.py

"""
Session login for the admin front-end.

- `POST /login` checks the credentials and writes `userId` and `isAdmin`
  into the signed session cookie.
- `POST /logout` clears the session.
- `GET /me` returns the logged-in user.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..models.common import MessageResponse
from ..models.user_model import LoginRequest, LoginResponse
from ..services import auth_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse, summary="Log In")
def login(credentials: LoginRequest, request: Request, db: DatabaseService = Depends(get_db_service)):
    if not credentials.username or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password are required",
        )

    user = auth_service.authenticate_user(db, username=credentials.username, password=credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    request.session["userId"] = user.id
    request.session["isAdmin"] = user.isAdmin
    return LoginResponse(user=auth_service.to_public(user))


@router.post("/logout", response_model=MessageResponse, summary="Log Out")
def logout(request: Request):
    request.session.clear()
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=LoginResponse, summary="Get the Logged-In User")
def read_current_user(request: Request, db: DatabaseService = Depends(get_db_service)):
    user_id = request.session.get("userId")
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    user = db.get_user(int(user_id))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return LoginResponse(user=auth_service.to_public(user))
