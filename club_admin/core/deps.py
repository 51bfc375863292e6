# /club_admin/core/deps.py

"""
FastAPI dependencies shared by the routers: the current settings and the
session-based authorization gates.

The session cookie carries two keys, `userId` and `isAdmin`, written by the
login endpoint. The data layer never authenticates anything itself; these
dependencies are the only gate in front of it.
"""

from fastapi import Depends, HTTPException, Request, status

from .config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user_id(request: Request) -> int:
    """Return the logged-in user's id or reject the request with a 401."""
    user_id = request.session.get("userId")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized - Please log in",
        )
    return int(user_id)


def require_admin(request: Request, user_id: int = Depends(get_current_user_id)) -> int:
    """Like `get_current_user_id`, but additionally requires an admin session."""
    if not request.session.get("isAdmin"):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized - Admin rights required",
        )
    return user_id
