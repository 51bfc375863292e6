# /club_admin/services/auth_service.py

"""
Business logic for staff accounts: credential checks and account creation.

Passwords are stored and compared as plain strings. This backend is meant
for a single trusted club office and does not attempt to harden that.
"""

import logging
import secrets
from typing import List, Optional

from ..models.user_model import User, UserCreate, UserRecord
from .database_helpers.user_repository import DuplicateUsernameError
from .database_service import DatabaseService

logger = logging.getLogger("club_admin.auth")


def to_public(user: UserRecord) -> User:
    """Strips the password off a stored user."""
    return User.model_validate(user.model_dump(exclude={"password"}))


def authenticate_user(db: DatabaseService, username: str, password: str) -> Optional[UserRecord]:
    user = db.get_user_by_username(username)
    if user is None or not secrets.compare_digest(user.password.encode("utf-8"), password.encode("utf-8")):
        logger.warning("Failed login attempt for username %r", username)
        return None
    logger.info("User %s (%s) logged in", user.id, user.username)
    return user


def create_user(db: DatabaseService, user: UserCreate) -> User:
    """Creates an account. Raises DuplicateUsernameError if the name is taken."""
    new_user = db.add_user(user.model_dump())
    logger.info("Created user %s (%s), admin=%s", new_user.id, new_user.username, new_user.isAdmin)
    return to_public(new_user)


def list_users(db: DatabaseService) -> List[User]:
    return [to_public(user) for user in db.get_all_users()]
