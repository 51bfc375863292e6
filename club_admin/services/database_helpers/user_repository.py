# /club_admin/services/database_helpers/user_repository.py

from typing import Dict, List, Optional

from club_admin.models.user_model import UserRecord
from .base_repository import EntityStore


class DuplicateUsernameError(ValueError):
    pass


class UserRepository:
    def __init__(self):
        self.users: EntityStore[UserRecord] = EntityStore(UserRecord)

    def get_user_by_id(self, user_id: int) -> Optional[UserRecord]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        """Usernames are compared exactly and are unique across all users."""
        return self.users.find(lambda user: user.username == username)

    def get_all_users(self) -> List[UserRecord]:
        return self.users.list()

    def add_user(self, record: Dict) -> UserRecord:
        self._ensure_username_free(record.get("username"))
        return self.users.add(record)

    def update_user(self, user_id: int, data: Dict) -> Optional[UserRecord]:
        if user_id not in self.users:
            return None
        if "username" in data:
            self._ensure_username_free(data["username"], exclude_id=user_id)
        return self.users.update(user_id, data)

    def delete_user(self, user_id: int) -> bool:
        return self.users.delete(user_id)

    def _ensure_username_free(self, username: Optional[str], exclude_id: Optional[int] = None) -> None:
        taken = self.users.find(lambda user: user.username == username and user.id != exclude_id)
        if taken is not None:
            raise DuplicateUsernameError(f"Username '{username}' is already taken.")
