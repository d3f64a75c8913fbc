from typing import Optional

from sqlalchemy import text

from app.models.user import User
from app.repositories.base import SqlRepository
from app.repositories.row_mappers import map_user_row

_GET_BY_ID = text("SELECT user_id, username, role FROM users WHERE user_id = :user_id")
_GET_BY_USERNAME = text("SELECT user_id, username, role FROM users WHERE username = :username")


class UserRepository(SqlRepository):
    """Read-only view of the accounts owned by the authentication service."""

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._fetch_one(_GET_BY_ID, map_user_row, {"user_id": user_id})

    def get_by_username(self, username: str) -> Optional[User]:
        return self._fetch_one(_GET_BY_USERNAME, map_user_row, {"username": username})
