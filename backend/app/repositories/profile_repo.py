import dataclasses
import logging
from typing import List, Optional

from sqlalchemy import text

from app.models.profile import Profile
from app.repositories.base import SqlRepository, WriteOutcome
from app.repositories.row_mappers import map_profile_row

logger = logging.getLogger(__name__)

_LIST = text("SELECT * FROM profiles ORDER BY user_id")
_GET_BY_USER_ID = text("SELECT * FROM profiles WHERE user_id = :user_id")
_INSERT = text(
    "INSERT INTO profiles (user_id, first_name, last_name, phone, email, address, city, state, zip) "
    "VALUES (:user_id, :first_name, :last_name, :phone, :email, :address, :city, :state, :zip)"
)
_UPDATE = text(
    "UPDATE profiles SET first_name = :first_name, last_name = :last_name, phone = :phone, "
    "email = :email, address = :address, city = :city, state = :state, zip = :zip "
    "WHERE user_id = :user_id"
)
_DELETE = text("DELETE FROM profiles WHERE user_id = :user_id")


class ProfileRepository(SqlRepository):
    """Profiles are keyed by the owning user's id; there is no separate profile id."""

    def list_all(self) -> List[Profile]:
        return self._fetch_all(_LIST, map_profile_row)

    def get_by_user_id(self, user_id: int) -> Optional[Profile]:
        return self._fetch_one(_GET_BY_USER_ID, map_profile_row, {"user_id": user_id})

    def create(self, profile: Profile) -> Profile:
        self._execute(_INSERT, dataclasses.asdict(profile))
        logger.info(f"Added profile for user {profile.user_id}")
        return profile

    def update(self, profile: Profile) -> WriteOutcome:
        """Overwrite the profile owned by ``profile.user_id``."""
        result = self._execute(_UPDATE, dataclasses.asdict(profile))
        if result.rowcount == 0:
            logger.error(f"Update of profile for user {profile.user_id} affected no rows")
            return WriteOutcome.NO_ROWS_AFFECTED
        return WriteOutcome.UPDATED

    def delete(self, user_id: int) -> None:
        self._execute(_DELETE, {"user_id": user_id})
