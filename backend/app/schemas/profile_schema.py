from typing import Optional

from app.models.profile import Profile
from app.schemas.base import WireModel


class ProfileIn(WireModel):
    # only trusted for anonymous sign-up; authenticated writes use the caller's id
    user_id: Optional[int] = None
    first_name: str
    last_name: str
    phone: str
    email: str
    address: str
    city: str
    state: str
    zip: str

    def to_model(self, user_id: int) -> Profile:
        return Profile(
            user_id=user_id,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            city=self.city,
            state=self.state,
            zip=self.zip,
        )


class ProfileOut(WireModel):
    user_id: int
    first_name: str
    last_name: str
    phone: str
    email: str
    address: str
    city: str
    state: str
    zip: str
