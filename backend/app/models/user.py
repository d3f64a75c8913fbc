from dataclasses import dataclass

ROLE_ADMIN = "ROLE_ADMIN"
ROLE_USER = "ROLE_USER"


@dataclass(frozen=True)
class User:
    user_id: int
    username: str
    role: str = ROLE_USER

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
