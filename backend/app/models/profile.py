from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """Contact details; exactly one per user, keyed by ``user_id``."""
    user_id: int
    first_name: str
    last_name: str
    phone: str
    email: str
    address: str
    city: str
    state: str
    zip: str
