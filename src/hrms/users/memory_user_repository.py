from __future__ import annotations

from typing import Iterable, Optional

from werkzeug.security import generate_password_hash

from .model import User
from .repository import UserRepository

DEMO_USERS = (
    {"user_id": "1", "email": "admin@hrms.com", "password": "admin123", "name": "Admin User", "role": "Administrator"},
    {"user_id": "2", "email": "hr@hrms.com", "password": "hr123", "name": "HR Manager", "role": "HR Manager"},
    {"user_id": "3", "email": "demo@hrms.com", "password": "demo123", "name": "Demo User", "role": "Employee"},
)


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Iterable[User]):
        self._by_email = {u.email.lower(): u for u in users}

    @classmethod
    def with_demo_users(cls) -> "InMemoryUserRepository":
        return cls(
            User(
                user_id=u["user_id"],
                email=u["email"],
                name=u["name"],
                role=u["role"],
                password_hash=generate_password_hash(u["password"]),
            )
            for u in DEMO_USERS
        )

    def get_by_email(self, email: str) -> Optional[User]:
        return self._by_email.get((email or "").strip().lower())
