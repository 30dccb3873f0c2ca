from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Dashboard login account (fixed demo list, no roles enforced)."""

    user_id: str
    email: str
    name: str
    role: str
    password_hash: str


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    email: str
    name: str
    role: str

    def to_dict(self) -> dict:
        return {"user_id": self.user_id, "email": self.email, "name": self.name, "role": self.role}
