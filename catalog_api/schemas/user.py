"""User Schemas — Pydantic models for user endpoints.

Invariants:
    - email is a plain string: the "@" shape check belongs to UserService
    - created_at is always serialized as ISO-8601 UTC
"""

from datetime import datetime

from pydantic import BaseModel

from catalog_api.core.user import User


class UserCreate(BaseModel):
    """User registration payload."""
    email: str
    first_name: str = ""
    last_name: str = ""
    is_active: bool = True

    def to_entity(self) -> User:
        return User(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            is_active=self.is_active,
        )


class UserUpdate(BaseModel):
    """Full-record replacement payload. id must match the path id."""
    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    is_active: bool = True

    def to_entity(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            is_active=self.is_active,
        )


class UserResponse(BaseModel):
    """Public user representation."""
    id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    created_at: datetime
    is_active: bool

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            created_at=user.created_at,
            is_active=user.is_active,
        )
