"""
User Use Case DTOs (Data Transfer Objects)

Response classes for the user domain. UserInfo is the only shape in which a
user leaves the application layer; it has no password field.
"""

from datetime import datetime
from typing import List, Optional

from src.app.use_cases.base import CamelModel
from src.domain.entities import User


class UserInfo(CamelModel):
    """Public user profile"""

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class RegisterUserCommand(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterUserResponse(CamelModel):
    success: bool = True
    message: str
    user: UserInfo
    token: str


class UserResponse(CamelModel):
    """Response carrying a single user"""

    success: bool = True
    message: str
    user: UserInfo


class UserListResponse(CamelModel):
    success: bool = True
    message: str
    users: List[UserInfo]
