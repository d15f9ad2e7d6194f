"""
User Use Cases

Registration and profile management.
"""

from .register_user_use_case import RegisterUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .get_user_use_case import GetUserUseCase
from .list_users_use_case import ListUsersUseCase, ListUsersByPeriodUseCase
from .dtos import (
    RegisterUserCommand,
    RegisterUserResponse,
    UserInfo,
    UserListResponse,
    UserResponse,
)

__all__ = [
    # Use Cases
    "RegisterUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "ListUsersByPeriodUseCase",
    # DTOs
    "RegisterUserCommand",
    "RegisterUserResponse",
    "UserInfo",
    "UserListResponse",
    "UserResponse",
]
