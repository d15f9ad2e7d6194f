"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for login, forget-password and reset-password.
"""

from src.app.use_cases.base import CamelModel
from src.app.use_cases.users.dtos import UserInfo


class LoginResponse(CamelModel):
    """Response for user login use case"""

    success: bool = True
    message: str
    user: UserInfo
    token: str


class ForgetPasswordResponse(CamelModel):
    """Response for forget password use case"""

    success: bool = True
    message: str
    reset_password_link: str


class ResetPasswordResponse(CamelModel):
    """Response for reset password use case"""

    success: bool = True
    message: str
