"""
Authentication Use Cases

Login and credential reset flows.
"""

from .login_use_case import LoginUseCase
from .forget_password_use_case import ForgetPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    LoginResponse,
    ForgetPasswordResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "ForgetPasswordUseCase",
    "ResetPasswordUseCase",
    # DTOs - Responses
    "LoginResponse",
    "ForgetPasswordResponse",
    "ResetPasswordResponse",
]
