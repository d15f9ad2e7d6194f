from typing import Optional

from fastapi import APIRouter, Depends, status

from src.api.error import to_http_error
from src.app import errors
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import ITokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.base import CamelModel
from src.app.use_cases.auth import (
    ForgetPasswordResponse,
    ForgetPasswordUseCase,
    LoginResponse,
    LoginUseCase,
    ResetPasswordResponse,
    ResetPasswordUseCase,
)
from src.depends import (
    get_password_hasher,
    get_reset_url_base,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])

# Token failures on reset are reported as 400, not 401
RESET_STATUS_OVERRIDES = {
    errors.INVALID_TOKEN: status.HTTP_400_BAD_REQUEST,
    errors.TOKEN_USER_MISMATCH: status.HTTP_400_BAD_REQUEST,
}


class LoginRequest(CamelModel):
    """
    Login HTTP request payload

    Fields are optional so missing ones are reported by the use case
    with a single 400 message.
    """

    email: Optional[str] = None
    password: Optional[str] = None


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: ITokenService = Depends(get_token_service),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    User Login

    Authenticates user and returns the profile with an identity token.

    Raises:
        - 400 Bad Request: Missing email or password
        - 401 Unauthorized: Invalid credentials (same for unknown email and wrong password)
        - 500 Internal Server Error: Token secret not configured or server error
    """
    use_case = LoginUseCase(uow, token_service, password_hasher)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


class ForgetPasswordRequest(CamelModel):
    """Forget password HTTP request payload"""

    email: Optional[str] = None


@router.post(
    "/forget-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgetPasswordResponse,
)
async def forget_password(
    request: ForgetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: ITokenService = Depends(get_token_service),
    reset_url_base: str = Depends(get_reset_url_base),
):
    """
    Forget Password

    Returns a reset link containing the user id and a 59-minute token.
    The link is not emailed.

    Raises:
        - 400 Bad Request: Missing email
        - 404 Not Found: No user with this email
        - 500 Internal Server Error: Reset URL or token secret not configured
    """
    use_case = ForgetPasswordUseCase(uow, token_service, reset_url_base)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


class ResetPasswordRequest(CamelModel):
    """Reset password HTTP request payload ({password, confirmPassword})"""

    password: Optional[str] = None
    confirm_password: Optional[str] = None


@router.post(
    "/reset-password/{id}/{token}",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password(
    id: str,
    token: str,
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: ITokenService = Depends(get_token_service),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Reset Password

    Verifies the token from the reset link and stores the new password.

    Raises:
        - 400 Bad Request: Missing/mismatched passwords, invalid or expired token,
          token issued for another user
        - 404 Not Found: No user with this id
        - 500 Internal Server Error: Token secret not configured or server error
    """
    use_case = ResetPasswordUseCase(uow, token_service, password_hasher)
    result = await use_case.execute(id, token, request.password, request.confirm_password)

    if result.is_err():
        raise to_http_error(result.error, RESET_STATUS_OVERRIDES)

    return result.value
