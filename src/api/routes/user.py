from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from libs.result import Error

from src.api.error import ClientError, to_http_error
from src.app import errors
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import ITokenService, TokenClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersByPeriodUseCase,
    ListUsersUseCase,
    RegisterUserCommand,
    RegisterUserResponse,
    RegisterUserUseCase,
    UpdateUserUseCase,
    UserListResponse,
    UserResponse,
)
from src.depends import (
    get_current_user,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/user", tags=["User"])


def ensure_same_user(current_user: TokenClaims, user_id: str) -> None:
    """A token only grants access to the profile it was issued for"""
    if current_user.subject_id != user_id:
        raise ClientError(
            Error(errors.FORBIDDEN, "You are not allowed to access this user"),
            status_code=status.HTTP_403_FORBIDDEN,
        )


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterUserResponse
)
async def register(
    request: RegisterUserCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: ITokenService = Depends(get_token_service),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    User Registration

    Raises:
        - 400 Bad Request: Missing fields or email already registered
        - 500 Internal Server Error: Token generation failed
    """
    use_case = RegisterUserUseCase(uow, token_service, password_hasher)
    result = await use_case.execute(request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.patch("/update/{id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_user(
    id: str,
    updates: Dict[str, Any] = Body(...),
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User Profile

    Password and email are rejected; use reset-password for credentials.

    Raises:
        - 400 Bad Request: password/email in body or nothing to update
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: Token issued for another user
        - 404 Not Found: User not found
    """
    ensure_same_user(current_user, id)

    result = await UpdateUserUseCase(uow).execute(id, updates)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete("/delete/{id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def delete_user(
    id: str,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete User

    Removes the user and all of their transactions.
    """
    ensure_same_user(current_user, id)

    result = await DeleteUserUseCase(uow).execute(id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/profile/{id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_user(
    id: str,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    ensure_same_user(current_user, id)

    result = await GetUserUseCase(uow).execute(id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/list", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Raises:
        - 404 Not Found: No users registered
    """
    result = await ListUsersUseCase(uow).execute()

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/filter-by-period", status_code=status.HTTP_200_OK, response_model=UserListResponse
)
async def list_users_by_period(
    filter: Optional[str] = Query(default=None, description="day, week, month or year"),
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users Registered In The Current Period

    Raises:
        - 400 Bad Request: filter is not day/week/month/year
    """
    result = await ListUsersByPeriodUseCase(uow).execute(filter)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
