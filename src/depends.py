from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from libs.result import Error
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jose_token_service import JoseTokenService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, ServerError
from src.app import errors
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import (
    ITokenService,
    TokenClaims,
    TokenConfigError,
    TokenError,
)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

_token_service = JoseTokenService(ApplicationConfig.ACCESS_TOKEN_SECRET)
_password_hasher = BcryptPasswordHasher()


async def init_db() -> None:
    # Register table metadata before create_all
    import src.domain.entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_service() -> ITokenService:
    return _token_service


def get_password_hasher() -> IPasswordHasher:
    return _password_hasher


def get_reset_url_base() -> str:
    """Base of the link returned by forget-password, empty when not configured"""
    if not ApplicationConfig.CLIENT_RESET_URL:
        return ""
    return (
        f"{ApplicationConfig.CLIENT_RESET_URL.rstrip('/')}"
        f"{ApplicationConfig.API_PREFIX}/auth/reset-password"
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: ITokenService = Depends(get_token_service),
) -> TokenClaims:
    """
    Dependency to extract and verify the bearer token from the Authorization header.

    Returns:
        Verified claims; subject_id is the caller's user id

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
        ServerError: token signing secret is not configured
    """
    if credentials is None:
        raise ClientError(
            Error(errors.INVALID_TOKEN, "Authorization token is required"),
            status_code=401,
        )

    try:
        return token_service.verify(credentials.credentials)
    except TokenConfigError:
        raise ServerError(Error(errors.SERVER_CONFIG_ERROR, "Server configuration error"))
    except TokenError:
        raise ClientError(
            Error(errors.INVALID_TOKEN, "Invalid or expired token"), status_code=401
        )
