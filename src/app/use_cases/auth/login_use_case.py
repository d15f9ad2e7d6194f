"""
Login Use Case

Authenticates a user by email and password and issues an identity token.
"""

import logging
from typing import Optional

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import ITokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.dtos import UserInfo
from .dtos import LoginResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Email and password are both required
    - Unknown email and wrong password produce the same error
      (no user enumeration)
    - Token service must be configured before a token is issued
    - The returned user never carries the password hash
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
    ):
        self.uow = uow
        self.token_service = token_service
        self.password_hasher = password_hasher

    async def execute(
        self, email: Optional[str], password: Optional[str]
    ) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the user and token, or Error
        """
        if not email or not password:
            logger.warning("login: Missing email or password (email=%s)", email)
            return Return.err(
                Error(errors.MISSING_FIELDS, "Email and password are required")
            )

        try:
            async with self.uow:
                user = await self.uow.users.get_by_email(email)

                if user is None:
                    logger.warning(
                        "login: Invalid credentials - user not found (email=%s)",
                        email,
                    )
                    return Return.err(
                        Error(errors.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)
                    )

                if not await self.password_hasher.verify(password, user.password_hash):
                    logger.warning(
                        "login: Invalid credentials - wrong password (user_id=%s)",
                        str(user.id),
                    )
                    return Return.err(
                        Error(errors.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)
                    )

                if not self.token_service.is_configured:
                    logger.error("login: Token signing secret is not configured")
                    return Return.err(
                        Error(errors.SERVER_CONFIG_ERROR, "Server configuration error")
                    )

                user_info = UserInfo.from_entity(user)
                token = self.token_service.issue(user_info.id)
        except Exception:
            logger.exception("login: Unexpected error (email=%s)", email)
            return Return.err(
                Error(
                    errors.UNKNOWN_ERROR,
                    "Something went wrong during login, please try again later.",
                )
            )

        logger.info("login: Login successful (user_id=%s)", user_info.id)

        return Return.ok(
            LoginResponse(
                message="Login successful",
                user=user_info,
                token=token,
            )
        )
