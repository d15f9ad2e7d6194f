"""
Register User Use Case

Creates a credential record and issues a first identity token.
"""

import logging

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import ITokenService, TokenConfigError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import RegisterUserCommand, RegisterUserResponse, UserInfo

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Use case for user registration.

    Business Rules:
    - Name, email and password are required
    - Email must not already be registered
    - Password is stored as a bcrypt hash
    - A token is issued for the new user; failure to issue one is a server error
      (the user record is kept, the caller can log in once configuration is fixed)
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

    async def execute(self, command: RegisterUserCommand) -> Result[RegisterUserResponse]:
        if not command.name or not command.email or not command.password:
            logger.warning("register: Missing required fields (email=%s)", command.email)
            return Return.err(
                Error(errors.MISSING_FIELDS, "Name, email and password are required")
            )

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                logger.error("register: User already exists (email=%s)", command.email)
                return Return.err(Error(errors.USER_ALREADY_EXISTS, "User already exists"))

            user = User(
                name=command.name,
                email=command.email,
                password_hash=await self.password_hasher.hash(command.password),
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

        try:
            token = self.token_service.issue(str(user.id))
        except TokenConfigError:
            logger.error("register: Token generation failed (user_id=%s)", str(user.id))
            return Return.err(
                Error(errors.TOKEN_GENERATION_FAILED, "Token generation failed")
            )

        logger.info("register: User registered successfully (user_id=%s)", str(user.id))

        return Return.ok(
            RegisterUserResponse(
                message="User registered successfully",
                user=UserInfo.from_entity(user),
                token=token,
            )
        )
