import logging

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from .dtos import UserInfo, UserResponse

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Use case for reading a single user profile."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[UserResponse]:
        async with self.uow:
            user_uuid = parse_uuid(user_id)
            user = await self.uow.users.get_by_id(user_uuid) if user_uuid else None
            user_info = UserInfo.from_entity(user) if user is not None else None

        if user_info is None:
            logger.error("getUserById: User not found (user_id=%s)", user_id)
            return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

        logger.info("getUserById: User retrieved successfully (user_id=%s)", user_id)

        return Return.ok(
            UserResponse(message="User retrieved successfully", user=user_info)
        )
