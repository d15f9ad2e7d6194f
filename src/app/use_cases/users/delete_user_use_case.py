"""
Delete User Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from .dtos import UserInfo, UserResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for deleting a user.

    Business Rules:
    - The user's transactions are deleted together with the user
    - Response carries the deleted profile
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[UserResponse]:
        async with self.uow:
            user_uuid = parse_uuid(user_id)
            user = await self.uow.users.get_by_id(user_uuid) if user_uuid else None
            if user is None:
                logger.error("deleteUser: User not found (user_id=%s)", user_id)
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            deleted_info = UserInfo.from_entity(user)

            removed = await self.uow.transactions.delete_by_user_id(user.id)
            await self.uow.users.delete(user)

            await self.uow.commit()

        logger.info(
            "deleteUser: User deleted successfully (user_id=%s, transactions_deleted=%s)",
            user_id, removed,
        )

        return Return.ok(UserResponse(message="User deleted successfully", user=deleted_info))
