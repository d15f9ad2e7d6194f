"""
Update User Use Case

Edits non-credential profile fields.
"""

import logging
from datetime import datetime
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from .dtos import UserInfo, UserResponse

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name",)


class UpdateUserUseCase:
    """
    Use case for updating a user profile.

    Business Rules:
    - Password changes go through reset-password only
    - Email cannot be changed through this route
    - Unknown fields are ignored; at least one updatable field is required
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, updates: Dict[str, Any]) -> Result[UserResponse]:
        if "password" in updates:
            logger.warning("updateUser: Attempt to update password was ignored (user_id=%s)", user_id)
            return Return.err(
                Error(errors.FIELD_NOT_UPDATABLE, "Password cannot be updated via this route")
            )

        if "email" in updates:
            logger.warning("updateUser: Attempt to update email was ignored (user_id=%s)", user_id)
            return Return.err(
                Error(errors.FIELD_NOT_UPDATABLE, "Email cannot be updated via this route")
            )

        changes = {k: v for k, v in updates.items() if k in UPDATABLE_FIELDS and v}
        if not changes:
            logger.warning("updateUser: No updatable fields provided (user_id=%s)", user_id)
            return Return.err(Error(errors.NO_FIELDS_TO_UPDATE, "No fields provided to update"))

        async with self.uow:
            user_uuid = parse_uuid(user_id)
            user = await self.uow.users.get_by_id(user_uuid) if user_uuid else None
            if user is None:
                logger.error("updateUser: User not found (user_id=%s)", user_id)
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            for field, value in changes.items():
                setattr(user, field, value)
            user.updated_at = datetime.utcnow()
            user = await self.uow.users.update(user)

            await self.uow.commit()

        logger.info("updateUser: User updated successfully (user_id=%s)", user_id)

        return Return.ok(
            UserResponse(message="User updated successfully", user=UserInfo.from_entity(user))
        )
