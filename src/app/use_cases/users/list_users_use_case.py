"""
List Users Use Cases

Full user listing and listing by registration period.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserPeriod
from .dtos import UserInfo, UserListResponse

logger = logging.getLogger(__name__)


def period_start(period: UserPeriod, now: datetime) -> datetime:
    """
    Start of the period containing now.

    Weeks start on Sunday.
    """
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == UserPeriod.day:
        return today
    if period == UserPeriod.week:
        # weekday(): Monday == 0 ... Sunday == 6
        return today - timedelta(days=(today.weekday() + 1) % 7)
    if period == UserPeriod.month:
        return today.replace(day=1)
    return today.replace(month=1, day=1)


class ListUsersUseCase:
    """
    Use case for listing all users, newest first.

    An empty store is reported as not found.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[UserListResponse]:
        async with self.uow:
            users = [UserInfo.from_entity(u) for u in await self.uow.users.list_all()]

        if not users:
            logger.warning("getAllUsers: No users found in the database")
            return Return.err(Error(errors.NO_USERS_FOUND, "No users found"))

        logger.info("getAllUsers: Users retrieved (count=%s)", len(users))

        return Return.ok(
            UserListResponse(
                message="Users retrieved successfully",
                users=users,
            )
        )


class ListUsersByPeriodUseCase:
    """Use case for listing users registered since the start of the current day/week/month/year."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, period: Optional[str], now: Optional[datetime] = None
    ) -> Result[UserListResponse]:
        try:
            user_period = UserPeriod(period)
        except ValueError:
            logger.error("getUsersByPeriod: Invalid filter param (filter=%s)", period)
            return Return.err(Error(errors.INVALID_FILTER, "Invalid filter parameter"))

        since = period_start(user_period, now or datetime.utcnow())

        async with self.uow:
            users = [
                UserInfo.from_entity(u)
                for u in await self.uow.users.list_created_since(since)
            ]

        logger.info(
            "getUsersByPeriod: Users retrieved (filter=%s, count=%s)",
            user_period.value, len(users),
        )

        return Return.ok(
            UserListResponse(
                message=f"Users created since {user_period.value} retrieved",
                users=users,
            )
        )
