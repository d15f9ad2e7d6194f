"""
List Transactions Use Case

Filters a user's transactions by type and date and splits them into
expenses and income.
"""

import logging
import math
from datetime import datetime, time, timedelta
from typing import List, Optional, Tuple

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from src.domain.entities import Transaction, TransactionType
from .dtos import ListTransactionsQuery, TransactionInfo, TransactionListResponse

logger = logging.getLogger(__name__)


def split_by_type(
    transactions: List[Transaction],
) -> Tuple[List[Transaction], List[Transaction]]:
    """Split into (expenses, income), keeping order"""
    expenses = [t for t in transactions if t.transaction_type == TransactionType.expense]
    income = [t for t in transactions if t.transaction_type == TransactionType.income]
    return expenses, income


class ListTransactionsUseCase:
    """
    Use case for listing a user's transactions.

    Filters:
    - type: "all" (or absent) keeps every type, otherwise expense/income
    - frequency: number of days back from now; "custom" disables it
    - startDate + endDate: whole-day inclusive range, overrides frequency
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _resolve_type(self, value: Optional[str]) -> Result[Optional[TransactionType]]:
        if not value or value == "all":
            return Return.ok(None)
        try:
            return Return.ok(TransactionType(value))
        except ValueError:
            return Return.err(Error(errors.INVALID_FILTER, "Invalid transaction type"))

    def _resolve_dates(
        self, query: ListTransactionsQuery, now: datetime
    ) -> Result[Tuple[Optional[datetime], Optional[datetime]]]:
        date_from = date_to = None

        frequency = query.frequency
        if frequency and frequency != "custom":
            try:
                days = float(frequency)
                if not math.isfinite(days) or days < 0:
                    raise ValueError(frequency)
                date_from = now - timedelta(days=days)
            except (TypeError, ValueError, OverflowError):
                return Return.err(Error(errors.INVALID_FREQUENCY, "Invalid frequency value"))

        if query.start_date and query.end_date:
            start = datetime.combine(query.start_date, time.min)
            end = datetime.combine(query.end_date, time.max)
            if start > end:
                return Return.err(
                    Error(errors.INVALID_DATE_RANGE, "Start date must be earlier than end date")
                )
            date_from, date_to = start, end

        return Return.ok((date_from, date_to))

    async def execute(
        self,
        query: ListTransactionsQuery,
        requester_id: str,
        now: Optional[datetime] = None,
    ) -> Result[TransactionListResponse]:
        user_id = query.user_id or requester_id
        if user_id != requester_id:
            logger.error(
                "getAllTransaction: Requester does not own target user (user_id=%s, requester_id=%s)",
                user_id, requester_id,
            )
            return Return.err(
                Error(errors.FORBIDDEN, "You are not allowed to list transactions for this user")
            )

        async with self.uow:
            user_uuid = parse_uuid(user_id)
            user = await self.uow.users.get_by_id(user_uuid) if user_uuid else None
            if user is None:
                logger.error("getAllTransaction: User not found (user_id=%s)", user_id)
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            type_result = self._resolve_type(query.type)
            if type_result.is_err():
                logger.warning("getAllTransaction: Invalid type (user_id=%s)", user_id)
                return Return.err(type_result.error)

            dates_result = self._resolve_dates(query, now or datetime.utcnow())
            if dates_result.is_err():
                logger.warning(
                    "getAllTransaction: Invalid date filter (user_id=%s, code=%s)",
                    user_id, dates_result.error.code,
                )
                return Return.err(dates_result.error)

            date_from, date_to = dates_result.value
            transactions = await self.uow.transactions.list_by_user(
                user.id,
                transaction_type=type_result.value,
                date_from=date_from,
                date_to=date_to,
            )
            expenses, income = split_by_type(transactions)
            response = TransactionListResponse(
                transactions=[TransactionInfo.from_entity(t) for t in transactions],
                expenses=[TransactionInfo.from_entity(t) for t in expenses],
                income=[TransactionInfo.from_entity(t) for t in income],
            )

        logger.info(
            "getAllTransaction: Retrieved transactions (user_id=%s, count=%s)",
            user_id, len(transactions),
        )

        return Return.ok(response)
