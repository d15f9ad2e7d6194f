"""
Add Transaction Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from src.domain.entities import Transaction
from .dtos import AddTransactionCommand, TransactionInfo, TransactionResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "amount", "description", "date", "category", "transaction_type")


class AddTransactionUseCase:
    """
    Use case for recording a transaction.

    Business Rules:
    - title, amount, description, date, category and transactionType are required
    - userId defaults to the requester; recording for another user is forbidden
    - The owning user must exist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: AddTransactionCommand, requester_id: str
    ) -> Result[TransactionResponse]:
        missing = [f for f in REQUIRED_FIELDS if getattr(command, f) in (None, "")]
        if missing:
            logger.warning("addTransaction: Missing required fields (fields=%s)", missing)
            return Return.err(Error(errors.MISSING_FIELDS, "Please fill all required fields"))

        user_id = command.user_id or requester_id
        if user_id != requester_id:
            logger.error(
                "addTransaction: Requester does not own target user (user_id=%s, requester_id=%s)",
                user_id, requester_id,
            )
            return Return.err(
                Error(errors.FORBIDDEN, "You are not allowed to add transactions for this user")
            )

        async with self.uow:
            user_uuid = parse_uuid(user_id)
            user = await self.uow.users.get_by_id(user_uuid) if user_uuid else None
            if user is None:
                logger.error("addTransaction: User not found (user_id=%s)", user_id)
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            transaction = Transaction(
                user_id=user.id,
                title=command.title,
                amount=command.amount,
                description=command.description,
                date=command.date,
                category=command.category,
                transaction_type=command.transaction_type,
            )
            transaction = await self.uow.transactions.create(transaction)

            await self.uow.commit()

        logger.info(
            "addTransaction: Transaction added successfully (user_id=%s, transaction_id=%s)",
            user_id, str(transaction.id),
        )

        return Return.ok(
            TransactionResponse(
                message="Transaction added successfully",
                transaction=TransactionInfo.from_entity(transaction),
            )
        )
