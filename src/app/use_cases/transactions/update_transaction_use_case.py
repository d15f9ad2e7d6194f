"""
Update Transaction Use Case
"""

import logging
from datetime import datetime

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from .dtos import TransactionInfo, TransactionResponse, UpdateTransactionCommand

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "amount", "description", "date", "category", "transaction_type")


class UpdateTransactionUseCase:
    """
    Use case for partially updating a transaction.

    Business Rules:
    - Only fields present in the request are changed (null values are skipped)
    - The transaction must belong to the requester
    - Reassigning userId is only allowed to an existing user equal to the requester
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        transaction_id: str,
        command: UpdateTransactionCommand,
        requester_id: str,
    ) -> Result[TransactionResponse]:
        if not transaction_id:
            logger.warning("updateTransaction: Missing transactionId in params")
            return Return.err(Error(errors.MISSING_PARAMS, "Transaction id is required"))

        provided = command.model_dump(exclude_unset=True, exclude_none=True)
        changes = {k: v for k, v in provided.items() if k in UPDATABLE_FIELDS}
        new_user_id = provided.get("user_id")

        if not changes and new_user_id is None:
            logger.warning(
                "updateTransaction: No updatable fields provided (transaction_id=%s)",
                transaction_id,
            )
            return Return.err(Error(errors.NO_FIELDS_TO_UPDATE, "No fields provided to update"))

        async with self.uow:
            if new_user_id is not None:
                user_uuid = parse_uuid(new_user_id)
                user = await self.uow.users.get_by_id(user_uuid) if user_uuid else None
                if user is None:
                    logger.error(
                        "updateTransaction: User not found (user_id=%s, transaction_id=%s)",
                        new_user_id, transaction_id,
                    )
                    return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))
                if new_user_id != requester_id:
                    logger.error(
                        "updateTransaction: Reassignment to another user refused (user_id=%s, requester_id=%s)",
                        new_user_id, requester_id,
                    )
                    return Return.err(
                        Error(errors.FORBIDDEN, "You are not allowed to access this transaction")
                    )

            transaction_uuid = parse_uuid(transaction_id)
            transaction = (
                await self.uow.transactions.get_by_id(transaction_uuid)
                if transaction_uuid
                else None
            )
            if transaction is None:
                logger.error(
                    "updateTransaction: Transaction not found (transaction_id=%s)",
                    transaction_id,
                )
                return Return.err(Error(errors.TRANSACTION_NOT_FOUND, "Transaction not found"))

            if str(transaction.user_id) != requester_id:
                logger.error(
                    "updateTransaction: Requester does not own transaction (transaction_id=%s, requester_id=%s)",
                    transaction_id, requester_id,
                )
                return Return.err(
                    Error(errors.FORBIDDEN, "You are not allowed to access this transaction")
                )

            for field, value in changes.items():
                setattr(transaction, field, value)
            transaction.updated_at = datetime.utcnow()
            transaction = await self.uow.transactions.update(transaction)

            await self.uow.commit()

        logger.info(
            "updateTransaction: Transaction updated successfully (transaction_id=%s, fields=%s)",
            transaction_id, sorted(changes),
        )

        return Return.ok(
            TransactionResponse(
                message="Transaction updated successfully",
                transaction=TransactionInfo.from_entity(transaction),
            )
        )
