import logging

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from .dtos import TransactionInfo, TransactionResponse

logger = logging.getLogger(__name__)


class DeleteTransactionUseCase:
    """Use case for deleting one of the requester's transactions."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, transaction_id: str, requester_id: str) -> Result[TransactionResponse]:
        async with self.uow:
            transaction_uuid = parse_uuid(transaction_id)
            transaction = (
                await self.uow.transactions.get_by_id(transaction_uuid)
                if transaction_uuid
                else None
            )
            if transaction is None:
                logger.error(
                    "deleteTransaction: Transaction not found (transaction_id=%s)",
                    transaction_id,
                )
                return Return.err(Error(errors.TRANSACTION_NOT_FOUND, "Transaction not found"))

            if str(transaction.user_id) != requester_id:
                logger.error(
                    "deleteTransaction: Requester does not own transaction (transaction_id=%s, requester_id=%s)",
                    transaction_id, requester_id,
                )
                return Return.err(
                    Error(errors.FORBIDDEN, "You are not allowed to access this transaction")
                )

            deleted_info = TransactionInfo.from_entity(transaction)
            await self.uow.transactions.delete(transaction)

            await self.uow.commit()

        logger.info(
            "deleteTransaction: Transaction deleted successfully (transaction_id=%s, user_id=%s)",
            transaction_id, requester_id,
        )

        return Return.ok(
            TransactionResponse(
                message="Transaction deleted successfully", transaction=deleted_info
            )
        )
