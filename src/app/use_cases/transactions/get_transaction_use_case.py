import logging

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from .dtos import TransactionInfo, TransactionResponse

logger = logging.getLogger(__name__)


class GetTransactionUseCase:
    """Use case for reading one of the requester's transactions."""

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
            transaction_info = (
                TransactionInfo.from_entity(transaction) if transaction is not None else None
            )

        if transaction_info is None:
            logger.error(
                "getTransactionById: Transaction not found (transaction_id=%s)",
                transaction_id,
            )
            return Return.err(Error(errors.TRANSACTION_NOT_FOUND, "Transaction not found"))

        if transaction_info.user_id != requester_id:
            logger.error(
                "getTransactionById: Requester does not own transaction (transaction_id=%s, requester_id=%s)",
                transaction_id, requester_id,
            )
            return Return.err(
                Error(errors.FORBIDDEN, "You are not allowed to access this transaction")
            )

        logger.info(
            "getTransactionById: Retrieved transaction successfully (transaction_id=%s)",
            transaction_id,
        )

        return Return.ok(
            TransactionResponse(
                message="Transaction retrieved successfully",
                transaction=transaction_info,
            )
        )
