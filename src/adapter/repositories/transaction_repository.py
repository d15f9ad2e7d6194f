from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.transaction_repository import ITransactionRepository
from src.domain.entities import Transaction, TransactionType


class TransactionRepository(ITransactionRepository):
    """Transaction repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Get transaction by ID"""
        stmt = select(Transaction).where(Transaction.id == transaction_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, transaction: Transaction) -> Transaction:
        """Create a new transaction"""
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def update(self, transaction: Transaction) -> Transaction:
        """Update existing transaction"""
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def delete(self, transaction: Transaction) -> None:
        await self.session.delete(transaction)
        await self.session.flush()

    async def delete_by_user_id(self, user_id: UUID) -> int:
        stmt = select(Transaction).where(Transaction.user_id == user_id)
        result = await self.session.exec(stmt)
        transactions = list(result.all())
        for transaction in transactions:
            await self.session.delete(transaction)
        await self.session.flush()
        return len(transactions)

    async def list_by_user(
        self,
        user_id: UUID,
        transaction_type: Optional[TransactionType] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> List[Transaction]:
        """
        List a user's transactions ordered by date DESC.

        Bounds are inclusive; created_at breaks ties between equal dates.
        """
        stmt = select(Transaction).where(Transaction.user_id == user_id)

        if transaction_type is not None:
            stmt = stmt.where(Transaction.transaction_type == transaction_type)
        if date_from is not None:
            stmt = stmt.where(Transaction.date >= date_from)
        if date_to is not None:
            stmt = stmt.where(Transaction.date <= date_to)

        stmt = stmt.order_by(Transaction.date.desc(), Transaction.created_at.desc())

        result = await self.session.exec(stmt)
        return list(result.all())
