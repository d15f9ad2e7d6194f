from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Transaction, TransactionType


class ITransactionRepository(ABC):
    """Transaction repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Get transaction by ID"""
        pass

    @abstractmethod
    async def create(self, transaction: Transaction) -> Transaction:
        """Create a new transaction"""
        pass

    @abstractmethod
    async def update(self, transaction: Transaction) -> Transaction:
        """Update existing transaction"""
        pass

    @abstractmethod
    async def delete(self, transaction: Transaction) -> None:
        """Delete a transaction"""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete all transactions of a user, returns the number deleted"""
        pass

    @abstractmethod
    async def list_by_user(
        self,
        user_id: UUID,
        transaction_type: Optional[TransactionType] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> List[Transaction]:
        """
        List a user's transactions ordered by date DESC.

        Optional filters are combined: type equality and an inclusive
        date range (either bound may be omitted).
        """
        pass
