"""
Transaction Use Case DTOs (Data Transfer Objects)

Commands and responses for the transaction domain.
"""

from datetime import date, datetime
from typing import List, Optional, Union

from pydantic import field_validator

from src.app.use_cases.base import CamelModel
from src.domain.entities import Transaction, TransactionType


class TransactionInfo(CamelModel):
    id: str
    user_id: str
    title: str
    amount: float
    description: str
    date: datetime
    category: str
    transaction_type: TransactionType
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionInfo":
        return cls(
            id=str(transaction.id),
            user_id=str(transaction.user_id),
            title=transaction.title,
            amount=transaction.amount,
            description=transaction.description,
            date=transaction.date,
            category=transaction.category,
            transaction_type=transaction.transaction_type,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )


class AddTransactionCommand(CamelModel):
    """All fields optional here; the use case reports missing ones as one error"""

    title: Optional[str] = None
    amount: Optional[float] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    category: Optional[str] = None
    transaction_type: Optional[TransactionType] = None
    user_id: Optional[str] = None


class UpdateTransactionCommand(CamelModel):
    """Only fields explicitly set by the caller are applied"""

    title: Optional[str] = None
    amount: Optional[float] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    category: Optional[str] = None
    transaction_type: Optional[TransactionType] = None
    user_id: Optional[str] = None


class ListTransactionsQuery(CamelModel):
    user_id: Optional[str] = None
    type: Optional[str] = None
    frequency: Optional[Union[int, float, str]] = None
    # Whole days; a full timestamp is reduced to its date
    start_date: Optional[Union[date, datetime]] = None
    end_date: Optional[Union[date, datetime]] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def _to_day(cls, value):
        if isinstance(value, datetime):
            return value.date()
        return value


class TransactionResponse(CamelModel):
    success: bool = True
    message: str
    transaction: TransactionInfo


class TransactionListResponse(CamelModel):
    success: bool = True
    transactions: List[TransactionInfo]
    expenses: List[TransactionInfo]
    income: List[TransactionInfo]
