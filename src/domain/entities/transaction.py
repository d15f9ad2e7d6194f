"""
Transaction Entity

A single income or expense entry owned by one user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import TransactionType


class Transaction(SQLModel, table=True):
    """
    Transaction entity - one money movement recorded by a user.

    Business Rules:
    - Belongs to exactly one user (user_id)
    - transaction_type is either expense or income
    - Listed newest first by transaction date
    """

    __tablename__ = "transactions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    title: str = Field(max_length=255)
    amount: float
    description: str
    date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    category: str = Field(max_length=100)
    transaction_type: TransactionType

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_transaction_user_date", "user_id", "date"),
        Index("idx_transaction_user_type", "user_id", "transaction_type"),
    )
