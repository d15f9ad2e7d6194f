"""
User Entity

Credential record: identity, profile name and bcrypt password hash.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class User(SQLModel, table=True):
    """
    User entity - the credential record behind login and password reset.

    Business Rules:
    - Email must be unique across all users (case-sensitive as stored)
    - Password stored as bcrypt hash, never returned to API callers
    - Email and password are not editable through profile updates
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_created_at", "created_at"),)
