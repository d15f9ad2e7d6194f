"""
Finance Tracker Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import TransactionType, UserPeriod

# Export all entities
from .user import User
from .transaction import Transaction

__all__ = [
    # Enums
    "TransactionType",
    "UserPeriod",
    # Entities
    "User",
    "Transaction",
]
