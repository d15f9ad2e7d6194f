"""
Finance Tracker Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a money movement"""

    expense = "expense"
    income = "income"


class UserPeriod(str, Enum):
    """Registration period buckets for user listings"""

    day = "day"
    week = "week"
    month = "month"
    year = "year"
