"""
Transaction Use Cases

Recording and querying income/expense entries.
"""

from .add_transaction_use_case import AddTransactionUseCase
from .update_transaction_use_case import UpdateTransactionUseCase
from .delete_transaction_use_case import DeleteTransactionUseCase
from .get_transaction_use_case import GetTransactionUseCase
from .list_transactions_use_case import ListTransactionsUseCase
from .dtos import (
    AddTransactionCommand,
    UpdateTransactionCommand,
    ListTransactionsQuery,
    TransactionInfo,
    TransactionResponse,
    TransactionListResponse,
)

__all__ = [
    # Use Cases
    "AddTransactionUseCase",
    "UpdateTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetTransactionUseCase",
    "ListTransactionsUseCase",
    # DTOs - Commands
    "AddTransactionCommand",
    "UpdateTransactionCommand",
    "ListTransactionsQuery",
    # DTOs - Responses
    "TransactionInfo",
    "TransactionResponse",
    "TransactionListResponse",
]
