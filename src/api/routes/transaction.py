from typing import Optional

from fastapi import APIRouter, Depends, status

from src.api.error import to_http_error
from src.app.services.token_service import TokenClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.transactions import (
    AddTransactionCommand,
    AddTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionUseCase,
    ListTransactionsQuery,
    ListTransactionsUseCase,
    TransactionListResponse,
    TransactionResponse,
    UpdateTransactionCommand,
    UpdateTransactionUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("/create", status_code=status.HTTP_201_CREATED, response_model=TransactionResponse)
async def add_transaction(
    request: AddTransactionCommand,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Transaction

    Raises:
        - 400 Bad Request: Missing required fields
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: userId is not the caller
        - 404 Not Found: User not found
    """
    result = await AddTransactionUseCase(uow).execute(request, current_user.subject_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.put(
    "/update/{transactionId}", status_code=status.HTTP_200_OK, response_model=TransactionResponse
)
async def update_transaction(
    transactionId: str,
    request: UpdateTransactionCommand,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Transaction

    Only the fields present in the body are changed.

    Raises:
        - 400 Bad Request: No fields provided
        - 403 Forbidden: Transaction owned by another user
        - 404 Not Found: Transaction or new user not found
    """
    result = await UpdateTransactionUseCase(uow).execute(
        transactionId, request, current_user.subject_id
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete(
    "/delete/{transactionId}", status_code=status.HTTP_200_OK, response_model=TransactionResponse
)
async def delete_transaction(
    transactionId: str,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTransactionUseCase(uow).execute(transactionId, current_user.subject_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/get/{transactionId}", status_code=status.HTTP_200_OK, response_model=TransactionResponse
)
async def get_transaction(
    transactionId: str,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTransactionUseCase(uow).execute(transactionId, current_user.subject_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post("/getAll", status_code=status.HTTP_200_OK, response_model=TransactionListResponse)
async def list_transactions(
    request: Optional[ListTransactionsQuery] = None,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Transactions

    Body filters: userId, type (all/expense/income), frequency (days or "custom"),
    startDate/endDate. Response splits results into expenses and income.

    Raises:
        - 400 Bad Request: Invalid type, frequency or date range
        - 403 Forbidden: userId is not the caller
        - 404 Not Found: User not found
    """
    query = request or ListTransactionsQuery()
    result = await ListTransactionsUseCase(uow).execute(query, current_user.subject_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
