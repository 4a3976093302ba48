"""Expenses routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from split_it.api.dependencies import get_ledger_service
from split_it.api.schemas.expenses import (
    CreateExpenseRequest,
    ExpenseListResponse,
    ExpenseResponse,
)
from split_it.services.ledger_service import CreateExpenseInput, LedgerService

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> ExpenseListResponse:
    """List recorded expenses, newest first."""

    return ExpenseListResponse.from_state(service.get_state())


@router.post(
    "",
    response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing payer or invalid amount"},
        404: {"description": "Payer is not a registered participant"},
    },
)
def create_expense(
    payload: CreateExpenseRequest,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> ExpenseResponse:
    """Register an expense paid by one participant."""

    expense = service.add_expense(
        CreateExpenseInput(
            payer=payload.payer,
            amount="" if payload.amount is None else payload.amount,
            description=payload.description,
        )
    )
    return ExpenseResponse.from_expense(expense)


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Expense not found"}},
)
def delete_expense(
    expense_id: int,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> Response:
    """Delete one expense by id."""

    service.delete_expense(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
