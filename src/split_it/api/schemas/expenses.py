"""Schemas for expense endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from split_it.domain.money import format_money
from split_it.domain.value_objects import Expense, LedgerState


class CreateExpenseRequest(BaseModel):
    """Payload for registering an expense.

    Payer and amount are checked by the ledger so that callers receive the
    dedicated NO_PAYER_SELECTED and INVALID_AMOUNT codes.
    """

    payer: str | None = None
    amount: str | float | int | None = None
    description: str | None = Field(default=None, max_length=280)

    @field_validator("amount", mode="before")
    @classmethod
    def keep_booleans_as_text(cls, value: object) -> object:
        # booleans would otherwise coerce to 1 or 0
        if isinstance(value, bool):
            return str(value).lower()
        return value


class ExpenseResponse(BaseModel):
    """Serialized expense returned by API."""

    id: int
    payer: str
    description: str
    amount: str = Field(pattern=r"^[0-9]+\.[0-9]{2}$")
    created_at: datetime

    @classmethod
    def from_expense(cls, expense: Expense) -> ExpenseResponse:
        return cls(
            id=expense.id,
            payer=expense.payer,
            description=expense.description,
            amount=format_money(expense.amount),
            created_at=expense.created_at,
        )


class ExpenseListResponse(BaseModel):
    """Expense list payload, newest first."""

    expenses: list[ExpenseResponse]
    total: int = Field(ge=0)
    total_spent: str = Field(pattern=r"^[0-9]+\.[0-9]{2}$")

    @classmethod
    def from_state(cls, state: LedgerState) -> ExpenseListResponse:
        return cls(
            expenses=[ExpenseResponse.from_expense(item) for item in state.expenses],
            total=len(state.expenses),
            total_spent=format_money(state.total_spent()),
        )
