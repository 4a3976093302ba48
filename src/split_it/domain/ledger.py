"""Pure state transitions for the participant set and expense list.

Every function returns a new ``LedgerState``; a rejected mutation raises and
leaves the given state untouched.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime
from decimal import Decimal

from split_it.domain.errors import (
    DuplicateNameError,
    ExpenseNotFoundError,
    HasDependentExpensesError,
    InvalidAmountError,
    InvalidInputError,
    NoPayerSelectedError,
    UnknownParticipantError,
    compose_error_message,
)
from split_it.domain.money import MAX_AMOUNT, parse_money
from split_it.domain.value_objects import Expense, LedgerState

DEFAULT_EXPENSE_DESCRIPTION = "Varios"


def add_participant(state: LedgerState, name: str) -> LedgerState:
    normalized_name = name.strip()
    if not normalized_name:
        raise InvalidInputError(
            message=compose_error_message(
                cause="Participant name cannot be blank.",
                action="Type a name and try again.",
            )
        )
    if state.has_participant(normalized_name):
        raise DuplicateNameError(details={"name": normalized_name})
    return replace(state, participants=(*state.participants, normalized_name))


def remove_participant(state: LedgerState, name: str) -> LedgerState:
    paid_expenses = state.expenses_paid_by(name)
    if paid_expenses:
        raise HasDependentExpensesError(
            details={"name": name, "expense_count": len(paid_expenses)}
        )
    return replace(
        state,
        participants=tuple(
            participant for participant in state.participants if participant != name
        ),
    )


def next_expense_id(state: LedgerState, now: datetime) -> int:
    """Return a creation-time id strictly greater than every stored id."""

    candidate = int(now.timestamp() * 1000)
    highest = max((expense.id for expense in state.expenses), default=0)
    return max(candidate, highest + 1)


def add_expense(
    state: LedgerState,
    *,
    payer: str | None,
    amount: Decimal | str | int | float,
    description: str | None = None,
    now: datetime | None = None,
    default_description: str = DEFAULT_EXPENSE_DESCRIPTION,
) -> tuple[LedgerState, Expense]:
    """Validate and prepend a new expense, returning it with the new state."""

    payer_name = (payer or "").strip()
    if not payer_name:
        raise NoPayerSelectedError()

    parsed_amount = parse_money(amount)
    if (
        parsed_amount is None
        or parsed_amount <= Decimal("0")
        or parsed_amount > MAX_AMOUNT
    ):
        raise InvalidAmountError(details={"amount": str(amount)})

    if not state.has_participant(payer_name):
        raise UnknownParticipantError(details={"payer": payer_name})

    created_at = now or datetime.now(tz=UTC)
    expense = Expense(
        id=next_expense_id(state, created_at),
        payer=payer_name,
        description=(description or "").strip() or default_description,
        amount=parsed_amount,
        created_at=created_at,
    )
    return replace(state, expenses=(expense, *state.expenses)), expense


def delete_expense(state: LedgerState, expense_id: int) -> LedgerState:
    if state.find_expense(expense_id) is None:
        raise ExpenseNotFoundError(details={"expense_id": expense_id})
    return replace(
        state,
        expenses=tuple(
            expense for expense in state.expenses if expense.id != expense_id
        ),
    )
