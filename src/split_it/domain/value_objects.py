"""Domain value objects for expenses, transactions and ledger state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Expense:
    """One paid expense, split evenly across all participants."""

    id: int
    payer: str
    description: str
    amount: Decimal
    created_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError("Expense amount must be a Decimal")


@dataclass(frozen=True, slots=True)
class Transaction:
    """Proposed payment from a debtor to a creditor."""

    from_participant: str
    to_participant: str
    amount: Decimal


@dataclass(frozen=True, slots=True)
class LedgerState:
    """Participants and expenses owned by one ledger.

    Expenses are kept newest first.
    """

    participants: tuple[str, ...] = ()
    expenses: tuple[Expense, ...] = ()

    @classmethod
    def empty(cls) -> LedgerState:
        """Return a ledger without participants or expenses."""
        return cls()

    def has_participant(self, name: str) -> bool:
        return name in self.participants

    def expenses_paid_by(self, name: str) -> list[Expense]:
        return [expense for expense in self.expenses if expense.payer == name]

    def find_expense(self, expense_id: int) -> Expense | None:
        return next(
            (expense for expense in self.expenses if expense.id == expense_id),
            None,
        )

    def total_spent(self) -> Decimal:
        return sum((expense.amount for expense in self.expenses), Decimal("0"))
