"""Even-split balance calculation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from split_it.domain.errors import InvalidInputError, compose_error_message
from split_it.domain.value_objects import Expense


def calculate_balances(
    participants: Sequence[str],
    expenses: Iterable[Expense],
) -> dict[str, Decimal]:
    """Return each participant's paid total minus their even share.

    Positive balances are owed money, negative balances owe money. The
    mapping keeps the order of ``participants``.
    """

    if not participants:
        raise InvalidInputError()

    paid: dict[str, Decimal] = {name: Decimal("0") for name in participants}
    total = Decimal("0")
    for expense in expenses:
        if expense.payer not in paid:
            raise InvalidInputError(
                message=compose_error_message(
                    cause="An expense references a payer outside the participants.",
                    action="Restore the participant or delete the expense.",
                ),
                details={"expense_id": expense.id, "payer": expense.payer},
            )
        paid[expense.payer] += expense.amount
        total += expense.amount

    share = total / Decimal(len(participants))
    return {name: paid_total - share for name, paid_total in paid.items()}
