"""Schemas for settlement response."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from split_it.domain.money import format_money

if TYPE_CHECKING:
    from split_it.services.settlement_service import SettlementProjection

MONEY_PATTERN = r"^-?[0-9]+\.[0-9]{2}$"


class ParticipantBalanceResponse(BaseModel):
    """Participant contribution and net balance."""

    participant: str
    paid_total: str = Field(pattern=MONEY_PATTERN)
    net_balance: str = Field(pattern=MONEY_PATTERN)


class TransactionResponse(BaseModel):
    """One payment of the settlement plan."""

    model_config = ConfigDict(populate_by_name=True)

    from_participant: str = Field(alias="from")
    to_participant: str = Field(alias="to")
    amount: str = Field(pattern=MONEY_PATTERN)


class SettlementResponse(BaseModel):
    """Balances and payment plan for the current ledger."""

    status: Literal["no_data", "balanced", "pending"]
    participant_count: int = Field(ge=0)
    expense_count: int = Field(ge=0)
    total_spent: str = Field(pattern=MONEY_PATTERN)
    average_share: str = Field(pattern=MONEY_PATTERN)
    balances: list[ParticipantBalanceResponse]
    transactions: list[TransactionResponse]

    @classmethod
    def from_projection(cls, projection: SettlementProjection) -> SettlementResponse:
        return cls(
            status=projection.status.value,
            participant_count=projection.participant_count,
            expense_count=projection.expense_count,
            total_spent=format_money(projection.total_spent),
            average_share=format_money(projection.average_share),
            balances=[
                ParticipantBalanceResponse(
                    participant=line.participant,
                    paid_total=format_money(line.paid_total),
                    net_balance=format_money(line.net_balance),
                )
                for line in projection.balances
            ],
            transactions=[
                TransactionResponse(
                    from_participant=transaction.from_participant,
                    to_participant=transaction.to_participant,
                    amount=format_money(transaction.amount),
                )
                for transaction in projection.transactions
            ],
        )
