"""Schemas for the persisted ledger snapshot."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from split_it.domain.money import MAX_AMOUNT, format_money, quantize_money
from split_it.domain.value_objects import Expense, LedgerState


class ExpenseRecord(BaseModel):
    """Stored expense entry.

    The creation timestamp lives under ``date`` in stored snapshots.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=0)
    payer: str = Field(min_length=1)
    description: str
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT)
    created_at: datetime = Field(alias="date")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("Amount must be a finite number.")
        quantized = quantize_money(value)
        if quantized <= Decimal("0"):
            raise ValueError("Amount must be greater than zero.")
        return quantized

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return format_money(value)

    @classmethod
    def from_expense(cls, expense: Expense) -> ExpenseRecord:
        return cls(
            id=expense.id,
            payer=expense.payer,
            description=expense.description,
            amount=expense.amount,
            created_at=expense.created_at,
        )

    def to_expense(self) -> Expense:
        return Expense(
            id=self.id,
            payer=self.payer,
            description=self.description,
            amount=self.amount,
            created_at=self.created_at,
        )


class LedgerSnapshot(BaseModel):
    """Whole-ledger record exchanged with the key-value store."""

    participants: list[str] = Field(default_factory=list)
    expenses: list[ExpenseRecord] = Field(default_factory=list)

    @field_validator("participants")
    @classmethod
    def validate_participants(cls, value: list[str]) -> list[str]:
        names = [name.strip() for name in value]
        if any(not name for name in names):
            raise ValueError("Participant names cannot be blank.")
        if len(set(names)) != len(names):
            raise ValueError("Participant names must be unique.")
        return names

    @model_validator(mode="after")
    def validate_references(self) -> LedgerSnapshot:
        registered = set(self.participants)
        unknown_payers = sorted(
            {record.payer for record in self.expenses} - registered
        )
        if unknown_payers:
            raise ValueError(
                "Expenses reference unknown payers: " + ", ".join(unknown_payers)
            )
        expense_ids = [record.id for record in self.expenses]
        if len(set(expense_ids)) != len(expense_ids):
            raise ValueError("Expense ids must be unique.")
        return self

    @classmethod
    def from_state(cls, state: LedgerState) -> LedgerSnapshot:
        return cls(
            participants=list(state.participants),
            expenses=[ExpenseRecord.from_expense(item) for item in state.expenses],
        )

    def to_state(self) -> LedgerState:
        return LedgerState(
            participants=tuple(self.participants),
            expenses=tuple(record.to_expense() for record in self.expenses),
        )

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready shape written to storage."""
        return self.model_dump(mode="json", by_alias=True)
