"""API request and response schemas."""

from split_it.api.schemas.expenses import (
    CreateExpenseRequest,
    ExpenseListResponse,
    ExpenseResponse,
)
from split_it.api.schemas.participants import (
    CreateParticipantRequest,
    ParticipantsListResponse,
)
from split_it.api.schemas.settlement import SettlementResponse

__all__ = [
    "CreateExpenseRequest",
    "CreateParticipantRequest",
    "ExpenseListResponse",
    "ExpenseResponse",
    "ParticipantsListResponse",
    "SettlementResponse",
]
