"""Pydantic schemas for participants endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from split_it.domain.value_objects import LedgerState


class CreateParticipantRequest(BaseModel):
    """Payload for registering a participant."""

    name: str = Field(max_length=120)


class ParticipantResponse(BaseModel):
    """Public participant representation."""

    name: str
    paid_expense_count: int = Field(ge=0)
    can_be_removed: bool


class ParticipantsListResponse(BaseModel):
    """Participants list payload."""

    participants: list[ParticipantResponse]

    @classmethod
    def from_state(cls, state: LedgerState) -> ParticipantsListResponse:
        participants = []
        for name in state.participants:
            paid_expense_count = len(state.expenses_paid_by(name))
            participants.append(
                ParticipantResponse(
                    name=name,
                    paid_expense_count=paid_expense_count,
                    can_be_removed=paid_expense_count == 0,
                )
            )
        return cls(participants=participants)
