"""Participants routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from split_it.api.dependencies import get_ledger_service
from split_it.api.schemas.participants import (
    CreateParticipantRequest,
    ParticipantsListResponse,
)
from split_it.services.ledger_service import LedgerService

router = APIRouter(prefix="/participants", tags=["Participants"])


@router.get("", response_model=ParticipantsListResponse)
def list_participants(
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> ParticipantsListResponse:
    """List participants in registration order."""

    return ParticipantsListResponse.from_state(service.get_state())


@router.post(
    "",
    response_model=ParticipantsListResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Blank participant name"},
        409: {"description": "Duplicated participant name"},
    },
)
def create_participant(
    payload: CreateParticipantRequest,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> ParticipantsListResponse:
    """Register a participant and return the updated list."""

    state = service.add_participant(payload.name)
    return ParticipantsListResponse.from_state(state)


@router.delete(
    "/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={409: {"description": "Participant has recorded expenses"}},
)
def delete_participant(
    name: str,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> Response:
    """Remove a participant who has not paid for any expense."""

    service.remove_participant(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
