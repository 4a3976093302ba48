"""Settlement routes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from split_it.api.dependencies import get_ledger_service, get_settlement_service
from split_it.api.schemas.settlement import SettlementResponse
from split_it.reporting.settlement_report import render_settlement_report
from split_it.services.ledger_service import LedgerService
from split_it.services.settlement_service import SettlementService

router = APIRouter(prefix="/settlement", tags=["Settlement"])


@router.get("", response_model=SettlementResponse)
def get_settlement(
    ledger_service: Annotated[LedgerService, Depends(get_ledger_service)],
    settlement_service: Annotated[SettlementService, Depends(get_settlement_service)],
) -> SettlementResponse:
    """Compute balances and the payment plan for the stored ledger."""

    projection = settlement_service.compute(ledger_service.get_state())
    return SettlementResponse.from_projection(projection)


@router.get("/report", response_class=PlainTextResponse)
def get_settlement_report(
    ledger_service: Annotated[LedgerService, Depends(get_ledger_service)],
    settlement_service: Annotated[SettlementService, Depends(get_settlement_service)],
) -> str:
    """Render the expense report as plain text."""

    state = ledger_service.get_state()
    projection = settlement_service.compute(state)
    return render_settlement_report(
        state, projection, generated_at=datetime.now(tz=UTC)
    )
