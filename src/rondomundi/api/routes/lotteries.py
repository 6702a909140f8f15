"""Lottery routes: create, inspect, buy tickets, pick a winner.

Handlers are plain ``def`` functions; FastAPI runs them in its threadpool,
and the registry's lock serializes them.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from rondomundi.api.deps import get_registry
from rondomundi.api.schemas.common import ErrorResponse
from rondomundi.api.schemas.lotteries import (
    BuyTicketRequest,
    CreateLotteryRequest,
    LotteryResponse,
    PickWinnerRequest,
)
from rondomundi.services.errors import LotteryError
from rondomundi.services.registry import LotteryRegistry

router = APIRouter(tags=["lotteries"])

_ERRORS = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.post("/lottery", response_model=LotteryResponse)
def create_lottery(
    body: CreateLotteryRequest,
    registry: LotteryRegistry = Depends(get_registry),
) -> LotteryResponse:
    """Open a new lottery."""
    try:
        lottery = registry.create(body.admin, body.ticket_price, body.end_time)
    except LotteryError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return LotteryResponse.from_lottery(lottery)


@router.get("/lotteries", response_model=list[LotteryResponse])
def list_lotteries(
    registry: LotteryRegistry = Depends(get_registry),
) -> list[LotteryResponse]:
    return [LotteryResponse.from_lottery(lot) for lot in registry.list_lotteries()]


@router.get("/lottery/{lottery_id}", response_model=LotteryResponse, responses=_ERRORS)
def get_lottery(
    lottery_id: str,
    registry: LotteryRegistry = Depends(get_registry),
) -> LotteryResponse:
    try:
        lottery = registry.get(lottery_id)
    except LotteryError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return LotteryResponse.from_lottery(lottery)


@router.post("/lottery/{lottery_id}/buy", response_model=LotteryResponse, responses=_ERRORS)
def buy_tickets(
    lottery_id: str,
    body: BuyTicketRequest,
    registry: LotteryRegistry = Depends(get_registry),
) -> LotteryResponse:
    """Buy tickets for a wallet; repeated purchases accumulate."""
    try:
        lottery = registry.buy_tickets(lottery_id, body.wallet_address, body.tickets)
    except LotteryError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return LotteryResponse.from_lottery(lottery)


@router.post(
    "/lottery/{lottery_id}/pick_winner", response_model=LotteryResponse, responses=_ERRORS
)
def pick_winner(
    lottery_id: str,
    body: PickWinnerRequest,
    registry: LotteryRegistry = Depends(get_registry),
) -> LotteryResponse:
    """Draw the winner (lottery admin only). Closes the lottery."""
    try:
        lottery = registry.draw_winner(lottery_id, body.admin)
    except LotteryError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return LotteryResponse.from_lottery(lottery)
