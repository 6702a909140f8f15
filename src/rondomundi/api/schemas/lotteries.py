"""Lottery request and response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from rondomundi.core.constants import U32_MAX, U64_MAX
from rondomundi.models.lottery import Lottery


class CreateLotteryRequest(BaseModel):
    """Schema for opening a lottery."""

    admin: str
    ticket_price: int = Field(ge=0, le=U64_MAX)
    end_time: str | None = None


class BuyTicketRequest(BaseModel):
    """Schema for a ticket purchase.

    Only the wire type is enforced here; the purchase limits are checked
    by the registry so they surface as a 400 with a readable detail.
    """

    wallet_address: str
    tickets: int = Field(ge=0, le=U32_MAX)


class PickWinnerRequest(BaseModel):
    admin: str


class ParticipantResponse(BaseModel):
    wallet_address: str
    tickets_bought: int


class LotteryResponse(BaseModel):
    """Full lottery snapshot as returned by every lottery endpoint."""

    id: str
    admin: str
    ticket_price: int
    participants: list[ParticipantResponse]
    is_active: bool
    prize_pool: int
    winner: str | None = None
    created_at: str
    end_time: str | None = None

    @classmethod
    def from_lottery(cls, lottery: Lottery) -> LotteryResponse:
        return cls.model_validate(lottery.to_dict())
