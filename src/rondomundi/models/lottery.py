"""Lottery and Participant entities.

The registry owns every instance; anything handed to a caller is produced
by :meth:`Lottery.snapshot` and shares no mutable state with the store.
"""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class Participant:
    """A wallet and the tickets it has bought in one lottery."""

    wallet_address: str
    tickets_bought: int


@dataclass
class Lottery:
    id: str
    admin: str
    ticket_price: int
    created_at: str
    participants: list[Participant] = field(default_factory=list)
    is_active: bool = True
    prize_pool: int = 0
    winner: str | None = None
    end_time: str | None = None

    @property
    def total_tickets(self) -> int:
        return sum(p.tickets_bought for p in self.participants)

    def expected_prize_pool(self) -> int:
        """Pool implied by the participant list; always equals ``prize_pool``."""
        return self.ticket_price * self.total_tickets

    def find_participant(self, wallet_address: str) -> Participant | None:
        for participant in self.participants:
            if participant.wallet_address == wallet_address:
                return participant
        return None

    def snapshot(self) -> Lottery:
        """Return a deep copy safe to hand outside the registry."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
