"""Weighted winner selection backed by the OS CSPRNG.

Each participant wins with probability ``tickets_bought / total``. The
draw itself comes from :func:`secrets.randbelow`, which samples by
rejection over ``getrandbits`` and therefore carries no modulo bias for
any ``total``.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable, Sequence

from rondomundi.models.lottery import Participant
from rondomundi.services.errors import NoParticipantsError, NoTicketsSoldError

logger = logging.getLogger(__name__)

RandInt = Callable[[int], int]


def secure_randint(total: int) -> int:
    """Return a uniformly random integer in ``[1, total]``."""
    if total < 1:
        raise ValueError(f"total must be positive, got {total}")
    return secrets.randbelow(total) + 1


def select_winner(
    participants: Sequence[Participant],
    randint: RandInt = secure_randint,
) -> str:
    """Pick a winning wallet from *participants*, weighted by tickets held.

    Participants are walked in stored order keeping a running ticket
    count; the first whose cumulative count reaches the drawn number wins,
    so an earlier entrant takes any shared boundary.

    Args:
        participants: Snapshot of the lottery's participant list.
        randint: Source of the winning ticket number; must return a value
            in ``[1, total]``. Only tests should replace it.

    Raises:
        NoParticipantsError: *participants* is empty.
        NoTicketsSoldError: no participant holds a ticket.
    """
    if not participants:
        raise NoParticipantsError("No participants in lottery")

    total = sum(p.tickets_bought for p in participants)
    if total == 0:
        raise NoTicketsSoldError("No tickets sold")

    winning_ticket = randint(total)
    if not 1 <= winning_ticket <= total:
        raise ValueError(f"random source returned {winning_ticket}, outside [1, {total}]")

    cumulative = 0
    for participant in participants:
        cumulative += participant.tickets_bought
        if winning_ticket <= cumulative:
            logger.debug("Ticket %d of %d drawn", winning_ticket, total)
            return participant.wallet_address

    # Unreachable: the last cumulative value equals total.
    raise RuntimeError("Winning ticket out of range (unexpected).")
