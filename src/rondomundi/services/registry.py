"""Lottery registry: the single owner of all lottery state.

Every operation takes one registry-wide lock for its whole read-then-write
sequence, so operations are atomic with respect to each other, including
operations on different lotteries. Nothing performs I/O while the lock is
held; log lines are emitted after release.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from rondomundi.core.constants import (
    MAX_TICKETS_PER_PURCHASE,
    MIN_TICKETS_PER_PURCHASE,
    U32_MAX,
    U64_MAX,
)
from rondomundi.core.ids import Clock, IdFactory, new_lottery_id, utc_now_iso
from rondomundi.models.lottery import Lottery, Participant
from rondomundi.services.errors import (
    ArithmeticOverflowError,
    ForbiddenError,
    InactiveLotteryError,
    LotteryError,
    NotFoundError,
    ValidationError,
)
from rondomundi.services.selector import RandInt, secure_randint, select_winner

logger = logging.getLogger(__name__)


class LotteryRegistry(ABC):
    """Contract for lottery storage backends.

    Implementations return snapshots; callers never receive a reference
    to stored state.
    """

    @abstractmethod
    def create(self, admin: str, ticket_price: int, end_time: str | None = None) -> Lottery:
        """Open a new, empty, active lottery."""

    @abstractmethod
    def get(self, lottery_id: str) -> Lottery:
        """Return the lottery or raise :class:`NotFoundError`."""

    @abstractmethod
    def list_lotteries(self) -> list[Lottery]:
        """Return every lottery. Order is not part of the contract."""

    @abstractmethod
    def buy_tickets(self, lottery_id: str, wallet_address: str, ticket_count: int) -> Lottery:
        """Add *ticket_count* tickets for *wallet_address*."""

    @abstractmethod
    def draw_winner(self, lottery_id: str, requesting_admin: str) -> Lottery:
        """Select a winner and close the lottery."""


class InMemoryLotteryRegistry(LotteryRegistry):
    """Process-local registry guarded by a single global lock."""

    def __init__(
        self,
        id_factory: IdFactory = new_lottery_id,
        clock: Clock = utc_now_iso,
        randint: RandInt = secure_randint,
        max_tickets_per_purchase: int = MAX_TICKETS_PER_PURCHASE,
    ) -> None:
        if not MIN_TICKETS_PER_PURCHASE <= max_tickets_per_purchase <= MAX_TICKETS_PER_PURCHASE:
            raise ValueError(
                f"max_tickets_per_purchase must be between {MIN_TICKETS_PER_PURCHASE} "
                f"and {MAX_TICKETS_PER_PURCHASE:,}, got {max_tickets_per_purchase}"
            )
        self._id_factory = id_factory
        self._clock = clock
        self._randint = randint
        self.max_tickets_per_purchase = max_tickets_per_purchase
        self._lotteries: dict[str, Lottery] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._lotteries)

    # ── Create / read ───────────────────────────────────────────────

    def create(self, admin: str, ticket_price: int, end_time: str | None = None) -> Lottery:
        # A zero price is accepted; see DESIGN.md.
        if not 0 <= ticket_price <= U64_MAX:
            raise ValidationError("Ticket price must be an unsigned 64-bit integer")

        lottery_id = self._id_factory()
        created_at = self._clock()

        with self._lock:
            if lottery_id in self._lotteries:
                raise RuntimeError(f"Duplicate lottery id generated: {lottery_id}")
            lottery = Lottery(
                id=lottery_id,
                admin=admin,
                ticket_price=ticket_price,
                created_at=created_at,
                end_time=end_time,
            )
            self._lotteries[lottery_id] = lottery
            result = lottery.snapshot()

        logger.info(
            "Lottery %s created by %s (ticket_price=%d)", lottery_id, admin, ticket_price
        )
        return result

    def get(self, lottery_id: str) -> Lottery:
        with self._lock:
            return self._require(lottery_id).snapshot()

    def list_lotteries(self) -> list[Lottery]:
        with self._lock:
            return [lottery.snapshot() for lottery in self._lotteries.values()]

    # ── Mutations ───────────────────────────────────────────────────

    def buy_tickets(self, lottery_id: str, wallet_address: str, ticket_count: int) -> Lottery:
        """Record a purchase of *ticket_count* tickets by *wallet_address*.

        Input is validated before the lock is taken. The pool and the
        participant's count are checked against their unsigned bounds
        before either is written, so a rejected purchase changes nothing.

        Raises:
            ValidationError: count outside the allowed range or empty wallet.
            NotFoundError: unknown *lottery_id*.
            InactiveLotteryError: a winner has already been drawn.
            ArithmeticOverflowError: the pool or ticket count would overflow.
        """
        try:
            result = self._record_purchase(lottery_id, wallet_address, ticket_count)
        except LotteryError as e:
            _log_rejection("Purchase", lottery_id, e)
            raise

        logger.info(
            "Lottery %s: %s bought %d ticket(s), pool now %d",
            lottery_id,
            wallet_address,
            ticket_count,
            result.prize_pool,
        )
        return result

    def _record_purchase(
        self, lottery_id: str, wallet_address: str, ticket_count: int
    ) -> Lottery:
        if ticket_count < MIN_TICKETS_PER_PURCHASE:
            raise ValidationError("Must buy at least 1 ticket")
        if ticket_count > self.max_tickets_per_purchase:
            raise ValidationError(
                f"Cannot buy more than {self.max_tickets_per_purchase:,} tickets at once"
            )
        if not wallet_address:
            raise ValidationError("Wallet address is required")

        with self._lock:
            lottery = self._require(lottery_id)
            if not lottery.is_active:
                raise InactiveLotteryError("Lottery is not active")

            new_pool = lottery.prize_pool + lottery.ticket_price * ticket_count
            if new_pool > U64_MAX:
                raise ArithmeticOverflowError("Prize pool would overflow")

            participant = lottery.find_participant(wallet_address)
            held = participant.tickets_bought if participant is not None else 0
            if held + ticket_count > U32_MAX:
                raise ArithmeticOverflowError("Participant ticket count would overflow")

            lottery.prize_pool = new_pool
            if participant is not None:
                participant.tickets_bought += ticket_count
            else:
                lottery.participants.append(
                    Participant(wallet_address=wallet_address, tickets_bought=ticket_count)
                )
            return lottery.snapshot()

    def draw_winner(self, lottery_id: str, requesting_admin: str) -> Lottery:
        """Draw the winner of *lottery_id* and close it for good.

        Checks run in order: existence, admin identity, active flag, then
        the participant checks performed by the selector. The winner and
        the inactive flag are written together only after selection
        succeeds.
        """
        try:
            result = self._record_draw(lottery_id, requesting_admin)
        except LotteryError as e:
            _log_rejection("Draw", lottery_id, e)
            raise

        logger.info(
            "Lottery %s drawn: winner %s out of %d ticket(s)",
            lottery_id,
            result.winner,
            result.total_tickets,
        )
        return result

    def _record_draw(self, lottery_id: str, requesting_admin: str) -> Lottery:
        with self._lock:
            lottery = self._require(lottery_id)
            if lottery.admin != requesting_admin:
                raise ForbiddenError("Only the lottery admin can pick a winner")
            if not lottery.is_active:
                raise InactiveLotteryError("Lottery is already ended")

            winner = select_winner(tuple(lottery.participants), randint=self._randint)

            lottery.winner = winner
            lottery.is_active = False
            return lottery.snapshot()

    # ── Internals ───────────────────────────────────────────────────

    def _require(self, lottery_id: str) -> Lottery:
        """Look up a lottery; caller must hold the lock."""
        lottery = self._lotteries.get(lottery_id)
        if lottery is None:
            raise NotFoundError(lottery_id)
        return lottery


def _log_rejection(operation: str, lottery_id: str, error: LotteryError) -> None:
    """Log a refused operation; called once the lock has been released."""
    if isinstance(error, (ForbiddenError, ArithmeticOverflowError)):
        level = logging.WARNING
    else:
        level = logging.DEBUG
    logger.log(
        level,
        "%s on lottery %s rejected (%s): %s",
        operation,
        lottery_id,
        type(error).__name__,
        error.detail,
    )
