"""Lottery error taxonomy.

Every failure a registry operation can report is a :class:`LotteryError`
carrying a human-readable ``detail`` and an HTTP status hint for the API
layer. None of them leave partial state behind.
"""

from __future__ import annotations


class LotteryError(Exception):
    """Lottery operation error with HTTP status hint."""

    status_code = 400

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(detail)


class ValidationError(LotteryError):
    """Malformed or out-of-range input."""


class NotFoundError(LotteryError):
    status_code = 404

    def __init__(self, lottery_id: str) -> None:
        self.lottery_id = lottery_id
        super().__init__("Lottery not found")


class ForbiddenError(LotteryError):
    """The caller is not the admin recorded on the lottery."""

    status_code = 403


class InactiveLotteryError(LotteryError):
    """The lottery has already concluded."""


class NoParticipantsError(LotteryError):
    pass


class NoTicketsSoldError(LotteryError):
    pass


class ArithmeticOverflowError(LotteryError):
    """A checked counter would leave its unsigned range."""
