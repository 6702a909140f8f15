"""Domain constants for Rondo Mundi lotteries."""

from __future__ import annotations

# ── Purchase limits ─────────────────────────────────────────────────
MIN_TICKETS_PER_PURCHASE = 1
MAX_TICKETS_PER_PURCHASE = 10_000

# ── Integer bounds of the public data model ─────────────────────────
U32_MAX = 2**32 - 1  # tickets_bought per participant
U64_MAX = 2**64 - 1  # ticket_price and prize_pool

HEALTH_MESSAGE = "Rondo Mundi Backend is running!"
