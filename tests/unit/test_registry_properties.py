"""Hypothesis property-based tests for registry accounting."""

from __future__ import annotations

from collections import Counter

from hypothesis import given, settings
from hypothesis import strategies as st

from rondomundi.core.constants import MAX_TICKETS_PER_PURCHASE
from rondomundi.services.registry import InMemoryLotteryRegistry

purchases = st.lists(
    st.tuples(
        st.sampled_from(["w1", "w2", "w3", "w4", "w5"]),
        st.integers(min_value=1, max_value=MAX_TICKETS_PER_PURCHASE),
    ),
    max_size=40,
)
prices = st.integers(min_value=0, max_value=10**12)


@given(price=prices, buys=purchases)
@settings(max_examples=200)
def test_prize_pool_matches_tickets(price: int, buys: list[tuple[str, int]]):
    """prize_pool == ticket_price * total tickets after any purchase sequence."""
    reg = InMemoryLotteryRegistry()
    lot = reg.create("alice", price)
    for wallet, count in buys:
        result = reg.buy_tickets(lot.id, wallet, count)
        assert result.prize_pool == result.expected_prize_pool()
    assert reg.get(lot.id).prize_pool == price * sum(c for _, c in buys)


@given(buys=purchases)
@settings(max_examples=200)
def test_one_entry_per_wallet_in_first_seen_order(buys: list[tuple[str, int]]):
    reg = InMemoryLotteryRegistry()
    lot = reg.create("alice", 1)
    for wallet, count in buys:
        reg.buy_tickets(lot.id, wallet, count)

    participants = reg.get(lot.id).participants
    wallets = [p.wallet_address for p in participants]
    assert wallets == list(dict.fromkeys(w for w, _ in buys))


@given(buys=purchases)
@settings(max_examples=200)
def test_purchases_accumulate_additively(buys: list[tuple[str, int]]):
    reg = InMemoryLotteryRegistry()
    lot = reg.create("alice", 1)
    expected: Counter[str] = Counter()
    for wallet, count in buys:
        reg.buy_tickets(lot.id, wallet, count)
        expected[wallet] += count

    held = {p.wallet_address: p.tickets_bought for p in reg.get(lot.id).participants}
    assert held == dict(expected)


@given(buys=purchases.filter(bool))
@settings(max_examples=100)
def test_winner_always_holds_a_ticket(buys: list[tuple[str, int]]):
    reg = InMemoryLotteryRegistry()
    lot = reg.create("alice", 1)
    for wallet, count in buys:
        reg.buy_tickets(lot.id, wallet, count)

    result = reg.draw_winner(lot.id, "alice")
    assert result.is_active is False
    assert result.winner in {w for w, _ in buys}
