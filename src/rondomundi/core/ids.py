"""Identifier and timestamp sources used by the registry.

Both are plain callables so a registry can be handed deterministic
replacements in tests.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

IdFactory = Callable[[], str]
Clock = Callable[[], str]


def new_lottery_id() -> str:
    """Return a random UUID4 in canonical hyphenated form."""
    return str(uuid.uuid4())


def utc_now_iso() -> str:
    """Return the current UTC time as an RFC 3339 string."""
    return datetime.now(UTC).isoformat()
