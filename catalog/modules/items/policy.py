"""
Catalog policies: reserved tokens and simulated fault injection.

The constants drive the policy checks in ``CatalogStore``; fault policies
decide whether a call fails with a simulated transient error.
"""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Protocol

# get_by_id() always fails for this id
POISON_ITEM_ID = 666

# Names containing any of these cannot be saved
FORBIDDEN_NAME_TOKENS: tuple[str, ...] = ("ganondorf",)

# Items whose name contains any of these cannot be deleted
PROTECTED_NAME_TOKENS: tuple[str, ...] = ("master sword", "triforce")

# find_by_category() for this category always fails
FORBIDDEN_CATEGORY = "cursed"

# find_by_price_range() with a larger upper bound "times out"
PRICE_RANGE_CEILING = Decimal("10000")

# Name searches containing any of these always fail
RESTRICTED_KEYWORDS: tuple[str, ...] = ("triforce",)

DEFAULT_FAILURE_RATE = 0.3


def contains_any(text: str | None, tokens: tuple[str, ...]) -> bool:
    """Case-insensitive substring test against a token set."""
    if not text:
        return False
    lowered = text.lower()
    return any(token in lowered for token in tokens)


class FaultPolicy(Protocol):
    """Decides whether a store call should fail with a transient error."""

    def should_fail(self) -> bool: ...


class RandomFaultPolicy:
    """Fails independently on each call with a fixed probability."""

    def __init__(self, probability: float = DEFAULT_FAILURE_RATE, rng: random.Random | None = None) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Failure probability must be within [0, 1], got {probability}")
        self.probability = probability
        self._rng = rng or random.Random()

    def should_fail(self) -> bool:
        return self._rng.random() < self.probability

    def __repr__(self) -> str:
        return f"RandomFaultPolicy(probability={self.probability})"


class NeverFail:
    """Fault policy for deterministic runs."""

    def should_fail(self) -> bool:
        return False


class AlwaysFail:
    """Fault policy that fails every call."""

    def should_fail(self) -> bool:
        return True
