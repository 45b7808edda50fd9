"""Unit tests for fault policies, policy helpers and the demo catalog."""

import random
from decimal import Decimal

import pytest

from catalog.modules.items import AlwaysFail, NeverFail, RandomFaultPolicy, default_catalog
from catalog.modules.items.policy import PROTECTED_NAME_TOKENS, contains_any


class TestRandomFaultPolicy:
    """Tests for RandomFaultPolicy."""

    def test_zero_probability_never_fails(self):
        policy = RandomFaultPolicy(0.0)
        assert not any(policy.should_fail() for _ in range(1000))

    def test_full_probability_always_fails(self):
        policy = RandomFaultPolicy(1.0)
        assert all(policy.should_fail() for _ in range(1000))

    def test_rate_is_roughly_respected(self):
        """Test that a seeded 30 % policy fails about 30 % of the time."""
        policy = RandomFaultPolicy(0.3, rng=random.Random(1234))
        failures = sum(policy.should_fail() for _ in range(10_000))
        assert 2_700 < failures < 3_300

    def test_seeded_policies_are_reproducible(self):
        first = RandomFaultPolicy(0.5, rng=random.Random(7))
        second = RandomFaultPolicy(0.5, rng=random.Random(7))
        assert [first.should_fail() for _ in range(50)] == [second.should_fail() for _ in range(50)]

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_out_of_range_probability_is_rejected(self, probability):
        with pytest.raises(ValueError):
            RandomFaultPolicy(probability)

    def test_deterministic_policies(self):
        assert NeverFail().should_fail() is False
        assert AlwaysFail().should_fail() is True


class TestContainsAny:
    """Tests for the case-insensitive token matcher."""

    @pytest.mark.parametrize("name", ["Master Sword", "MASTER SWORD replica", "triforce shard"])
    def test_matches_protected_names(self, name):
        assert contains_any(name, PROTECTED_NAME_TOKENS)

    @pytest.mark.parametrize("name", ["Master", "Sword", "", None])
    def test_ignores_other_names(self, name):
        assert not contains_any(name, PROTECTED_NAME_TOKENS)


class TestDefaultCatalog:
    """Tests for the demo catalog."""

    def test_has_seven_unsaved_items(self):
        items = default_catalog()
        assert len(items) == 7
        assert all(item.id is None for item in items)

    def test_returns_fresh_copies(self):
        first = default_catalog()
        first[0].stock = 0
        assert default_catalog()[0].stock == 1

    def test_prices(self):
        prices = sorted(item.price for item in default_catalog())
        assert prices == [
            Decimal("10.00"),
            Decimal("25.00"),
            Decimal("35.00"),
            Decimal("400.00"),
            Decimal("650.00"),
            Decimal("750.00"),
            Decimal("999.99"),
        ]
