import random

import pytest

from src.pm_common.errors import InvalidAmountError
from src.pm_ido.domain.allocation import Allocation, allocate


class TestAllocate:
    def test_scenario_oversubscribed(self) -> None:
        result = allocate(10_000, 150_000, 100_000, 1_000_000)
        assert result.tokens == 66_666
        assert result.accepted_amount == 6_666
        assert result.refund == 3_334

    def test_undersubscribed_uses_target_as_denominator(self) -> None:
        result = allocate(10_000, 50_000, 100_000, 1_000_000)
        assert result == Allocation(tokens=100_000, refund=0, accepted_amount=10_000)

    def test_exactly_subscribed(self) -> None:
        result = allocate(100_000, 100_000, 100_000, 1_000_000)
        assert result.tokens == 1_000_000
        assert result.refund == 0

    def test_zero_investment(self) -> None:
        result = allocate(0, 150_000, 100_000, 1_000_000)
        assert result == Allocation(tokens=0, refund=0, accepted_amount=0)

    def test_referentially_transparent(self) -> None:
        assert allocate(12_345, 170_001, 100_000, 999_999) == allocate(
            12_345, 170_001, 100_000, 999_999
        )

    def test_zero_target_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            allocate(1, 1, 0, 1_000)

    def test_nothing_raised_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            allocate(0, 0, 100, 1_000)

    def test_investment_above_total_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            allocate(101, 100, 100, 1_000)


class TestBoundedness:
    @pytest.mark.parametrize("seed", [1, 7, 42, 2024])
    def test_sums_never_exceed_supply_or_raised(self, seed: int) -> None:
        rng = random.Random(seed)
        target = rng.randint(1_000, 1_000_000)
        supply = rng.randint(1, 10_000_000)
        investments = [rng.randint(1, target) for _ in range(rng.randint(1, 60))]
        total = sum(investments)

        allocations = [allocate(inv, total, target, supply) for inv in investments]
        tokens = sum(a.tokens for a in allocations)
        accepted = sum(a.accepted_amount for a in allocations)
        refunds = sum(a.refund for a in allocations)

        assert tokens <= supply
        assert accepted + refunds == total
        if total > target:
            assert accepted <= target
            assert target - accepted <= len(investments)
            assert supply - tokens <= len(investments)
        else:
            assert refunds == 0
