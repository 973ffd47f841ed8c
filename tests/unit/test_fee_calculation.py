import pytest

from src.pm_clearing.domain.fee import FeeCalculator, FeeConfig
from src.pm_common.errors import InvalidAmountError


class TestFeeConfig:
    def test_defaults_are_one_percent(self) -> None:
        cfg = FeeConfig()
        assert cfg.rate == 100
        assert cfg.basis_points == 10_000

    def test_zero_basis_points_rejected(self) -> None:
        with pytest.raises(ValueError):
            FeeConfig(rate=0, basis_points=0)

    def test_rate_above_basis_points_rejected(self) -> None:
        with pytest.raises(ValueError):
            FeeConfig(rate=10_001, basis_points=10_000)

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(ValueError):
            FeeConfig(rate=-1)


class TestFee:
    def test_scenario_amount_1000(self) -> None:
        # (1000 * 100 + 9999) // 10000 = 10
        assert FeeCalculator().fee(1000) == 10

    def test_ceiling_on_smallest_amount(self) -> None:
        # (1 * 100 + 9999) // 10000 = 1; never under-collects
        assert FeeCalculator().fee(1) == 1

    def test_exact_multiple_has_no_round_up(self) -> None:
        assert FeeCalculator().fee(100) == 1
        assert FeeCalculator().fee(10_000) == 100

    def test_one_past_multiple_rounds_up(self) -> None:
        assert FeeCalculator().fee(101) == 2

    def test_zero_amount(self) -> None:
        assert FeeCalculator().fee(0) == 0

    def test_zero_rate(self) -> None:
        assert FeeCalculator(FeeConfig(rate=0)).fee(123_456) == 0

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(InvalidAmountError):
            FeeCalculator().fee(-1)

    def test_custom_rate_is_injected_not_global(self) -> None:
        low = FeeCalculator(FeeConfig(rate=30))
        default = FeeCalculator()
        assert low.fee(10_000) == 30
        assert default.fee(10_000) == 100

    def test_fee_never_below_exact_share(self) -> None:
        calc = FeeCalculator()
        for amount in range(0, 5_000, 7):
            assert calc.fee(amount) * 10_000 >= amount * 100


class TestNetOfFee:
    def test_split(self) -> None:
        assert FeeCalculator().net_of_fee(1000) == (990, 10)

    def test_parts_sum_to_amount(self) -> None:
        calc = FeeCalculator(FeeConfig(rate=250))
        for amount in (1, 99, 1000, 123_457):
            net, fee = calc.net_of_fee(amount)
            assert net + fee == amount
