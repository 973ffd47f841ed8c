"""Protocol fee: ceiling division so the platform never under-collects.

fee(amount) = ceil(amount * rate / basis_points)
            = (amount * rate + basis_points - 1) // basis_points

The rate is a deployment constant (100 bps by default). It is carried in a
FeeConfig value handed to FeeCalculator, never read from module state.
"""

from dataclasses import dataclass

from src.pm_common.errors import InvalidAmountError
from src.pm_common.units import ceil_div

DEFAULT_FEE_RATE_BPS = 100
DEFAULT_FEE_BASIS_POINTS = 10_000


@dataclass(frozen=True)
class FeeConfig:
    rate: int = DEFAULT_FEE_RATE_BPS
    basis_points: int = DEFAULT_FEE_BASIS_POINTS

    def __post_init__(self) -> None:
        if self.basis_points <= 0:
            raise ValueError(f"basis_points must be positive, got {self.basis_points}")
        if not (0 <= self.rate <= self.basis_points):
            raise ValueError(
                f"rate must be in [0, {self.basis_points}], got {self.rate}"
            )


class FeeCalculator:
    def __init__(self, config: FeeConfig | None = None) -> None:
        self.config = config or FeeConfig()

    def fee(self, amount: int) -> int:
        """Ceiling fee for a gross amount. amount == 0 -> 0."""
        if amount < 0:
            raise InvalidAmountError(amount, "must not be negative")
        if amount == 0 or self.config.rate == 0:
            return 0
        return ceil_div(amount * self.config.rate, self.config.basis_points)

    def net_of_fee(self, amount: int) -> tuple[int, int]:
        """Return (net, fee) for a gross amount."""
        fee = self.fee(amount)
        return amount - fee, fee
