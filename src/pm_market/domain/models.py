"""Domain models for pm_market: pure dataclasses, no business logic."""

from dataclasses import dataclass

from src.pm_common.enums import Phase, Side


@dataclass
class Market:
    id: int
    title: str
    description: str
    yes_liquidity: int
    no_liquidity: int
    start_time: int                 # tick at which trading opens
    end_time: int | None            # tick at which trading closes; None = until resolved
    created_time: int
    status: Phase = Phase.PENDING
    resolved: bool = False
    outcome: bool | None = None     # True = YES won; set once by resolve
    total_volume: int = 0
    total_fees_collected: int = 0
    total_payouts: int = 0
    bet_count: int = 0

    def liquidity(self, side: Side) -> int:
        return self.yes_liquidity if side is Side.YES else self.no_liquidity


@dataclass
class Position:
    market_id: int
    yes_shares: int = 0
    no_shares: int = 0
    claimed: bool = False

    def shares(self, side: Side) -> int:
        return self.yes_shares if side is Side.YES else self.no_shares
