"""Domain models for pm_account: pure dataclasses, no persistence dependency."""

from dataclasses import dataclass, field

from src.pm_market.domain.models import Position

PlayerId = tuple[int, int]


@dataclass
class Player:
    pid: PlayerId
    balance: int = 0                                             # currency units
    positions: dict[int, Position] = field(default_factory=dict)    # market_id -> Position
    token_balances: dict[int, int] = field(default_factory=dict)    # project_id -> IDO tokens

    def position(self, market_id: int) -> Position:
        """Return the player's position in a market, empty if never traded."""
        existing = self.positions.get(market_id)
        if existing is not None:
            return existing
        return Position(market_id=market_id)

    def token_balance(self, project_id: int) -> int:
        return self.token_balances.get(project_id, 0)


@dataclass(frozen=True)
class WithdrawInfo:
    """One L1 withdrawal queued for settlement."""

    pid: PlayerId
    amount: int
    address_high: int
    address_low: int
    tick: int
