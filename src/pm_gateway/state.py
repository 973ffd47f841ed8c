"""GlobalState: every aggregate the dispatcher mutates, in one place.

Nothing here is module-level: each dispatcher owns its own state, so replicas
and tests never share hidden mutable data.
"""

from dataclasses import dataclass, field

from config.settings import Settings
from src.pm_account.domain.models import PlayerId
from src.pm_account.domain.registry import PlayerRegistry
from src.pm_clearing.domain.settlement import SettlementQueue
from src.pm_common.errors import MarketNotFoundError, ProjectNotFoundError
from src.pm_ido.domain.ledger import InvestmentBook
from src.pm_ido.domain.models import Project
from src.pm_market.domain.models import Market


@dataclass
class GlobalState:
    counter: int = 0                 # tick number, the only clock the core sees
    txcounter: int = 0               # accepted non-tick commands
    players: PlayerRegistry = field(default_factory=PlayerRegistry)
    markets: dict[int, Market] = field(default_factory=dict)
    projects: dict[int, Project] = field(default_factory=dict)
    investments: dict[int, InvestmentBook] = field(default_factory=dict)
    settlements: SettlementQueue = field(default_factory=SettlementQueue)

    def require_market(self, market_id: int) -> Market:
        market = self.markets.get(market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        return market

    def require_project(self, project_id: int) -> Project:
        project = self.projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def book(self, project_id: int) -> InvestmentBook:
        return self.investments.setdefault(project_id, {})

    def next_market_id(self) -> int:
        return max(self.markets, default=0) + 1

    def next_project_id(self) -> int:
        return max(self.projects, default=0) + 1


@dataclass(frozen=True)
class GenesisConfig:
    admin_pid: PlayerId
    market_title: str
    market_description: str
    yes_liquidity: int
    no_liquidity: int
    market_duration: int | None

    @classmethod
    def from_settings(cls, s: Settings) -> "GenesisConfig":
        return cls(
            admin_pid=(s.ADMIN_PID[0], s.ADMIN_PID[1]),
            market_title=s.GENESIS_MARKET_TITLE,
            market_description=s.GENESIS_MARKET_DESCRIPTION,
            yes_liquidity=s.GENESIS_YES_LIQUIDITY,
            no_liquidity=s.GENESIS_NO_LIQUIDITY,
            market_duration=s.GENESIS_MARKET_DURATION,
        )
