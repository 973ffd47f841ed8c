"""CommandDispatcher: applies one authenticated command to the global state.

Commands arrive already ordered and de-duplicated by the host (nonce and
signature checks live outside the core). For each command the dispatcher
checks authority, lets the lifecycle gate and the owning ledger validate, and
commits. A rejected command raises exactly one AppError and changes nothing.
"""

import dataclasses
import logging
from collections.abc import Callable
from typing import Any

from config.settings import Settings
from src.pm_account.domain.models import Player, PlayerId, WithdrawInfo
from src.pm_amm.domain.pricing import BuyResult, PricingEngine, SellResult
from src.pm_clearing.domain.fee import FeeCalculator, FeeConfig
from src.pm_common.errors import AppError, InvalidMarketParamsError, InvalidProjectParamsError
from src.pm_gateway.commands import (
    GENESIS_MARKET_ID,
    Bet,
    Claim,
    Command,
    CreateIdoProject,
    CreateMarket,
    Deposit,
    InstallPlayer,
    Invest,
    Resolve,
    Sell,
    Tick,
    UpdateIdoProject,
    Withdraw,
    WithdrawFees,
    WithdrawTokens,
)
from src.pm_gateway.state import GenesisConfig, GlobalState
from src.pm_ido.domain.ledger import InvestResult, ProjectLedger, TokenWithdrawal
from src.pm_ido.domain.models import Project, ProjectParams
from src.pm_market.domain.ledger import ClaimResult, MarketLedger
from src.pm_market.domain.models import Market
from src.pm_risk.rules.admin import check_admin
from src.pm_risk.rules.lifecycle import sync_market, sync_project

logger = logging.getLogger(__name__)


class CommandDispatcher:
    def __init__(
        self,
        state: GlobalState,
        admin_pid: PlayerId,
        fee_config: FeeConfig | None = None,
    ) -> None:
        self.state = state
        self.admin_pid: PlayerId = (admin_pid[0], admin_pid[1])
        self.pricing = PricingEngine(FeeCalculator(fee_config))
        self.markets = MarketLedger(self.pricing)
        self.projects = ProjectLedger()
        self._handlers: dict[type, Callable[[PlayerId, Any], Any]] = {
            Tick: self._handle_tick,
            InstallPlayer: self._handle_install_player,
            Deposit: self._handle_deposit,
            Withdraw: self._handle_withdraw,
            CreateMarket: self._handle_create_market,
            Bet: self._handle_bet,
            Sell: self._handle_sell,
            Resolve: self._handle_resolve,
            Claim: self._handle_claim,
            WithdrawFees: self._handle_withdraw_fees,
            CreateIdoProject: self._handle_create_project,
            UpdateIdoProject: self._handle_update_project,
            Invest: self._handle_invest,
            WithdrawTokens: self._handle_withdraw_tokens,
        }

    @classmethod
    def genesis(
        cls, genesis: GenesisConfig, fee_config: FeeConfig | None = None
    ) -> "CommandDispatcher":
        """Fresh state: admin installed, genesis market open from tick 0."""
        dispatcher = cls(GlobalState(), genesis.admin_pid, fee_config)
        dispatcher.state.players.install(genesis.admin_pid)
        market = dispatcher.markets.create_market(
            market_id=GENESIS_MARKET_ID,
            title=genesis.market_title,
            description=genesis.market_description,
            yes_liquidity=genesis.yes_liquidity,
            no_liquidity=genesis.no_liquidity,
            start_time=0,
            end_time=genesis.market_duration,
            now=0,
        )
        dispatcher.state.markets[market.id] = market
        return dispatcher

    @classmethod
    def from_settings(cls, s: Settings) -> "CommandDispatcher":
        return cls.genesis(
            GenesisConfig.from_settings(s),
            FeeConfig(rate=s.FEE_RATE_BPS, basis_points=s.FEE_BASIS_POINTS),
        )

    @property
    def now(self) -> int:
        return self.state.counter

    def handle(self, pid: PlayerId, command: Command) -> Any:
        """Apply one command. Returns the handler's typed result."""
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {type(command).__name__}")
        try:
            result = handler((pid[0], pid[1]), command)
        except AppError as exc:
            logger.warning(
                "Rejected %s from %s:%s at tick %d: %s (%d)",
                command.kind.name, pid[0], pid[1], self.now, exc.kind, exc.code,
            )
            raise
        if not isinstance(command, Tick):
            self.state.txcounter += 1
        return result

    def tick(self) -> int:
        """Advance the clock one step and re-evaluate every lifecycle."""
        self.state.counter += 1
        now = self.state.counter
        for market in self.state.markets.values():
            if sync_market(market, now):
                logger.info("Market %d -> %s at tick %d", market.id, market.status.value, now)
        for project in self.state.projects.values():
            if sync_project(project, now):
                logger.info("Project %d -> %s at tick %d", project.id, project.status.value, now)
        return now

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _handle_tick(self, pid: PlayerId, command: Tick) -> int:
        check_admin(pid, self.admin_pid, "Tick")
        return self.tick()

    def _handle_install_player(self, pid: PlayerId, command: InstallPlayer) -> Player:
        return self.state.players.install(pid)

    def _handle_deposit(self, pid: PlayerId, command: Deposit) -> Player:
        check_admin(pid, self.admin_pid, "Deposit")
        return self.state.players.deposit(command.target, command.amount)

    def _handle_withdraw(self, pid: PlayerId, command: Withdraw) -> WithdrawInfo:
        player = self.state.players.require(pid)
        return self.state.players.withdraw(
            player,
            command.amount,
            command.address_high,
            command.address_low,
            self.now,
            self.state.settlements,
        )

    def _handle_create_market(self, pid: PlayerId, command: CreateMarket) -> Market:
        check_admin(pid, self.admin_pid, "CreateMarket")
        if command.start_delay < 0:
            raise InvalidMarketParamsError(f"start_delay must not be negative, got {command.start_delay}")
        start_time = self.now + command.start_delay
        end_time = start_time + command.duration if command.duration is not None else None
        market = self.markets.create_market(
            market_id=self.state.next_market_id(),
            title=command.title,
            description=command.description,
            yes_liquidity=command.yes_liquidity,
            no_liquidity=command.no_liquidity,
            start_time=start_time,
            end_time=end_time,
            now=self.now,
        )
        self.state.markets[market.id] = market
        return market

    def _handle_bet(self, pid: PlayerId, command: Bet) -> BuyResult:
        player = self.state.players.require(pid)
        market = self.state.require_market(command.market_id)
        return self.markets.buy(market, player, command.side, command.amount, self.now)

    def _handle_sell(self, pid: PlayerId, command: Sell) -> SellResult:
        player = self.state.players.require(pid)
        market = self.state.require_market(command.market_id)
        return self.markets.sell(market, player, command.side, command.shares, self.now)

    def _handle_resolve(self, pid: PlayerId, command: Resolve) -> Market:
        check_admin(pid, self.admin_pid, "Resolve")
        market = self.state.require_market(command.market_id)
        self.markets.resolve(market, command.outcome)
        return market

    def _handle_claim(self, pid: PlayerId, command: Claim) -> ClaimResult:
        player = self.state.players.require(pid)
        market = self.state.require_market(command.market_id)
        return self.markets.claim(market, player)

    def _handle_withdraw_fees(self, pid: PlayerId, command: WithdrawFees) -> int:
        check_admin(pid, self.admin_pid, "WithdrawFees")
        admin = self.state.players.require(pid)
        market = self.state.require_market(command.market_id)
        return self.markets.withdraw_fees(market, admin)

    def _handle_create_project(self, pid: PlayerId, command: CreateIdoProject) -> Project:
        check_admin(pid, self.admin_pid, "CreateIdoProject")
        if command.start_delay < 0:
            raise InvalidProjectParamsError(
                f"start_delay must not be negative, got {command.start_delay}"
            )
        start_time = self.now + command.start_delay
        params = ProjectParams(
            name=command.name,
            token_name=command.token_name,
            token_symbol=command.token_symbol,
            target_amount=command.target_amount,
            token_supply=command.token_supply,
            max_individual_cap=command.max_individual_cap,
            start_time=start_time,
            end_time=start_time + command.duration,
        )
        project = self.projects.create_project(
            self.state.next_project_id(), params, pid, self.now
        )
        self.state.projects[project.id] = project
        self.state.investments[project.id] = {}
        return project

    def _handle_update_project(self, pid: PlayerId, command: UpdateIdoProject) -> Project:
        check_admin(pid, self.admin_pid, "UpdateIdoProject")
        project = self.state.require_project(command.project_id)
        current = project.params()
        if command.start_delay is not None and command.start_delay < 0:
            raise InvalidProjectParamsError(
                f"start_delay must not be negative, got {command.start_delay}"
            )
        start_time = (
            self.now + command.start_delay
            if command.start_delay is not None
            else current.start_time
        )
        duration = (
            command.duration
            if command.duration is not None
            else current.end_time - current.start_time
        )
        changes = {
            name: getattr(command, name)
            for name in (
                "name",
                "token_name",
                "token_symbol",
                "target_amount",
                "token_supply",
                "max_individual_cap",
            )
            if getattr(command, name) is not None
        }
        params = dataclasses.replace(
            current, start_time=start_time, end_time=start_time + duration, **changes
        )
        return self.projects.update_project(project, params, self.now)

    def _handle_invest(self, pid: PlayerId, command: Invest) -> InvestResult:
        player = self.state.players.require(pid)
        project = self.state.require_project(command.project_id)
        return self.projects.invest(
            project, self.state.book(project.id), player, command.amount, self.now
        )

    def _handle_withdraw_tokens(self, pid: PlayerId, command: WithdrawTokens) -> TokenWithdrawal:
        player = self.state.players.require(pid)
        project = self.state.require_project(command.project_id)
        return self.projects.withdraw_tokens(
            project, self.state.book(project.id), player, self.now
        )
