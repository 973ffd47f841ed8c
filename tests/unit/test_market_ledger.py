import copy

import pytest

from src.pm_account.domain.models import Player
from src.pm_amm.domain.pricing import PricingEngine
from src.pm_common.enums import Phase, Side
from src.pm_common.errors import (
    AlreadyClaimedError,
    AlreadyResolvedError,
    InsufficientBalanceError,
    InsufficientSharesError,
    InvalidAmountError,
    InvalidMarketParamsError,
    MarketNotActiveError,
    NotResolvedYetError,
    NoWinningPositionError,
)
from src.pm_market.domain.ledger import MarketLedger
from src.pm_market.domain.models import Market


@pytest.fixture
def ledger() -> MarketLedger:
    return MarketLedger(PricingEngine())


@pytest.fixture
def market(ledger: MarketLedger) -> Market:
    return ledger.create_market(
        market_id=1,
        title="Test market",
        description="",
        yes_liquidity=100_000,
        no_liquidity=100_000,
        start_time=0,
        end_time=None,
        now=0,
    )


@pytest.fixture
def player() -> Player:
    return Player(pid=(2, 2), balance=10_000)


class TestCreateMarket:
    def test_starts_active_when_window_open(self, market: Market) -> None:
        assert market.status is Phase.ACTIVE

    def test_future_start_is_pending(self, ledger: MarketLedger) -> None:
        m = ledger.create_market(2, "Later", "", 10, 10, start_time=5, end_time=9, now=0)
        assert m.status is Phase.PENDING

    def test_zero_liquidity_rejected(self, ledger: MarketLedger) -> None:
        with pytest.raises(InvalidMarketParamsError):
            ledger.create_market(2, "Bad", "", 0, 10, start_time=0, end_time=None, now=0)

    def test_end_before_start_rejected(self, ledger: MarketLedger) -> None:
        with pytest.raises(InvalidMarketParamsError):
            ledger.create_market(2, "Bad", "", 10, 10, start_time=5, end_time=5, now=0)

    def test_empty_title_rejected(self, ledger: MarketLedger) -> None:
        with pytest.raises(InvalidMarketParamsError):
            ledger.create_market(2, "", "", 10, 10, start_time=0, end_time=None, now=0)


class TestBuy:
    def test_scenario_buy_commits_everything(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        result = ledger.buy(market, player, Side.YES, 1000, now=0)
        assert result.shares == 981
        assert player.balance == 9_000
        assert player.position(1).yes_shares == 981
        assert market.yes_liquidity == 99_019
        assert market.no_liquidity == 100_990
        assert market.total_volume == 1000
        assert market.total_fees_collected == 10
        assert market.bet_count == 1

    def test_zero_amount_rejected(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        with pytest.raises(InvalidAmountError):
            ledger.buy(market, player, Side.YES, 0, now=0)

    def test_insufficient_balance_changes_nothing(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        market_before = copy.deepcopy(market)
        player_before = copy.deepcopy(player)
        with pytest.raises(InsufficientBalanceError):
            ledger.buy(market, player, Side.NO, 10_001, now=0)
        assert market == market_before
        assert player == player_before

    def test_pending_market_rejected(self, ledger: MarketLedger, player: Player) -> None:
        m = ledger.create_market(2, "Later", "", 1000, 1000, start_time=5, end_time=None, now=0)
        with pytest.raises(MarketNotActiveError):
            ledger.buy(m, player, Side.YES, 100, now=4)

    def test_ended_market_rejected(self, ledger: MarketLedger, player: Player) -> None:
        m = ledger.create_market(2, "Short", "", 1000, 1000, start_time=0, end_time=3, now=0)
        with pytest.raises(MarketNotActiveError):
            ledger.buy(m, player, Side.YES, 100, now=3)


class TestSell:
    def test_sell_back(self, ledger: MarketLedger, market: Market, player: Player) -> None:
        ledger.buy(market, player, Side.YES, 1000, now=0)
        result = ledger.sell(market, player, Side.YES, 981, now=0)
        assert result.net_payout == 981
        assert player.balance == 9_000 + 981
        assert player.position(1).yes_shares == 0
        assert market.total_fees_collected == 20
        assert market.total_volume == 1000 + 991
        assert market.bet_count == 2

    def test_more_than_held_rejected(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        ledger.buy(market, player, Side.NO, 1000, now=0)
        before = copy.deepcopy(market)
        with pytest.raises(InsufficientSharesError):
            ledger.sell(market, player, Side.NO, 982, now=0)
        assert market == before

    def test_without_position_rejected(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        with pytest.raises(InsufficientSharesError):
            ledger.sell(market, player, Side.YES, 1, now=0)
        assert 1 not in player.positions


class TestResolveAndClaim:
    def test_resolve_sets_outcome(self, ledger: MarketLedger, market: Market) -> None:
        ledger.resolve(market, True)
        assert market.resolved is True
        assert market.outcome is True
        assert market.status is Phase.RESOLVED

    def test_resolve_twice_rejected(self, ledger: MarketLedger, market: Market) -> None:
        ledger.resolve(market, False)
        with pytest.raises(AlreadyResolvedError):
            ledger.resolve(market, True)
        assert market.outcome is False

    def test_trading_closed_after_resolve(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        ledger.resolve(market, True)
        with pytest.raises(MarketNotActiveError):
            ledger.buy(market, player, Side.YES, 100, now=0)

    def test_claim_before_resolve_rejected(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        with pytest.raises(NotResolvedYetError):
            ledger.claim(market, player)

    def test_claim_pays_winning_shares_once(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        ledger.buy(market, player, Side.YES, 1000, now=0)
        ledger.resolve(market, True)
        result = ledger.claim(market, player)
        assert result.payout == 981
        assert player.balance == 9_000 + 981
        assert market.total_payouts == 981
        assert player.position(1).claimed is True

        with pytest.raises(AlreadyClaimedError):
            ledger.claim(market, player)
        assert player.balance == 9_000 + 981

    def test_losing_side_has_nothing_to_claim(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        ledger.buy(market, player, Side.NO, 1000, now=0)
        ledger.resolve(market, True)
        with pytest.raises(NoWinningPositionError):
            ledger.claim(market, player)
        assert player.position(1).claimed is False


class TestWithdrawFees:
    def test_moves_fees_to_admin(
        self, ledger: MarketLedger, market: Market, player: Player
    ) -> None:
        admin = Player(pid=(1, 1))
        ledger.buy(market, player, Side.YES, 1000, now=0)
        assert ledger.withdraw_fees(market, admin) == 10
        assert admin.balance == 10
        assert market.total_fees_collected == 0

    def test_zero_fees_is_noop(self, ledger: MarketLedger, market: Market) -> None:
        admin = Player(pid=(1, 1))
        assert ledger.withdraw_fees(market, admin) == 0
        assert admin.balance == 0
