"""MarketLedger: trade, resolution and claim accounting for one market.

Each operation validates and computes first, then commits every field in one
block. Any AppError raised leaves market, player and position untouched.
"""

import logging
from dataclasses import dataclass

from src.pm_account.domain.models import Player
from src.pm_amm.domain.pricing import BuyResult, PricingEngine, SellResult
from src.pm_clearing.domain.invariants import verify_reserves_after_trade
from src.pm_common.enums import Phase, Side
from src.pm_common.errors import (
    AlreadyClaimedError,
    InvalidMarketParamsError,
    NotResolvedYetError,
    NoWinningPositionError,
)
from src.pm_market.domain.models import Market, Position
from src.pm_risk.rules.balance_check import check_balance, check_positive, check_shares
from src.pm_risk.rules.lifecycle import advance, check_market_open, check_market_unresolved

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClaimResult:
    market_id: int
    outcome: bool
    winning_shares: int
    payout: int


class MarketLedger:
    def __init__(self, pricing: PricingEngine) -> None:
        self.pricing = pricing

    def create_market(
        self,
        market_id: int,
        title: str,
        description: str,
        yes_liquidity: int,
        no_liquidity: int,
        start_time: int,
        end_time: int | None,
        now: int,
    ) -> Market:
        if yes_liquidity <= 0 or no_liquidity <= 0:
            raise InvalidMarketParamsError(
                f"initial liquidity must be positive (yes={yes_liquidity}, no={no_liquidity})"
            )
        if end_time is not None and end_time <= start_time:
            raise InvalidMarketParamsError(
                f"start_time {start_time} must be before end_time {end_time}"
            )
        if not title:
            raise InvalidMarketParamsError("title must not be empty")
        market = Market(
            id=market_id,
            title=title,
            description=description,
            yes_liquidity=yes_liquidity,
            no_liquidity=no_liquidity,
            start_time=start_time,
            end_time=end_time,
            created_time=now,
        )
        market.status = advance(market.status, now, start_time, end_time)
        logger.info(
            "Market created: id=%d yes=%d no=%d window=[%d, %s) status=%s",
            market_id, yes_liquidity, no_liquidity, start_time, end_time, market.status.value,
        )
        return market

    def buy(
        self, market: Market, player: Player, side: Side, amount: int, now: int
    ) -> BuyResult:
        check_market_open(market, now)
        check_positive(amount)
        check_balance(player, amount)
        result = self.pricing.quote_buy(
            market.yes_liquidity, market.no_liquidity, side, amount
        )
        verify_reserves_after_trade(
            market.id,
            market.yes_liquidity * market.no_liquidity,
            result.new_yes_liquidity,
            result.new_no_liquidity,
        )

        # commit
        position = player.positions.setdefault(market.id, Position(market_id=market.id))
        if side is Side.YES:
            position.yes_shares += result.shares
        else:
            position.no_shares += result.shares
        player.balance -= amount
        market.yes_liquidity = result.new_yes_liquidity
        market.no_liquidity = result.new_no_liquidity
        market.total_volume += amount
        market.total_fees_collected += result.fee
        market.bet_count += 1
        return result

    def sell(
        self, market: Market, player: Player, side: Side, shares: int, now: int
    ) -> SellResult:
        check_market_open(market, now)
        check_positive(shares)
        check_shares(player, market.id, side, shares)
        result = self.pricing.quote_sell(
            market.yes_liquidity, market.no_liquidity, side, shares
        )
        verify_reserves_after_trade(
            market.id,
            market.yes_liquidity * market.no_liquidity,
            result.new_yes_liquidity,
            result.new_no_liquidity,
        )

        # commit
        position = player.positions[market.id]
        if side is Side.YES:
            position.yes_shares -= shares
        else:
            position.no_shares -= shares
        player.balance += result.net_payout
        market.yes_liquidity = result.new_yes_liquidity
        market.no_liquidity = result.new_no_liquidity
        market.total_volume += result.gross_amount
        market.total_fees_collected += result.fee
        market.bet_count += 1
        return result

    def resolve(self, market: Market, outcome: bool) -> None:
        """Irreversibly fix the outcome. Admin check is the caller's job."""
        check_market_unresolved(market)
        market.resolved = True
        market.outcome = outcome
        market.status = Phase.RESOLVED
        logger.info("Market resolved: id=%d outcome=%s", market.id, "YES" if outcome else "NO")

    def claim(self, market: Market, player: Player) -> ClaimResult:
        """Redeem winning shares 1:1. A second claim fails with AlreadyClaimed."""
        if not market.resolved or market.outcome is None:
            raise NotResolvedYetError(market.id)
        position = player.positions.get(market.id)
        if position is not None and position.claimed:
            raise AlreadyClaimedError(market.id)
        winning_side = Side.YES if market.outcome else Side.NO
        winning_shares = position.shares(winning_side) if position is not None else 0
        if winning_shares == 0:
            raise NoWinningPositionError(market.id)

        # commit
        payout = winning_shares
        position.claimed = True  # type: ignore[union-attr]
        player.balance += payout
        market.total_payouts += payout
        return ClaimResult(
            market_id=market.id,
            outcome=market.outcome,
            winning_shares=winning_shares,
            payout=payout,
        )

    def withdraw_fees(self, market: Market, admin: Player) -> int:
        """Move collected fees to the admin balance. Zero fees is a valid no-op."""
        amount = market.total_fees_collected
        admin.balance += amount
        market.total_fees_collected = 0
        logger.info("Fees withdrawn: market=%d amount=%d", market.id, amount)
        return amount
