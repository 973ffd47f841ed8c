"""Pydantic schemas for pm_market query responses.

Prices are ints scaled by PRICE_SCALE (1_000_000); *_display fields carry the
same value rendered with six decimals for humans.
"""

from pydantic import BaseModel

from src.pm_amm.domain.pricing import BuyResult, MarketImpact, Prices, SellResult
from src.pm_common.enums import Side
from src.pm_common.units import price_to_display
from src.pm_market.domain.models import Market, Position

# ---------------------------------------------------------------------------
# Market
# ---------------------------------------------------------------------------


class MarketDetail(BaseModel):
    id: int
    title: str
    description: str
    status: str
    start_time: int
    end_time: int | None
    yes_liquidity: int
    no_liquidity: int
    yes_price: int
    no_price: int
    yes_price_display: str
    no_price_display: str
    resolved: bool
    outcome: str | None
    total_volume: int
    total_fees_collected: int
    total_payouts: int
    bet_count: int

    @classmethod
    def from_domain(cls, m: Market, prices: Prices, status: str) -> "MarketDetail":
        outcome = None if m.outcome is None else ("YES" if m.outcome else "NO")
        return cls(
            id=m.id,
            title=m.title,
            description=m.description,
            status=status,
            start_time=m.start_time,
            end_time=m.end_time,
            yes_liquidity=m.yes_liquidity,
            no_liquidity=m.no_liquidity,
            yes_price=prices.yes_price,
            no_price=prices.no_price,
            yes_price_display=price_to_display(prices.yes_price),
            no_price_display=price_to_display(prices.no_price),
            resolved=m.resolved,
            outcome=outcome,
            total_volume=m.total_volume,
            total_fees_collected=m.total_fees_collected,
            total_payouts=m.total_payouts,
            bet_count=m.bet_count,
        )


class MarketListResponse(BaseModel):
    items: list[MarketDetail]
    total: int


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------


class PositionResponse(BaseModel):
    market_id: int
    yes_shares: int
    no_shares: int
    claimed: bool

    @classmethod
    def from_domain(cls, p: Position) -> "PositionResponse":
        return cls(
            market_id=p.market_id,
            yes_shares=p.yes_shares,
            no_shares=p.no_shares,
            claimed=p.claimed,
        )


# ---------------------------------------------------------------------------
# Quotes
# ---------------------------------------------------------------------------


class BuyQuoteResponse(BaseModel):
    market_id: int
    side: Side
    amount: int
    fee: int
    net_amount: int
    shares: int
    effective_price: int
    slippage: int
    current_yes_price: int
    current_no_price: int
    new_yes_price: int
    new_no_price: int

    @classmethod
    def from_result(
        cls,
        market_id: int,
        result: BuyResult,
        effective_price: int,
        slippage: int,
        impact: MarketImpact,
    ) -> "BuyQuoteResponse":
        return cls(
            market_id=market_id,
            side=result.side,
            amount=result.amount,
            fee=result.fee,
            net_amount=result.net_amount,
            shares=result.shares,
            effective_price=effective_price,
            slippage=slippage,
            current_yes_price=impact.current_yes_price,
            current_no_price=impact.current_no_price,
            new_yes_price=impact.new_yes_price,
            new_no_price=impact.new_no_price,
        )


class SellQuoteResponse(BaseModel):
    market_id: int
    side: Side
    shares: int
    gross_amount: int
    fee: int
    net_payout: int
    effective_price: int

    @classmethod
    def from_result(
        cls, market_id: int, result: SellResult, effective_price: int
    ) -> "SellQuoteResponse":
        return cls(
            market_id=market_id,
            side=result.side,
            shares=result.shares,
            gross_amount=result.gross_amount,
            fee=result.fee,
            net_payout=result.net_payout,
            effective_price=effective_price,
        )
