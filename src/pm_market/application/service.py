"""MarketQueryService: read-only projections over the market aggregates.

Nothing here mutates state. Status is evaluated at the current tick so a
snapshot taken between ticks agrees with what the next command would see.
"""

from src.pm_amm.domain.pricing import PricingEngine
from src.pm_common.enums import Phase, Side
from src.pm_gateway.state import GlobalState
from src.pm_market.application.schemas import (
    BuyQuoteResponse,
    MarketDetail,
    MarketListResponse,
    PositionResponse,
    SellQuoteResponse,
)
from src.pm_market.domain.models import Market
from src.pm_risk.rules.lifecycle import market_phase_at


class MarketQueryService:
    def __init__(self, state: GlobalState, pricing: PricingEngine) -> None:
        self._state = state
        self._pricing = pricing

    def _detail(self, market: Market) -> MarketDetail:
        status = Phase.RESOLVED if market.resolved else market_phase_at(market, self._state.counter)
        prices = self._pricing.prices(market.yes_liquidity, market.no_liquidity)
        return MarketDetail.from_domain(market, prices, status.value)

    def list_markets(self) -> MarketListResponse:
        items = [self._detail(m) for _, m in sorted(self._state.markets.items())]
        return MarketListResponse(items=items, total=len(items))

    def get_market(self, market_id: int) -> MarketDetail:
        return self._detail(self._state.require_market(market_id))

    def get_position(self, pid: tuple[int, int], market_id: int) -> PositionResponse:
        self._state.require_market(market_id)
        player = self._state.players.require(pid)
        return PositionResponse.from_domain(player.position(market_id))

    def quote_buy(self, market_id: int, side: Side, amount: int) -> BuyQuoteResponse:
        m = self._state.require_market(market_id)
        yes, no = m.yes_liquidity, m.no_liquidity
        result = self._pricing.quote_buy(yes, no, side, amount)
        return BuyQuoteResponse.from_result(
            market_id,
            result,
            effective_price=self._pricing.buy_price(yes, no, side, amount),
            slippage=self._pricing.slippage(yes, no, side, amount),
            impact=self._pricing.market_impact(yes, no, side, amount),
        )

    def quote_sell(self, market_id: int, side: Side, shares: int) -> SellQuoteResponse:
        m = self._state.require_market(market_id)
        result = self._pricing.quote_sell(m.yes_liquidity, m.no_liquidity, side, shares)
        return SellQuoteResponse.from_result(
            market_id,
            result,
            effective_price=self._pricing.sell_price(
                m.yes_liquidity, m.no_liquidity, side, shares
            ),
        )
