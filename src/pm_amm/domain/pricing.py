"""Constant-product pricing for a binary YES/NO pool.

Reserves (yes, no) hold k = yes * no. Buying YES pays the net-of-fee amount
into the NO reserve and takes YES out:

    new_no  = no + net
    new_yes = k // new_no          (floor: rounding favours the pool)
    shares  = yes - new_yes

Selling YES puts shares back into the YES reserve and pays the gross amount
out of the NO reserve, fee deducted from the payout:

    new_yes = yes + shares
    new_no  = k // new_yes
    gross   = no - new_no
    net     = gross - fee(gross)

NO trades mirror the roles. Prices are PRICE_SCALE fixed-point ints:
yes_price = no / (yes + no), no_price = PRICE_SCALE - yes_price.

Nothing here mutates state; the ledger applies the returned reserves.
"""

from dataclasses import dataclass

from src.pm_clearing.domain.fee import FeeCalculator
from src.pm_common.enums import Side
from src.pm_common.errors import DegenerateTradeError, InvalidAmountError
from src.pm_common.units import HALF_PRICE, PRICE_SCALE, mul_div, scaled_ratio


@dataclass(frozen=True)
class Prices:
    yes_price: int
    no_price: int

    def for_side(self, side: Side) -> int:
        return self.yes_price if side is Side.YES else self.no_price


@dataclass(frozen=True)
class BuyResult:
    side: Side
    amount: int
    fee: int
    net_amount: int
    shares: int
    new_yes_liquidity: int
    new_no_liquidity: int


@dataclass(frozen=True)
class SellResult:
    side: Side
    shares: int
    gross_amount: int
    fee: int
    net_payout: int
    new_yes_liquidity: int
    new_no_liquidity: int


@dataclass(frozen=True)
class MarketImpact:
    current_yes_price: int
    current_no_price: int
    new_yes_price: int
    new_no_price: int


def calculate_prices(yes_liquidity: int, no_liquidity: int) -> Prices:
    total = yes_liquidity + no_liquidity
    if total == 0:
        return Prices(yes_price=HALF_PRICE, no_price=HALF_PRICE)
    yes_price = scaled_ratio(no_liquidity, total)
    return Prices(yes_price=yes_price, no_price=PRICE_SCALE - yes_price)


def _swap(
    k: int, reserve_in: int, delta_in: int, reserve_out: int
) -> tuple[int, int, int]:
    """Add delta_in to one reserve, rebalance the other by floor(k / new_in).

    Returns (new_in, new_out, amount_out). Rejects trades that divide by a
    zero reserve or leave either reserve at zero.
    """
    new_in = reserve_in + delta_in
    if new_in == 0:
        raise DegenerateTradeError("divisor reserve is zero")
    new_out = k // new_in
    if new_out == 0:
        raise DegenerateTradeError(
            f"trade would drain the pool (k={k}, new reserve in={new_in})"
        )
    amount_out = reserve_out - new_out if reserve_out > new_out else 0
    return new_in, new_out, amount_out


class PricingEngine:
    def __init__(self, fees: FeeCalculator | None = None) -> None:
        self.fees = fees or FeeCalculator()

    def quote_buy(
        self, yes_liquidity: int, no_liquidity: int, side: Side, amount: int
    ) -> BuyResult:
        if amount < 0:
            raise InvalidAmountError(amount, "must not be negative")
        if amount == 0:
            return BuyResult(side, 0, 0, 0, 0, yes_liquidity, no_liquidity)

        net_amount, fee = self.fees.net_of_fee(amount)
        k = yes_liquidity * no_liquidity
        if side is Side.YES:
            new_no, new_yes, shares = _swap(k, no_liquidity, net_amount, yes_liquidity)
        else:
            new_yes, new_no, shares = _swap(k, yes_liquidity, net_amount, no_liquidity)
        return BuyResult(
            side=side,
            amount=amount,
            fee=fee,
            net_amount=net_amount,
            shares=shares,
            new_yes_liquidity=new_yes,
            new_no_liquidity=new_no,
        )

    def quote_sell(
        self, yes_liquidity: int, no_liquidity: int, side: Side, shares: int
    ) -> SellResult:
        if shares < 0:
            raise InvalidAmountError(shares, "must not be negative")
        if shares == 0:
            return SellResult(side, 0, 0, 0, 0, yes_liquidity, no_liquidity)

        k = yes_liquidity * no_liquidity
        if side is Side.YES:
            new_yes, new_no, gross = _swap(k, yes_liquidity, shares, no_liquidity)
        else:
            new_no, new_yes, gross = _swap(k, no_liquidity, shares, yes_liquidity)
        net_payout, fee = self.fees.net_of_fee(gross)
        return SellResult(
            side=side,
            shares=shares,
            gross_amount=gross,
            fee=fee,
            net_payout=net_payout,
            new_yes_liquidity=new_yes,
            new_no_liquidity=new_no,
        )

    def prices(self, yes_liquidity: int, no_liquidity: int) -> Prices:
        return calculate_prices(yes_liquidity, no_liquidity)

    def buy_price(
        self, yes_liquidity: int, no_liquidity: int, side: Side, amount: int
    ) -> int:
        """Effective price per share paid (gross amount / shares), scaled."""
        result = self.quote_buy(yes_liquidity, no_liquidity, side, amount)
        if result.shares == 0:
            return 0
        return mul_div(result.amount, PRICE_SCALE, result.shares)

    def sell_price(
        self, yes_liquidity: int, no_liquidity: int, side: Side, shares: int
    ) -> int:
        """Effective price per share received (net payout / shares), scaled."""
        result = self.quote_sell(yes_liquidity, no_liquidity, side, shares)
        if result.net_payout == 0:
            return 0
        return mul_div(result.net_payout, PRICE_SCALE, result.shares)

    def market_impact(
        self, yes_liquidity: int, no_liquidity: int, side: Side, amount: int
    ) -> MarketImpact:
        current = calculate_prices(yes_liquidity, no_liquidity)
        result = self.quote_buy(yes_liquidity, no_liquidity, side, amount)
        after = calculate_prices(result.new_yes_liquidity, result.new_no_liquidity)
        return MarketImpact(
            current_yes_price=current.yes_price,
            current_no_price=current.no_price,
            new_yes_price=after.yes_price,
            new_no_price=after.no_price,
        )

    def slippage(
        self, yes_liquidity: int, no_liquidity: int, side: Side, amount: int
    ) -> int:
        """max(0, effective price - current price) for the side being bought."""
        if amount <= 0:
            return 0
        current = calculate_prices(yes_liquidity, no_liquidity).for_side(side)
        effective = self.buy_price(yes_liquidity, no_liquidity, side, amount)
        return max(0, effective - current)
