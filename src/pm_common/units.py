"""Integer arithmetic utilities for the settlement core.

All prices, amounts, balances and share counts are int in the smallest
currency unit. No float, no Decimal. Displayed prices are fixed-point ints
scaled by PRICE_SCALE (six decimals).
"""

PRICE_SCALE = 1_000_000
HALF_PRICE = PRICE_SCALE // 2


def ceil_div(numerator: int, denominator: int) -> int:
    """Integer ceiling division for non-negative numerator: (a + b - 1) // b."""
    if denominator <= 0:
        raise ZeroDivisionError(f"denominator must be positive, got {denominator}")
    return (numerator + denominator - 1) // denominator


def mul_div(value: int, numerator: int, denominator: int) -> int:
    """floor(value * numerator / denominator) without intermediate rounding."""
    if denominator <= 0:
        raise ZeroDivisionError(f"denominator must be positive, got {denominator}")
    return value * numerator // denominator


def scaled_ratio(part: int, whole: int) -> int:
    """part / whole as a PRICE_SCALE fixed-point int (floor)."""
    return mul_div(part, PRICE_SCALE, whole)


def price_to_display(price: int) -> str:
    """Render a scaled price: 495148 -> '0.495148'."""
    sign = "-" if price < 0 else ""
    price = abs(price)
    return f"{sign}{price // PRICE_SCALE}.{price % PRICE_SCALE:06d}"


def units_to_display(amount: int) -> str:
    """Render an integer amount with thousands separators: 1500000 -> '1,500,000'."""
    return f"{amount:,}"
