from src.pm_common.errors import CapExceededError


def check_investment_cap(already_invested: int, amount: int, cap: int) -> None:
    """Raise CapExceeded if cumulative investment would exceed the individual cap."""
    attempted_total = already_invested + amount
    if attempted_total > cap:
        raise CapExceededError(cap=cap, attempted_total=attempted_total)
