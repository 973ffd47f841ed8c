"""Pro-rata token allocation and refund for an IDO round.

Under- or exactly-subscribed (total_raised <= target):
    tokens = invested * token_supply // target
    refund = 0
Over-subscribed (total_raised > target):
    tokens = invested * token_supply // total_raised
    refund = invested - invested * target // total_raised

Both floors leave dust with the protocol: summed over investors, tokens never
exceed token_supply and accepted amounts never exceed target. Nothing is
cached; identical inputs always give identical outputs.
"""

from dataclasses import dataclass

from src.pm_common.errors import InvalidAmountError
from src.pm_common.units import mul_div


@dataclass(frozen=True)
class Allocation:
    tokens: int
    refund: int
    accepted_amount: int     # part of the investment actually spent on tokens


def allocate(
    invested_amount: int, total_raised: int, target_amount: int, token_supply: int
) -> Allocation:
    if target_amount <= 0:
        raise InvalidAmountError(target_amount, "target amount must be positive")
    if total_raised <= 0:
        raise InvalidAmountError(total_raised, "nothing raised yet")
    if invested_amount < 0 or invested_amount > total_raised:
        raise InvalidAmountError(
            invested_amount, f"investment must be within [0, {total_raised}]"
        )

    if total_raised <= target_amount:
        tokens = mul_div(invested_amount, token_supply, target_amount)
        return Allocation(tokens=tokens, refund=0, accepted_amount=invested_amount)

    tokens = mul_div(invested_amount, token_supply, total_raised)
    accepted = mul_div(invested_amount, target_amount, total_raised)
    return Allocation(
        tokens=tokens,
        refund=invested_amount - accepted,
        accepted_amount=accepted,
    )
