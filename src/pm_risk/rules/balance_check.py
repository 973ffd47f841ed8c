from src.pm_account.domain.models import Player
from src.pm_common.enums import Side
from src.pm_common.errors import (
    InsufficientBalanceError,
    InsufficientSharesError,
    InvalidAmountError,
)


def check_positive(amount: int) -> None:
    """Raise InvalidAmount unless amount > 0."""
    if amount <= 0:
        raise InvalidAmountError(amount)


def check_balance(player: Player, amount: int) -> None:
    """Raise InsufficientBalance if the player cannot pay amount."""
    if player.balance < amount:
        raise InsufficientBalanceError(required=amount, available=player.balance)


def check_shares(player: Player, market_id: int, side: Side, shares: int) -> None:
    """Raise InsufficientShares if the player holds fewer than shares on side."""
    held = player.position(market_id).shares(side)
    if held < shares:
        raise InsufficientSharesError(side.value, required=shares, available=held)
