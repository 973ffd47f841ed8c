"""Product-specific command builders.

Each builder composes a TransactionSender instead of extending a player base
class, so one signing capability can drive the market and the launchpad.
"""

import logging
from typing import Any

from src.pm_common.enums import Side
from src.pm_common.errors import PlayerAlreadyExistsError
from src.pm_gateway.commands import (
    GENESIS_MARKET_ID,
    Bet,
    Claim,
    CreateIdoProject,
    Deposit,
    InstallPlayer,
    Invest,
    PlayerId,
    Resolve,
    Sell,
    UpdateIdoProject,
    Withdraw,
    WithdrawFees,
    WithdrawTokens,
)
from src.pm_client.sender import TransactionSender

logger = logging.getLogger(__name__)


class PlayerCommands:
    def __init__(self, sender: TransactionSender) -> None:
        self.sender = sender

    def install_player(self) -> Any:
        """Install the sender's player. An existing player is not an error."""
        try:
            return self.sender.send(InstallPlayer())
        except PlayerAlreadyExistsError:
            logger.info("Player already exists, skipping installation")
            return None

    def deposit(self, target: PlayerId, amount: int) -> Any:
        return self.sender.send(Deposit(target=target, amount=amount))

    def withdraw(self, amount: int, address_high: int, address_low: int) -> Any:
        return self.sender.send(
            Withdraw(amount=amount, address_high=address_high, address_low=address_low)
        )


class MarketCommands:
    def __init__(self, sender: TransactionSender, market_id: int = GENESIS_MARKET_ID) -> None:
        self.sender = sender
        self.market_id = market_id

    def place_bet(self, side: Side, amount: int) -> Any:
        return self.sender.send(Bet(side=side, amount=amount, market_id=self.market_id))

    def sell_shares(self, side: Side, shares: int) -> Any:
        return self.sender.send(Sell(side=side, shares=shares, market_id=self.market_id))

    def resolve_market(self, outcome: bool) -> Any:
        return self.sender.send(Resolve(outcome=outcome, market_id=self.market_id))

    def claim_winnings(self) -> Any:
        return self.sender.send(Claim(market_id=self.market_id))

    def withdraw_fees(self) -> Any:
        return self.sender.send(WithdrawFees(market_id=self.market_id))


class IdoCommands:
    def __init__(self, sender: TransactionSender) -> None:
        self.sender = sender

    def create_project(
        self,
        name: str,
        token_name: str,
        token_symbol: str,
        target_amount: int,
        token_supply: int,
        max_individual_cap: int,
        duration: int,
        start_delay: int = 0,
    ) -> Any:
        return self.sender.send(
            CreateIdoProject(
                name=name,
                token_name=token_name,
                token_symbol=token_symbol,
                target_amount=target_amount,
                token_supply=token_supply,
                max_individual_cap=max_individual_cap,
                duration=duration,
                start_delay=start_delay,
            )
        )

    def update_project(self, project_id: int, **fields: Any) -> Any:
        return self.sender.send(UpdateIdoProject(project_id=project_id, **fields))

    def invest(self, project_id: int, amount: int) -> Any:
        return self.sender.send(Invest(project_id=project_id, amount=amount))

    def withdraw_tokens(self, project_id: int) -> Any:
        return self.sender.send(WithdrawTokens(project_id=project_id))
