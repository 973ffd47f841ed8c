"""Inbound commands: typed field sets, independent of any wire encoding.

The host decodes transactions into these objects and hands them to
CommandDispatcher.handle() together with the authenticated player id.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from src.pm_common.enums import CommandKind, Side

GENESIS_MARKET_ID = 1

PlayerId = tuple[int, int]


@dataclass(frozen=True)
class Tick:
    kind: ClassVar[CommandKind] = CommandKind.TICK


@dataclass(frozen=True)
class InstallPlayer:
    kind: ClassVar[CommandKind] = CommandKind.INSTALL_PLAYER


@dataclass(frozen=True)
class Deposit:
    target: PlayerId
    amount: int
    kind: ClassVar[CommandKind] = CommandKind.DEPOSIT


@dataclass(frozen=True)
class Withdraw:
    amount: int
    address_high: int
    address_low: int
    kind: ClassVar[CommandKind] = CommandKind.WITHDRAW


@dataclass(frozen=True)
class CreateMarket:
    title: str
    yes_liquidity: int
    no_liquidity: int
    description: str = ""
    start_delay: int = 0
    duration: int | None = None
    kind: ClassVar[CommandKind] = CommandKind.CREATE_MARKET


@dataclass(frozen=True)
class Bet:
    side: Side
    amount: int
    market_id: int = GENESIS_MARKET_ID
    kind: ClassVar[CommandKind] = CommandKind.BET


@dataclass(frozen=True)
class Sell:
    side: Side
    shares: int
    market_id: int = GENESIS_MARKET_ID
    kind: ClassVar[CommandKind] = CommandKind.SELL


@dataclass(frozen=True)
class Resolve:
    outcome: bool
    market_id: int = GENESIS_MARKET_ID
    kind: ClassVar[CommandKind] = CommandKind.RESOLVE


@dataclass(frozen=True)
class Claim:
    market_id: int = GENESIS_MARKET_ID
    kind: ClassVar[CommandKind] = CommandKind.CLAIM


@dataclass(frozen=True)
class WithdrawFees:
    market_id: int = GENESIS_MARKET_ID
    kind: ClassVar[CommandKind] = CommandKind.WITHDRAW_FEES


@dataclass(frozen=True)
class CreateIdoProject:
    name: str
    token_name: str
    token_symbol: str
    target_amount: int
    token_supply: int
    max_individual_cap: int
    duration: int
    start_delay: int = 0
    kind: ClassVar[CommandKind] = CommandKind.CREATE_IDO_PROJECT


@dataclass(frozen=True)
class UpdateIdoProject:
    """Pre-start edit. Fields left as None keep their current value."""

    project_id: int
    name: str | None = None
    token_name: str | None = None
    token_symbol: str | None = None
    target_amount: int | None = None
    token_supply: int | None = None
    max_individual_cap: int | None = None
    start_delay: int | None = None    # ticks from now
    duration: int | None = None
    kind: ClassVar[CommandKind] = CommandKind.UPDATE_IDO_PROJECT


@dataclass(frozen=True)
class Invest:
    project_id: int
    amount: int
    kind: ClassVar[CommandKind] = CommandKind.INVEST


@dataclass(frozen=True)
class WithdrawTokens:
    project_id: int
    kind: ClassVar[CommandKind] = CommandKind.WITHDRAW_TOKENS


Command = Union[
    Tick,
    InstallPlayer,
    Deposit,
    Withdraw,
    CreateMarket,
    Bet,
    Sell,
    Resolve,
    Claim,
    WithdrawFees,
    CreateIdoProject,
    UpdateIdoProject,
    Invest,
    WithdrawTokens,
]
