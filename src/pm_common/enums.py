"""Global enums shared by the market and IDO aggregates."""

from enum import Enum, IntEnum


class Side(str, Enum):
    YES = "YES"
    NO = "NO"

    @classmethod
    def from_flag(cls, flag: int) -> "Side":
        """Command flag convention: 1 = YES, anything else = NO."""
        return cls.YES if flag == 1 else cls.NO

    @property
    def opposite(self) -> "Side":
        return Side.NO if self is Side.YES else Side.YES


class Phase(str, Enum):
    """Lifecycle phase shared by markets and IDO projects.

    Projects use PENDING -> ACTIVE -> ENDED.
    Markets use the same window plus RESOLVED (admin-driven, terminal).
    """

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    ENDED = "ENDED"
    RESOLVED = "RESOLVED"


class CommandKind(IntEnum):
    """Command ids used in logs and event payloads."""

    TICK = 0
    INSTALL_PLAYER = 1
    WITHDRAW = 2
    DEPOSIT = 3
    BET = 4
    SELL = 5
    RESOLVE = 6
    CLAIM = 7
    WITHDRAW_FEES = 8
    CREATE_MARKET = 9
    CREATE_IDO_PROJECT = 10
    UPDATE_IDO_PROJECT = 11
    INVEST = 12
    WITHDRAW_TOKENS = 13
