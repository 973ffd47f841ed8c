"""PlayerRegistry: player accounts, deposits and L1 withdrawals."""

import logging

from src.pm_account.domain.models import Player, PlayerId, WithdrawInfo
from src.pm_clearing.domain.settlement import SettlementQueue
from src.pm_common.errors import PlayerAlreadyExistsError, PlayerNotExistError
from src.pm_risk.rules.balance_check import check_balance, check_positive

logger = logging.getLogger(__name__)


class PlayerRegistry:
    def __init__(self) -> None:
        self._players: dict[PlayerId, Player] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, pid: object) -> bool:
        return pid in self._players

    def all(self) -> list[Player]:
        return list(self._players.values())

    def get(self, pid: PlayerId) -> Player | None:
        return self._players.get(tuple(pid))  # type: ignore[arg-type]

    def require(self, pid: PlayerId) -> Player:
        player = self.get(pid)
        if player is None:
            raise PlayerNotExistError(pid)
        return player

    def install(self, pid: PlayerId) -> Player:
        key: PlayerId = (pid[0], pid[1])
        if key in self._players:
            raise PlayerAlreadyExistsError(key)
        player = Player(pid=key)
        self._players[key] = player
        logger.info("Player installed: %d:%d", key[0], key[1])
        return player

    def deposit(self, target: PlayerId, amount: int) -> Player:
        """Credit a player (admin-initiated bridge deposit)."""
        check_positive(amount)
        player = self.require(target)
        player.balance += amount
        return player

    def withdraw(
        self,
        player: Player,
        amount: int,
        address_high: int,
        address_low: int,
        tick: int,
        queue: SettlementQueue,
    ) -> WithdrawInfo:
        """Debit the player and queue an L1 payout record."""
        check_positive(amount)
        check_balance(player, amount)
        info = WithdrawInfo(
            pid=player.pid,
            amount=amount,
            address_high=address_high,
            address_low=address_low,
            tick=tick,
        )
        player.balance -= amount
        queue.append(info)
        logger.info("Withdrawal queued: player=%s amount=%d", player.pid, amount)
        return info
