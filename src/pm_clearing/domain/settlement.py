"""Settlement queue: withdrawals waiting to be paid out on L1.

The queue belongs to the global state (no module-level buffer) and is drained
by the host once per batch via flush().
"""

import logging

from src.pm_account.domain.models import WithdrawInfo

logger = logging.getLogger(__name__)


class SettlementQueue:
    def __init__(self) -> None:
        self._pending: list[WithdrawInfo] = []

    def append(self, info: WithdrawInfo) -> None:
        self._pending.append(info)

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def total_amount(self) -> int:
        return sum(info.amount for info in self._pending)

    def pending(self) -> list[WithdrawInfo]:
        return list(self._pending)

    def flush(self) -> list[WithdrawInfo]:
        """Return all queued withdrawals in submission order and empty the queue."""
        drained, self._pending = self._pending, []
        logger.info(
            "Flushed settlement: %d withdrawals, total=%d",
            len(drained),
            sum(info.amount for info in drained),
        )
        return drained
