"""AccountQueryService: read-only player and settlement projections."""

from src.pm_account.application.schemas import (
    PlayerResponse,
    SettlementResponse,
    WithdrawalItem,
)
from src.pm_gateway.state import GlobalState


class AccountQueryService:
    def __init__(self, state: GlobalState) -> None:
        self._state = state

    def get_player(self, pid: tuple[int, int]) -> PlayerResponse:
        return PlayerResponse.from_domain(self._state.players.require(pid))

    def pending_settlements(self) -> SettlementResponse:
        queue = self._state.settlements
        return SettlementResponse(
            items=[WithdrawalItem.from_domain(w) for w in queue.pending()],
            total_amount=queue.total_amount,
        )
