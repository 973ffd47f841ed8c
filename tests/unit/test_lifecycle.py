import pytest

from src.pm_common.enums import Phase
from src.pm_common.errors import AlreadyResolvedError, MarketNotActiveError
from src.pm_ido.domain.allocation import allocate
from src.pm_ido.domain.models import Project
from src.pm_market.domain.models import Market
from src.pm_risk.rules.lifecycle import (
    advance,
    check_market_open,
    check_market_unresolved,
    market_phase_at,
    sync_market,
    sync_project,
)

T, W = 5, 10


def _project() -> Project:
    return Project(
        id=1,
        name="P",
        token_name="P Token",
        token_symbol="P",
        target_amount=100,
        token_supply=1_000,
        max_individual_cap=100,
        start_time=T,
        end_time=T + W,
        admin_pid=(1, 1),
        created_time=0,
    )


class TestAdvance:
    def test_before_start_stays_pending(self) -> None:
        assert advance(Phase.PENDING, T - 1, T, T + W) is Phase.PENDING

    def test_window_is_active(self) -> None:
        assert advance(Phase.PENDING, T, T, T + W) is Phase.ACTIVE
        assert advance(Phase.ACTIVE, T + W - 1, T, T + W) is Phase.ACTIVE

    def test_end_is_exclusive(self) -> None:
        assert advance(Phase.ACTIVE, T + W, T, T + W) is Phase.ENDED

    def test_pending_can_jump_straight_to_ended(self) -> None:
        assert advance(Phase.PENDING, T + W + 3, T, T + W) is Phase.ENDED

    def test_terminal_phases_never_move(self) -> None:
        assert advance(Phase.ENDED, 0, T, T + W) is Phase.ENDED
        assert advance(Phase.RESOLVED, T, T, T + W) is Phase.RESOLVED

    def test_open_ended_window(self) -> None:
        assert advance(Phase.ACTIVE, 10**9, 0, None) is Phase.ACTIVE

    def test_idempotent(self) -> None:
        once = advance(Phase.PENDING, T + 1, T, T + W)
        assert advance(once, T + 1, T, T + W) is once


class TestProjectScenario:
    def test_ticks_drive_phases_and_freeze_total(self) -> None:
        project = _project()
        seen = []
        for now in range(0, T + W + 3):
            sync_project(project, now)
            seen.append(project.status)
            if project.status is Phase.ACTIVE:
                project.total_raised += 20
        assert seen[:T] == [Phase.PENDING] * T
        assert seen[T : T + W] == [Phase.ACTIVE] * W
        assert seen[T + W :] == [Phase.ENDED] * 3

        frozen = project.total_raised
        first = allocate(20, frozen, project.target_amount, project.token_supply)
        sync_project(project, T + W + 100)
        assert project.total_raised == frozen
        assert allocate(20, project.total_raised, 100, 1_000) == first

    def test_sync_reports_changes(self) -> None:
        project = _project()
        assert sync_project(project, T - 1) is False
        assert sync_project(project, T) is True
        assert sync_project(project, T + 1) is False


class TestMarketChecks:
    def _market(self, end_time: int | None = None) -> Market:
        return Market(
            id=7,
            title="M",
            description="",
            yes_liquidity=10,
            no_liquidity=10,
            start_time=0,
            end_time=end_time,
            created_time=0,
            status=Phase.ACTIVE,
        )

    def test_open_market_passes(self) -> None:
        check_market_open(self._market(), now=3)

    def test_expired_market_is_not_open(self) -> None:
        with pytest.raises(MarketNotActiveError) as exc_info:
            check_market_open(self._market(end_time=3), now=3)
        assert "ENDED" in exc_info.value.message

    def test_resolved_market_is_not_open(self) -> None:
        market = self._market()
        market.resolved = True
        with pytest.raises(MarketNotActiveError) as exc_info:
            check_market_open(market, now=0)
        assert "RESOLVED" in exc_info.value.message

    def test_unresolved_check(self) -> None:
        market = self._market()
        check_market_unresolved(market)
        market.resolved = True
        with pytest.raises(AlreadyResolvedError):
            check_market_unresolved(market)

    def test_phase_at_does_not_mutate(self) -> None:
        market = self._market(end_time=3)
        assert market_phase_at(market, 5) is Phase.ENDED
        assert market.status is Phase.ACTIVE
        assert sync_market(market, 5) is True
        assert market.status is Phase.ENDED
