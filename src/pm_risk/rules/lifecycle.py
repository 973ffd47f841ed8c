"""Lifecycle gate: time-driven phase transitions and the checks built on them.

Both aggregates share one window shape:

    PENDING --(now >= start_time)--> ACTIVE --(now >= end_time)--> ENDED

Markets additionally leave any unresolved phase for RESOLVED by admin action.
advance() is pure and idempotent: evaluating it again after a threshold has
passed returns the same phase.
"""

from src.pm_common.enums import Phase
from src.pm_common.errors import (
    AlreadyResolvedError,
    MarketNotActiveError,
    ProjectNotActiveError,
    ProjectNotEndedError,
    ProjectNotPendingError,
)
from src.pm_ido.domain.models import Project
from src.pm_market.domain.models import Market

_TERMINAL = frozenset({Phase.ENDED, Phase.RESOLVED})


def advance(phase: Phase, now: int, start_time: int, end_time: int | None) -> Phase:
    """Return the phase at tick ``now``. Never moves backwards."""
    if phase in _TERMINAL:
        return phase
    if end_time is not None and now >= end_time:
        return Phase.ENDED
    if now >= start_time:
        return Phase.ACTIVE
    return phase


def sync_market(market: Market, now: int) -> bool:
    """Apply advance() to a market. Returns True if the phase changed."""
    new_phase = advance(market.status, now, market.start_time, market.end_time)
    if new_phase is market.status:
        return False
    market.status = new_phase
    return True


def sync_project(project: Project, now: int) -> bool:
    """Apply advance() to a project. Returns True if the phase changed."""
    new_phase = advance(project.status, now, project.start_time, project.end_time)
    if new_phase is project.status:
        return False
    project.status = new_phase
    return True


def market_phase_at(market: Market, now: int) -> Phase:
    return advance(market.status, now, market.start_time, market.end_time)


def project_phase_at(project: Project, now: int) -> Phase:
    return advance(project.status, now, project.start_time, project.end_time)


def check_market_open(market: Market, now: int) -> None:
    phase = Phase.RESOLVED if market.resolved else market_phase_at(market, now)
    if phase is not Phase.ACTIVE:
        raise MarketNotActiveError(market.id, phase.value)


def check_market_unresolved(market: Market) -> None:
    if market.resolved:
        raise AlreadyResolvedError(market.id)


def check_project_pending(project: Project, now: int) -> None:
    phase = project_phase_at(project, now)
    if phase is not Phase.PENDING:
        raise ProjectNotPendingError(project.id, phase.value)


def check_project_active(project: Project, now: int) -> None:
    phase = project_phase_at(project, now)
    if phase is not Phase.ACTIVE:
        raise ProjectNotActiveError(project.id, phase.value)


def check_project_ended(project: Project, now: int) -> None:
    phase = project_phase_at(project, now)
    if phase is not Phase.ENDED:
        raise ProjectNotEndedError(project.id, phase.value)
