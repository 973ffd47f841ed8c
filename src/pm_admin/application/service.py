"""Admin application service: platform statistics and invariant sweep."""

from pydantic import BaseModel

from src.pm_gateway.state import GlobalState
from src.pm_ido.domain.ledger import allocation_for


class PlatformStats(BaseModel):
    tick: int
    txcounter: int
    player_count: int
    market_count: int
    total_volume: int
    total_bets: int
    total_fees_collected: int
    total_payouts: int
    project_count: int
    total_raised: int
    pending_settlements: int
    pending_settlement_amount: int


class InvariantReport(BaseModel):
    ok: bool
    violations: list[str]


class StatsService:
    def __init__(self, state: GlobalState) -> None:
        self._state = state

    def platform_stats(self) -> PlatformStats:
        s = self._state
        markets = s.markets.values()
        return PlatformStats(
            tick=s.counter,
            txcounter=s.txcounter,
            player_count=len(s.players),
            market_count=len(s.markets),
            total_volume=sum(m.total_volume for m in markets),
            total_bets=sum(m.bet_count for m in markets),
            total_fees_collected=sum(m.total_fees_collected for m in markets),
            total_payouts=sum(m.total_payouts for m in markets),
            project_count=len(s.projects),
            total_raised=sum(p.total_raised for p in s.projects.values()),
            pending_settlements=len(s.settlements),
            pending_settlement_amount=s.settlements.total_amount,
        )

    def verify_all_invariants(self) -> InvariantReport:
        """Sweep every market pool and IDO round for broken invariants."""
        violations: list[str] = []
        for market_id, m in sorted(self._state.markets.items()):
            if m.yes_liquidity <= 0 or m.no_liquidity <= 0:
                violations.append(
                    f"market {market_id}: reserves yes={m.yes_liquidity} no={m.no_liquidity}"
                )
            if m.resolved and m.outcome is None:
                violations.append(f"market {market_id}: resolved without outcome")

        for project_id, p in sorted(self._state.projects.items()):
            book = self._state.book(project_id)
            invested = sum(inv.invested_amount for inv in book.values())
            if invested != p.total_raised:
                violations.append(
                    f"project {project_id}: total_raised={p.total_raised} "
                    f"but investments sum to {invested}"
                )
            if len(book) != p.investor_count:
                violations.append(
                    f"project {project_id}: investor_count={p.investor_count} "
                    f"but book has {len(book)}"
                )
            if p.total_raised == 0:
                continue
            allocations = [allocation_for(p, inv) for inv in book.values()]
            tokens = sum(a.tokens for a in allocations)
            accepted = sum(a.accepted_amount for a in allocations)
            if tokens > p.token_supply:
                violations.append(
                    f"project {project_id}: {tokens} tokens allocated of {p.token_supply}"
                )
            if p.oversubscribed and accepted > p.target_amount:
                violations.append(
                    f"project {project_id}: accepted {accepted} exceeds target {p.target_amount}"
                )
        return InvariantReport(ok=not violations, violations=violations)
