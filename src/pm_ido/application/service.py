"""IdoQueryService: read-only project, investment and round statistics.

Allocations are recomputed from the stored investment totals on each call;
repeated queries return identical figures and never touch state.
"""

from src.pm_common.enums import Phase
from src.pm_common.errors import NoInvestmentError
from src.pm_common.units import scaled_ratio
from src.pm_gateway.state import GlobalState
from src.pm_ido.application.schemas import (
    InvestmentResponse,
    ProjectDetail,
    ProjectListResponse,
    ProjectStatsResponse,
)
from src.pm_ido.domain.ledger import allocation_for
from src.pm_ido.domain.models import Project
from src.pm_risk.rules.lifecycle import project_phase_at


class IdoQueryService:
    def __init__(self, state: GlobalState) -> None:
        self._state = state

    def _phase(self, project: Project) -> Phase:
        return project_phase_at(project, self._state.counter)

    def list_projects(self, status: str | None = None) -> ProjectListResponse:
        items = [
            ProjectDetail.from_domain(p, self._phase(p).value)
            for _, p in sorted(self._state.projects.items())
        ]
        if status is not None:
            items = [item for item in items if item.status == status.upper()]
        return ProjectListResponse(items=items, total=len(items))

    def get_project(self, project_id: int) -> ProjectDetail:
        project = self._state.require_project(project_id)
        return ProjectDetail.from_domain(project, self._phase(project).value)

    def get_investment(self, project_id: int, pid: tuple[int, int]) -> InvestmentResponse:
        project = self._state.require_project(project_id)
        investment = self._state.book(project_id).get((pid[0], pid[1]))
        if investment is None:
            raise NoInvestmentError(project_id)
        return InvestmentResponse.from_domain(
            investment,
            allocation_for(project, investment),
            final=self._phase(project) is Phase.ENDED,
        )

    def project_stats(self, project_id: int) -> ProjectStatsResponse:
        project = self._state.require_project(project_id)
        book = self._state.book(project_id)
        tokens_allocated = 0
        refunds_total = 0
        withdrawn = 0
        for investment in book.values():
            allocation = allocation_for(project, investment)
            tokens_allocated += allocation.tokens
            refunds_total += allocation.refund
            withdrawn += int(investment.tokens_withdrawn)
        # Dust is only meaningful once the round filled its target
        if project.total_raised >= project.target_amount:
            distributable = project.token_supply
        else:
            distributable = tokens_allocated
        return ProjectStatsResponse(
            project_id=project.id,
            status=self._phase(project).value,
            total_raised=project.total_raised,
            target_amount=project.target_amount,
            investor_count=project.investor_count,
            subscription_ratio=scaled_ratio(project.total_raised, project.target_amount),
            tokens_allocated=tokens_allocated,
            refunds_total=refunds_total,
            token_dust=distributable - tokens_allocated,
            tokens_withdrawn_count=withdrawn,
        )
