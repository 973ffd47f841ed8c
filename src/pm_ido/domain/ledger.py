"""ProjectLedger: IDO project creation, investment and token withdrawal.

Investments for one project are kept in a dict keyed by player id (the
"book"). Operations validate first and commit afterwards, so a raised AppError
never leaves a half-applied investment behind.
"""

import logging
from dataclasses import dataclass

from src.pm_account.domain.models import Player
from src.pm_common.enums import Phase
from src.pm_common.errors import (
    AlreadyWithdrawnError,
    InvalidProjectParamsError,
    NoInvestmentError,
)
from src.pm_ido.domain.allocation import Allocation, allocate
from src.pm_ido.domain.models import Investment, PlayerId, Project, ProjectParams
from src.pm_risk.rules.balance_check import check_balance, check_positive
from src.pm_risk.rules.investment_cap import check_investment_cap
from src.pm_risk.rules.lifecycle import (
    advance,
    check_project_active,
    check_project_ended,
    check_project_pending,
    sync_project,
)

logger = logging.getLogger(__name__)

InvestmentBook = dict[PlayerId, Investment]


@dataclass(frozen=True)
class InvestResult:
    project_id: int
    amount: int
    invested_total: int
    total_raised: int
    first_investment: bool


@dataclass(frozen=True)
class TokenWithdrawal:
    project_id: int
    tokens: int
    refund: int


def validate_params(params: ProjectParams) -> None:
    if not params.name:
        raise InvalidProjectParamsError("name must not be empty")
    if not params.token_symbol:
        raise InvalidProjectParamsError("token symbol must not be empty")
    if params.target_amount <= 0:
        raise InvalidProjectParamsError(f"target_amount must be positive, got {params.target_amount}")
    if params.token_supply <= 0:
        raise InvalidProjectParamsError(f"token_supply must be positive, got {params.token_supply}")
    if params.max_individual_cap <= 0:
        raise InvalidProjectParamsError(
            f"max_individual_cap must be positive, got {params.max_individual_cap}"
        )
    if params.start_time < 0 or params.start_time >= params.end_time:
        raise InvalidProjectParamsError(
            f"start_time {params.start_time} must be before end_time {params.end_time}"
        )


def allocation_for(project: Project, investment: Investment) -> Allocation:
    """Derived allocation for one investor at the project's current total."""
    return allocate(
        investment.invested_amount,
        project.total_raised,
        project.target_amount,
        project.token_supply,
    )


class ProjectLedger:
    def create_project(
        self, project_id: int, params: ProjectParams, admin_pid: PlayerId, now: int
    ) -> Project:
        validate_params(params)
        project = Project(
            id=project_id,
            name=params.name,
            token_name=params.token_name,
            token_symbol=params.token_symbol,
            target_amount=params.target_amount,
            token_supply=params.token_supply,
            max_individual_cap=params.max_individual_cap,
            start_time=params.start_time,
            end_time=params.end_time,
            admin_pid=admin_pid,
            created_time=now,
        )
        project.status = advance(project.status, now, params.start_time, params.end_time)
        logger.info(
            "Project created: id=%d %s (%s) target=%d supply=%d window=[%d, %d)",
            project_id, params.name, params.token_symbol, params.target_amount,
            params.token_supply, params.start_time, params.end_time,
        )
        return project

    def update_project(self, project: Project, params: ProjectParams, now: int) -> Project:
        """Replace editable parameters. Only allowed before the round opens."""
        check_project_pending(project, now)
        validate_params(params)
        project.name = params.name
        project.token_name = params.token_name
        project.token_symbol = params.token_symbol
        project.target_amount = params.target_amount
        project.token_supply = params.token_supply
        project.max_individual_cap = params.max_individual_cap
        project.start_time = params.start_time
        project.end_time = params.end_time
        project.status = advance(Phase.PENDING, now, params.start_time, params.end_time)
        logger.info("Project updated: id=%d status=%s", project.id, project.status.value)
        return project

    def invest(
        self,
        project: Project,
        book: InvestmentBook,
        player: Player,
        amount: int,
        now: int,
    ) -> InvestResult:
        check_project_active(project, now)
        check_positive(amount)
        existing = book.get(player.pid)
        already = existing.invested_amount if existing is not None else 0
        check_investment_cap(already, amount, project.max_individual_cap)
        check_balance(player, amount)

        # commit
        sync_project(project, now)
        if existing is None:
            book[player.pid] = Investment(
                pid=player.pid,
                project_id=project.id,
                invested_amount=amount,
                investment_time=now,
            )
            project.investor_count += 1
        else:
            existing.invested_amount += amount
        player.balance -= amount
        project.total_raised += amount
        return InvestResult(
            project_id=project.id,
            amount=amount,
            invested_total=already + amount,
            total_raised=project.total_raised,
            first_investment=existing is None,
        )

    def withdraw_tokens(
        self, project: Project, book: InvestmentBook, player: Player, now: int
    ) -> TokenWithdrawal:
        """Pay tokens and any over-subscription refund together, once."""
        check_project_ended(project, now)
        investment = book.get(player.pid)
        if investment is None:
            raise NoInvestmentError(project.id)
        if investment.tokens_withdrawn:
            raise AlreadyWithdrawnError(project.id)
        allocation = allocation_for(project, investment)

        # commit
        sync_project(project, now)
        player.token_balances[project.id] = player.token_balance(project.id) + allocation.tokens
        player.balance += allocation.refund
        investment.tokens_withdrawn = True
        investment.refund_withdrawn = True
        logger.info(
            "Tokens withdrawn: project=%d player=%s tokens=%d refund=%d",
            project.id, player.pid, allocation.tokens, allocation.refund,
        )
        return TokenWithdrawal(
            project_id=project.id, tokens=allocation.tokens, refund=allocation.refund
        )
