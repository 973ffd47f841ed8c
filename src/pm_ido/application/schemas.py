"""Pydantic schemas for pm_ido query responses.

Token and refund figures on InvestmentResponse are derived on every request.
While a project is ACTIVE they are projections at the current total; once it
has ENDED they are final and equal to what withdraw_tokens pays.
"""

from pydantic import BaseModel

from src.pm_ido.domain.allocation import Allocation
from src.pm_ido.domain.models import Investment, Project


class ProjectDetail(BaseModel):
    id: int
    name: str
    token_name: str
    token_symbol: str
    target_amount: int
    token_supply: int
    max_individual_cap: int
    start_time: int
    end_time: int
    created_time: int
    status: str
    total_raised: int
    investor_count: int
    oversubscribed: bool
    admin_pid: list[int]

    @classmethod
    def from_domain(cls, p: Project, status: str) -> "ProjectDetail":
        return cls(
            id=p.id,
            name=p.name,
            token_name=p.token_name,
            token_symbol=p.token_symbol,
            target_amount=p.target_amount,
            token_supply=p.token_supply,
            max_individual_cap=p.max_individual_cap,
            start_time=p.start_time,
            end_time=p.end_time,
            created_time=p.created_time,
            status=status,
            total_raised=p.total_raised,
            investor_count=p.investor_count,
            oversubscribed=p.oversubscribed,
            admin_pid=[p.admin_pid[0], p.admin_pid[1]],
        )


class ProjectListResponse(BaseModel):
    items: list[ProjectDetail]
    total: int


class InvestmentResponse(BaseModel):
    project_id: int
    pid: list[int]
    invested_amount: int
    investment_time: int
    tokens: int
    refund: int
    accepted_amount: int
    final: bool
    tokens_withdrawn: bool
    refund_withdrawn: bool

    @classmethod
    def from_domain(
        cls, inv: Investment, allocation: Allocation, final: bool
    ) -> "InvestmentResponse":
        return cls(
            project_id=inv.project_id,
            pid=[inv.pid[0], inv.pid[1]],
            invested_amount=inv.invested_amount,
            investment_time=inv.investment_time,
            tokens=allocation.tokens,
            refund=allocation.refund,
            accepted_amount=allocation.accepted_amount,
            final=final,
            tokens_withdrawn=inv.tokens_withdrawn,
            refund_withdrawn=inv.refund_withdrawn,
        )


class ProjectStatsResponse(BaseModel):
    project_id: int
    status: str
    total_raised: int
    target_amount: int
    investor_count: int
    subscription_ratio: int           # total_raised / target, PRICE_SCALE fixed point
    tokens_allocated: int
    refunds_total: int
    token_dust: int                   # token_supply share kept by floor rounding
    tokens_withdrawn_count: int
