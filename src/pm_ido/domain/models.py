"""Domain models for pm_ido: pure dataclasses, no business logic.

Allocations and refunds are deliberately absent from Investment: they are
derived from (invested_amount, total_raised, target_amount, token_supply) at
read time by the allocation engine.
"""

from dataclasses import dataclass

from src.pm_common.enums import Phase

PlayerId = tuple[int, int]


@dataclass(frozen=True)
class ProjectParams:
    name: str
    token_name: str
    token_symbol: str
    target_amount: int
    token_supply: int
    max_individual_cap: int
    start_time: int
    end_time: int


@dataclass
class Project:
    id: int
    name: str
    token_name: str
    token_symbol: str
    target_amount: int
    token_supply: int
    max_individual_cap: int
    start_time: int
    end_time: int
    admin_pid: PlayerId
    created_time: int
    status: Phase = Phase.PENDING
    total_raised: int = 0
    investor_count: int = 0

    @property
    def oversubscribed(self) -> bool:
        return self.total_raised > self.target_amount

    def params(self) -> ProjectParams:
        return ProjectParams(
            name=self.name,
            token_name=self.token_name,
            token_symbol=self.token_symbol,
            target_amount=self.target_amount,
            token_supply=self.token_supply,
            max_individual_cap=self.max_individual_cap,
            start_time=self.start_time,
            end_time=self.end_time,
        )


@dataclass
class Investment:
    pid: PlayerId
    project_id: int
    invested_amount: int
    investment_time: int
    tokens_withdrawn: bool = False
    refund_withdrawn: bool = False
