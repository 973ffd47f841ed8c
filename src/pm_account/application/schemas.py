"""Pydantic schemas for pm_account query responses."""

from pydantic import BaseModel

from src.pm_account.domain.models import Player, WithdrawInfo
from src.pm_common.units import units_to_display
from src.pm_market.application.schemas import PositionResponse


class TokenBalanceItem(BaseModel):
    project_id: int
    tokens: int


class PlayerResponse(BaseModel):
    pid: list[int]
    balance: int
    balance_display: str
    positions: list[PositionResponse]
    token_balances: list[TokenBalanceItem]

    @classmethod
    def from_domain(cls, p: Player) -> "PlayerResponse":
        return cls(
            pid=[p.pid[0], p.pid[1]],
            balance=p.balance,
            balance_display=units_to_display(p.balance),
            positions=[
                PositionResponse.from_domain(pos) for _, pos in sorted(p.positions.items())
            ],
            token_balances=[
                TokenBalanceItem(project_id=pid, tokens=amount)
                for pid, amount in sorted(p.token_balances.items())
            ],
        )


class WithdrawalItem(BaseModel):
    pid: list[int]
    amount: int
    address_high: int
    address_low: int
    tick: int

    @classmethod
    def from_domain(cls, w: WithdrawInfo) -> "WithdrawalItem":
        return cls(
            pid=[w.pid[0], w.pid[1]],
            amount=w.amount,
            address_high=w.address_high,
            address_low=w.address_low,
            tick=w.tick,
        )


class SettlementResponse(BaseModel):
    items: list[WithdrawalItem]
    total_amount: int
