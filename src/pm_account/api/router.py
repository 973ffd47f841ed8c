"""pm_account query endpoints: player snapshots and the settlement queue."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.pm_account.application.schemas import PlayerResponse, SettlementResponse
from src.pm_account.application.service import AccountQueryService
from src.pm_common.response import ApiResponse, success_response
from src.pm_gateway.dependencies import get_dispatcher
from src.pm_gateway.dispatcher import CommandDispatcher

router = APIRouter(tags=["account"])


def get_account_service(
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> AccountQueryService:
    return AccountQueryService(dispatcher.state)


@router.get("/players/{pid_high}/{pid_low}")
async def get_player(
    pid_high: int,
    pid_low: int,
    request: Request,
    service: Annotated[AccountQueryService, Depends(get_account_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[PlayerResponse]:
    resp = success_response(service.get_player((pid_high, pid_low)), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/settlements")
async def get_settlements(
    request: Request,
    service: Annotated[AccountQueryService, Depends(get_account_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[SettlementResponse]:
    resp = success_response(service.pending_settlements(), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
