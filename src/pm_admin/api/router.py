"""Admin query endpoints: platform statistics and invariant sweep."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.pm_admin.application.service import InvariantReport, PlatformStats, StatsService
from src.pm_common.response import ApiResponse, success_response
from src.pm_gateway.dependencies import get_dispatcher
from src.pm_gateway.dispatcher import CommandDispatcher

router = APIRouter(tags=["admin"])


def get_stats_service(
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> StatsService:
    return StatsService(dispatcher.state)


@router.get("/stats")
async def get_stats(
    request: Request,
    service: Annotated[StatsService, Depends(get_stats_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[PlatformStats]:
    resp = success_response(service.platform_stats(), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/invariants")
async def verify_invariants(
    request: Request,
    service: Annotated[StatsService, Depends(get_stats_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[InvariantReport]:
    resp = success_response(service.verify_all_invariants(), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
