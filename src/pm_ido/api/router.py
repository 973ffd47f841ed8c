"""pm_ido query endpoints.

GET /data/projects                                        - all projects
GET /data/projects/{project_id}                           - project detail
GET /data/projects/{project_id}/stats                     - round statistics
GET /data/projects/{project_id}/investments/{hi}/{lo}     - derived allocation
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.pm_common.response import ApiResponse, success_response
from src.pm_gateway.dependencies import get_dispatcher
from src.pm_gateway.dispatcher import CommandDispatcher
from src.pm_ido.application.schemas import (
    InvestmentResponse,
    ProjectDetail,
    ProjectListResponse,
    ProjectStatsResponse,
)
from src.pm_ido.application.service import IdoQueryService

router = APIRouter(prefix="/projects", tags=["ido"])


def get_ido_service(
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> IdoQueryService:
    return IdoQueryService(dispatcher.state)


@router.get("")
async def list_projects(
    request: Request,
    service: Annotated[IdoQueryService, Depends(get_ido_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
    status: str | None = Query(None, description="PENDING, ACTIVE or ENDED. Default: all."),
) -> ApiResponse[ProjectListResponse]:
    resp = success_response(service.list_projects(status), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{project_id}")
async def get_project(
    project_id: int,
    request: Request,
    service: Annotated[IdoQueryService, Depends(get_ido_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[ProjectDetail]:
    resp = success_response(service.get_project(project_id), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{project_id}/stats")
async def get_project_stats(
    project_id: int,
    request: Request,
    service: Annotated[IdoQueryService, Depends(get_ido_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[ProjectStatsResponse]:
    resp = success_response(service.project_stats(project_id), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{project_id}/investments/{pid_high}/{pid_low}")
async def get_investment(
    project_id: int,
    pid_high: int,
    pid_low: int,
    request: Request,
    service: Annotated[IdoQueryService, Depends(get_ido_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[InvestmentResponse]:
    data = service.get_investment(project_id, (pid_high, pid_low))
    resp = success_response(data, tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
