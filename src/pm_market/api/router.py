"""pm_market query endpoints.

GET /data/markets                                   - all markets, by id
GET /data/markets/{market_id}                       - full detail with prices
GET /data/markets/{market_id}/quote/buy             - shares for an amount
GET /data/markets/{market_id}/quote/sell            - payout for shares
GET /data/markets/{market_id}/positions/{hi}/{lo}   - one player's position
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.pm_common.enums import Side
from src.pm_common.response import ApiResponse, success_response
from src.pm_gateway.dependencies import get_dispatcher
from src.pm_gateway.dispatcher import CommandDispatcher
from src.pm_market.application.schemas import (
    BuyQuoteResponse,
    MarketDetail,
    MarketListResponse,
    PositionResponse,
    SellQuoteResponse,
)
from src.pm_market.application.service import MarketQueryService

router = APIRouter(prefix="/markets", tags=["markets"])


def get_market_service(
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> MarketQueryService:
    return MarketQueryService(dispatcher.state, dispatcher.pricing)


@router.get("")
async def list_markets(
    request: Request,
    service: Annotated[MarketQueryService, Depends(get_market_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[MarketListResponse]:
    resp = success_response(service.list_markets(), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{market_id}")
async def get_market(
    market_id: int,
    request: Request,
    service: Annotated[MarketQueryService, Depends(get_market_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[MarketDetail]:
    resp = success_response(service.get_market(market_id), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{market_id}/quote/buy")
async def quote_buy(
    market_id: int,
    request: Request,
    service: Annotated[MarketQueryService, Depends(get_market_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
    side: Side = Query(...),
    amount: int = Query(..., ge=0),
) -> ApiResponse[BuyQuoteResponse]:
    resp = success_response(service.quote_buy(market_id, side, amount), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{market_id}/quote/sell")
async def quote_sell(
    market_id: int,
    request: Request,
    service: Annotated[MarketQueryService, Depends(get_market_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
    side: Side = Query(...),
    shares: int = Query(..., ge=0),
) -> ApiResponse[SellQuoteResponse]:
    resp = success_response(service.quote_sell(market_id, side, shares), tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{market_id}/positions/{pid_high}/{pid_low}")
async def get_position(
    market_id: int,
    pid_high: int,
    pid_low: int,
    request: Request,
    service: Annotated[MarketQueryService, Depends(get_market_service)],
    dispatcher: Annotated[CommandDispatcher, Depends(get_dispatcher)],
) -> ApiResponse[PositionResponse]:
    data = service.get_position((pid_high, pid_low), market_id)
    resp = success_response(data, tick=dispatcher.now)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
