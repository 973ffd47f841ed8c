"""FastAPI application entry point for the read-side query adapter.

Run with: uvicorn src.main:app --port 8000

The app wraps one CommandDispatcher. Commands are applied by the host that
owns the dispatcher; every route here is a read-only projection of its state.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.pm_account.api.router import router as account_router
from src.pm_admin.api.router import router as admin_router
from src.pm_common.errors import AppError
from src.pm_common.response import error_response
from src.pm_gateway.dispatcher import CommandDispatcher
from src.pm_gateway.middleware.request_log import RequestLogMiddleware
from src.pm_ido.api.router import router as ido_router
from src.pm_market.api.router import router as market_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app(dispatcher: CommandDispatcher | None = None) -> FastAPI:
    """Build the query app around ``dispatcher`` (a fresh genesis state if None)."""
    app = FastAPI(title=settings.APP_NAME, version="0.1.0", debug=settings.DEBUG)
    app.state.dispatcher = (
        dispatcher if dispatcher is not None else CommandDispatcher.from_settings(settings)
    )

    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        resp = error_response(exc.code, exc.message)
        resp.tick = app.state.dispatcher.now
        resp.request_id = getattr(request.state, "request_id", resp.request_id)
        return JSONResponse(
            status_code=exc.http_status,
            content=resp.model_dump(),
        )

    app.include_router(market_router, prefix="/data")
    app.include_router(account_router, prefix="/data")
    app.include_router(ido_router, prefix="/data")
    app.include_router(admin_router, prefix="/data")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": "0.1.0"}

    return app


app = create_app()
