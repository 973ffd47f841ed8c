"""FastAPI dependencies for the read-side query adapter.

Usage in any router:
    from src.pm_gateway.dependencies import get_dispatcher

    @router.get("/thing")
    async def thing(dispatcher: CommandDispatcher = Depends(get_dispatcher)):
        ...

The dispatcher is attached to app.state by create_app(); routers only read
from it.
"""

from fastapi import Request

from src.pm_common.errors import InternalError
from src.pm_gateway.dispatcher import CommandDispatcher


def get_dispatcher(request: Request) -> CommandDispatcher:
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise InternalError("dispatcher is not configured")
    return dispatcher
