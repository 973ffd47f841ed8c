"""Integration-test fixtures.

Each test gets its own dispatcher and app, so nothing leaks between tests.
The seeded state has one trade on the genesis market and an over-subscribed
IDO round that is still ACTIVE.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import create_app
from src.pm_common.enums import Side
from src.pm_gateway.commands import Bet, CreateIdoProject, Invest
from src.pm_gateway.dispatcher import CommandDispatcher
from tests.conftest import ADMIN, ALICE, BOB


@pytest.fixture
def seeded(funded: CommandDispatcher) -> CommandDispatcher:
    funded.handle(ALICE, Bet(side=Side.YES, amount=1000))
    project = funded.handle(
        ADMIN,
        CreateIdoProject(
            name="Launch",
            token_name="Launch Token",
            token_symbol="LCH",
            target_amount=100_000,
            token_supply=1_000_000,
            max_individual_cap=100_000,
            duration=5,
        ),
    )
    funded.handle(ALICE, Invest(project_id=project.id, amount=100_000))
    funded.handle(BOB, Invest(project_id=project.id, amount=50_000))
    return funded


@pytest_asyncio.fixture
async def client(seeded: CommandDispatcher) -> AsyncClient:
    """Async HTTP client over an app wrapping the seeded dispatcher."""
    transport = ASGITransport(app=create_app(seeded))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
