"""Shared test fixtures."""

import pytest

from src.pm_clearing.domain.fee import FeeConfig
from src.pm_gateway.commands import Deposit, InstallPlayer
from src.pm_gateway.dispatcher import CommandDispatcher
from src.pm_gateway.state import GenesisConfig

ADMIN = (1, 1)
ALICE = (2, 2)
BOB = (3, 3)


@pytest.fixture
def genesis_config() -> GenesisConfig:
    return GenesisConfig(
        admin_pid=ADMIN,
        market_title="Will the genesis market resolve YES?",
        market_description="test market",
        yes_liquidity=100_000,
        no_liquidity=100_000,
        market_duration=None,
    )


@pytest.fixture
def dispatcher(genesis_config: GenesisConfig) -> CommandDispatcher:
    """Fresh genesis state with 1% fee; market 1 is ACTIVE from tick 0."""
    return CommandDispatcher.genesis(genesis_config, FeeConfig(rate=100, basis_points=10_000))


@pytest.fixture
def funded(dispatcher: CommandDispatcher) -> CommandDispatcher:
    """Genesis state with ALICE and BOB installed and holding 200_000 each."""
    for pid in (ALICE, BOB):
        dispatcher.handle(pid, InstallPlayer())
        dispatcher.handle(ADMIN, Deposit(target=pid, amount=200_000))
    return dispatcher
