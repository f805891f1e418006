"""
Fixtures for FastAPI endpoint tests.

Provides small routers to patch into the API module.
"""

import pytest

from src.flight_router.adapters.data_providers.static_provider import (
    StaticNetworkProvider,
)
from src.flight_router.application import FindCheapestFlight


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def us_router() -> FindCheapestFlight:
    """Router over the bundled US network."""
    return FindCheapestFlight()


@pytest.fixture
def island_router() -> FindCheapestFlight:
    """Router where CCC has no inbound flights."""
    provider = StaticNetworkProvider.from_edges(
        [("AAA", "Alpha"), ("BBB", "Bravo"), ("CCC", "Charlie")],
        [(0, 1, 10), (1, 0, 20), (2, 0, 5)],
        name="Islands",
    )
    return FindCheapestFlight(data_provider=provider)
