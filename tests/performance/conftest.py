"""
Shared fixtures for performance benchmarks.

Key design principle: build the graphs once at module scope, then
benchmark only the hot paths.
"""

import pytest

from src.dijkstra.matrix import build_adjacency_matrix
from src.flight_router.adapters.algorithms.dijkstra_adapter import DijkstraRouteFinder
from src.flight_router.adapters.data_providers.static_provider import (
    StaticNetworkProvider,
)
from src.flight_router.adapters.repositories.flight_graph_repo import (
    FlightGraph,
    build_flight_graph,
)
from src.flight_router.data.random_network import random_airport_pairs, random_edges

LARGE_NODE_COUNT = 200


@pytest.fixture(scope="module")
def large_edges():
    """Seeded random network: 200 airports, ~10% of pairs connected."""
    return random_edges(LARGE_NODE_COUNT, density=0.1)


@pytest.fixture(scope="module")
def large_matrix(large_edges):
    return build_adjacency_matrix(large_edges, LARGE_NODE_COUNT)


@pytest.fixture(scope="module")
def large_graph(large_edges) -> FlightGraph:
    provider = StaticNetworkProvider.from_edges(
        random_airport_pairs(LARGE_NODE_COUNT), large_edges, name="Random 200"
    )
    return build_flight_graph(provider)


@pytest.fixture(scope="module")
def us_graph() -> FlightGraph:
    return build_flight_graph(StaticNetworkProvider.us_reference())


@pytest.fixture(scope="module")
def route_finder() -> DijkstraRouteFinder:
    return DijkstraRouteFinder()
