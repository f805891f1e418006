"""Shared fixtures: the reference US network and small hand-made graphs."""

import pytest

from src.dijkstra.matrix import build_adjacency_matrix
from src.flight_router.data.us_network import FLIGHTS, us_airports

# Node indices of the reference network
SFO, SEA, LAX, DEN, ORD, DFW, IAH, ATL, MIA, JFK, BOS = range(11)


@pytest.fixture(scope="session")
def us_matrix():
    """Read-only adjacency matrix of the 11-airport reference network."""
    return build_adjacency_matrix(FLIGHTS, 11)


@pytest.fixture(scope="session")
def us_airport_table():
    """Airport table of the reference network."""
    return us_airports()


@pytest.fixture
def disconnected_matrix():
    """
    Two islands: 0 <-> 1 and 2 -> 3.

    Node 4 has no edges at all.
    """
    return build_adjacency_matrix(
        [(0, 1, 5), (1, 0, 7), (2, 3, 1)],
        5,
    )
