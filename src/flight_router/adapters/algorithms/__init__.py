"""
Algorithm adapters for flight routing.
"""

from src.flight_router.adapters.algorithms.dijkstra_adapter import (
    DijkstraRouteFinder,
)
from src.flight_router.adapters.algorithms.immutability import (
    is_immutable,
    make_defensive_copy,
    make_immutable,
)

__all__ = [
    "DijkstraRouteFinder",
    "is_immutable",
    "make_defensive_copy",
    "make_immutable",
]
