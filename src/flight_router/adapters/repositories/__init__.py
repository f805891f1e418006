"""
Repository adapters for the flight graph.
"""

from src.flight_router.adapters.repositories.flight_graph_repo import (
    FlightGraph,
    FlightGraphRepository,
    build_flight_graph,
)

__all__ = [
    "FlightGraph",
    "FlightGraphRepository",
    "build_flight_graph",
]
