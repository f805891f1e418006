"""
Port interfaces for the Flight Router.

Ports define the abstract interfaces that the domain layer uses to
communicate with data sources and algorithms. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.flight_router.ports.flight_data_provider import FlightNetworkProvider
from src.flight_router.ports.graph_repository import GraphNotInitializedError
from src.flight_router.ports.route_finder import RouteFinder

__all__ = [
    "FlightNetworkProvider",
    "GraphNotInitializedError",
    "RouteFinder",
]
