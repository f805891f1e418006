"""
Route Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from src.flight_router.adapters.repositories.flight_graph_repo import (
        FlightGraph,
    )
    from src.flight_router.schemas.route import SearchResult


class RouteFinder(ABC):
    """
    Abstract interface for cheapest-route algorithms.

    Algorithm adapters receive the full FlightGraph and node indices.
    Airport-code resolution is the caller's job.

    Implementations:
    - DijkstraRouteFinder: Lazy-deletion Dijkstra over the adjacency matrix
    """

    @abstractmethod
    def find_route(
        self,
        graph: FlightGraph,
        origin: int,
        destination: int,
    ) -> SearchResult:
        """
        Find the cheapest route between two airports.

        Args:
            graph: Pre-built FlightGraph.
            origin: Origin node index.
            destination: Destination node index.

        Returns:
            RouteResult, or NoRoute if destination is unreachable.
        """
        ...

    @abstractmethod
    def find_all_routes(
        self,
        graph: FlightGraph,
        origin: int,
    ) -> Dict[int, SearchResult]:
        """
        Find the cheapest route from origin to every other airport.

        Returns:
            Dict mapping destination node index to its SearchResult.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
