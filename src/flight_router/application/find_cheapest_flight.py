"""
FindCheapestFlight Use Case - Public API for cheapest-flight search.

This module provides the main entry point for the routing engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from src.dijkstra.reconstruction import format_route
from src.flight_router.adapters.algorithms.dijkstra_adapter import DijkstraRouteFinder
from src.flight_router.adapters.data_providers.static_provider import (
    StaticNetworkProvider,
)
from src.flight_router.adapters.repositories.flight_graph_repo import (
    FlightGraphRepository,
)
from src.flight_router.ports.flight_data_provider import FlightNetworkProvider
from src.flight_router.ports.route_finder import RouteFinder
from src.flight_router.schemas.airports import AirportTable
from src.flight_router.schemas.route import RouteResult, SearchResult
from src.flight_router.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)


class FindCheapestFlight:
    """
    Public API for finding the cheapest flight route.

    Handles dependency initialization with sensible defaults (the bundled
    US reference network and the Dijkstra adapter) and provides a simple
    interface for searches.

    Example usage:
        >>> router = FindCheapestFlight()
        >>> result = router.search("SFO", "IAH")
        >>> print(router.describe(result))
        The cheapest flight cost from SFO to IAH: 540
        The route: SFO -> DEN -> IAH

    Attributes:
        _service: Underlying RouteFinderService.
        _graph_repo: Flight graph repository.
    """

    def __init__(
        self,
        data_provider: Optional[FlightNetworkProvider] = None,
        route_finder: Optional[RouteFinder] = None,
        allow_same_airport: bool = False,
    ) -> None:
        """
        Initialize the router with optional custom dependencies.

        Args:
            data_provider: Network source. If None, uses the US reference network.
            route_finder: Custom algorithm. If None, uses DijkstraRouteFinder.
            allow_same_airport: Accept searches where origin == destination.
        """
        self._data_provider = data_provider or StaticNetworkProvider.us_reference()
        self._graph_repo = FlightGraphRepository(self._data_provider)
        self._route_finder = route_finder or DijkstraRouteFinder()
        self._allow_same_airport = allow_same_airport

        self._service = RouteFinderService(
            graph_repo=self._graph_repo,
            route_finder=self._route_finder,
        )

        logger.info(
            "FindCheapestFlight initialized with %s algorithm on %s",
            self._route_finder.name,
            self._data_provider.name,
        )

    def search(self, origin: str, destination: str) -> SearchResult:
        """
        Search for the cheapest route between two airports.

        Args:
            origin: Origin airport IATA code (e.g., 'SFO').
            destination: Destination airport IATA code (e.g., 'IAH').

        Returns:
            RouteResult with cost and route, or NoRoute.
        """
        return self._service.find_cheapest_route(
            origin,
            destination,
            allow_same_airport=self._allow_same_airport,
        )

    def search_all(self, origin: str) -> Dict[str, SearchResult]:
        """Cheapest route from origin to every other airport."""
        return self._service.cheapest_from(origin)

    @property
    def airports(self) -> AirportTable:
        """Airport table of the loaded network."""
        return self._graph_repo.get_graph().airports

    def legend(self) -> str:
        """Numbered airport code list."""
        return self.airports.legend()

    def has_route(self, origin: str, destination: str) -> bool:
        """
        Check if a direct flight exists between two airports.

        Returns:
            True if a direct flight exists, False otherwise.
        """
        graph = self._graph_repo.get_graph()
        return graph.has_route(
            graph.airports.index(origin), graph.airports.index(destination)
        )

    def describe(self, result: SearchResult) -> str:
        """
        Render a search result as the route report.

        Returns:
            Two lines (cost, route) or a single 'No route exists' line.
        """
        if not isinstance(result, RouteResult):
            return result.message

        return (
            f"The cheapest flight cost from {result.start_city} to "
            f"{result.end_city}: {result.cost}\n"
            f"The route: {format_route(result.path, self.airports)}"
        )

    @property
    def is_ready(self) -> bool:
        """Check if the router is ready to handle requests."""
        return self._service.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._service.algorithm_name
