"""
Route Finder Service - Domain orchestrator for cheapest-flight search.

Coordinates the interaction between:
- FlightGraphRepository (build-once flight graph)
- RouteFinder (algorithm adapter)
- RouteQuery (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Dict, List

import pandas as pd

from src.flight_router.schemas.constraints import RouteQuery, RouteQuerySchema
from src.flight_router.schemas.route import RouteResult, SearchResult

if TYPE_CHECKING:
    from src.flight_router.adapters.repositories.flight_graph_repo import (
        FlightGraphRepository,
    )
    from src.flight_router.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for finding cheapest flight routes.

    Orchestrates the routing process:
    1. Validates and normalizes the query
    2. Retrieves the shared flight graph
    3. Resolves airport codes to node indices
    4. Delegates route finding to the algorithm adapter
    5. Logs performance metrics

    This service is stateless and thread-safe.

    Attributes:
        _graph_repo: Repository providing the flight graph.
        _route_finder: Algorithm adapter for route finding.
    """

    def __init__(
        self,
        graph_repo: FlightGraphRepository,
        route_finder: RouteFinder,
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            graph_repo: Repository for flight graph access.
            route_finder: Algorithm adapter (e.g., DijkstraRouteFinder).
        """
        self._graph_repo = graph_repo
        self._route_finder = route_finder

    def find_cheapest_route(
        self,
        origin: str,
        destination: str,
        allow_same_airport: bool = False,
    ) -> SearchResult:
        """
        Find the cheapest route between two airports.

        Args:
            origin: Origin airport IATA code (e.g., 'SFO').
            destination: Destination airport IATA code.
            allow_same_airport: Accept origin == destination (cost 0).

        Returns:
            RouteResult, or NoRoute if destination is unreachable.

        Raises:
            ValueError: If the query is invalid.
            UnknownAirportError: If a code is not in the network.
            GraphNotInitializedError: If graph cannot be built.
        """
        start_time = time.perf_counter()

        # 1. Validate and create immutable query
        query = RouteQuery.create(
            origin=origin,
            destination=destination,
            allow_same_airport=allow_same_airport,
        )

        # 2. Get shared flight graph (built once)
        graph = self._graph_repo.get_graph()

        # 3. Resolve codes
        origin_idx = graph.airports.index(query.origin)
        destination_idx = graph.airports.index(query.destination)

        logger.debug(
            "Search: %s (%d) -> %s (%d)",
            query.origin,
            origin_idx,
            query.destination,
            destination_idx,
        )

        # 4. Delegate to algorithm adapter
        algo_start = time.perf_counter()
        result = self._route_finder.find_route(graph, origin_idx, destination_idx)
        algo_time = time.perf_counter() - algo_start

        total_time = time.perf_counter() - start_time

        # 5. Log performance metrics
        logger.info(
            "Route search %s -> %s completed: %s in %.3fms (algo: %.3fms)",
            query.origin,
            query.destination,
            f"cost {result.cost}" if isinstance(result, RouteResult) else "no route",
            total_time * 1000,
            algo_time * 1000,
        )

        return result

    def cheapest_from(self, origin: str) -> Dict[str, SearchResult]:
        """
        Find the cheapest route from origin to every other airport.

        Args:
            origin: Origin airport IATA code.

        Returns:
            Dict mapping destination code to its SearchResult, in
            airport-index order.

        Raises:
            UnknownAirportError: If origin is not in the network.
        """
        start_time = time.perf_counter()

        graph = self._graph_repo.get_graph()
        origin_idx = graph.airports.index(origin)

        by_index = self._route_finder.find_all_routes(graph, origin_idx)
        results = {
            graph.airports.code(idx): result for idx, result in sorted(by_index.items())
        }

        logger.info(
            "All-destinations search from %s: %d reachable of %d in %.3fms",
            graph.airports.code(origin_idx),
            sum(1 for r in results.values() if r.reachable),
            len(results),
            (time.perf_counter() - start_time) * 1000,
        )
        return results

    def search_batch(self, queries_df: pd.DataFrame) -> pd.DataFrame:
        """
        Run many origin/destination searches from a DataFrame.

        Args:
            queries_df: DataFrame with origin and destination columns,
                validated against RouteQuerySchema.

        Returns:
            Copy of the queries with cost (nullable Int64, <NA> when
            unreachable), route ('SFO -> DEN -> IAH', empty when
            unreachable) and reachable columns.

        Raises:
            pandera.errors.SchemaError: If queries_df fails validation.
            UnknownAirportError: If a code is not in the network.
        """
        df = RouteQuerySchema.validate(queries_df.copy())

        costs: List[object] = []
        routes: List[str] = []
        for origin, destination in zip(df["origin"], df["destination"]):
            result = self.find_cheapest_route(
                origin, destination, allow_same_airport=True
            )
            if isinstance(result, RouteResult):
                costs.append(result.cost)
                routes.append(" -> ".join(result.route_cities))
            else:
                costs.append(pd.NA)
                routes.append("")

        df["cost"] = pd.array(costs, dtype="Int64")
        df["route"] = routes
        df["reachable"] = df["cost"].notna()
        return df

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._graph_repo.is_initialized
