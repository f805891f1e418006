"""
Dijkstra Algorithm Adapter - Bridge between architecture and algorithm.

Wraps the dijkstra module with immutability safety and converts its
ShortestPath / Unreachable output to RouteResult / NoRoute schema objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List

from src.dijkstra.alg import result_for, shortest_path, shortest_path_tree
from src.dijkstra.labels import PathResult, ShortestPath

from src.flight_router.adapters.algorithms.immutability import (
    make_defensive_copy,
    make_immutable,
)
from src.flight_router.ports.route_finder import RouteFinder
from src.flight_router.schemas.route import (
    NoRoute,
    RouteResult,
    RouteSegment,
    SearchResult,
)

if TYPE_CHECKING:
    from src.flight_router.adapters.repositories.flight_graph_repo import (
        FlightGraph,
    )

logger = logging.getLogger(__name__)


class DijkstraRouteFinder(RouteFinder):
    """
    Adapter for the dijkstra module with IMMUTABILITY ENFORCEMENT.

    Ensures:
    1. The shared matrix is read-only before it reaches the algorithm
    2. Engine results are converted to RouteResult / NoRoute
    3. Graph integrity is preserved across concurrent requests

    Attributes:
        _require_copy: If True, always copy the matrix before searching.
    """

    def __init__(self, require_defensive_copy: bool = False) -> None:
        """
        Initialize the Dijkstra route finder.

        Args:
            require_defensive_copy: If True, copy the matrix before each
                search. Default False (prefer the read-only flag).
        """
        self._require_copy = require_defensive_copy

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Dijkstra (lazy deletion)"

    def _matrix(self, graph: FlightGraph):
        if self._require_copy:
            logger.debug("Using defensive copy for dijkstra input")
            return make_defensive_copy(graph.matrix)
        return make_immutable(graph.matrix)

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

        Raises:
            OutOfRangeError: If origin or destination is not a node.
        """
        result = shortest_path(self._matrix(graph), origin, destination)

        logger.debug(
            "Dijkstra %s -> %s: %s",
            origin,
            destination,
            result.cost if isinstance(result, ShortestPath) else "unreachable",
        )
        return self._to_search_result(graph, result)

    def find_all_routes(
        self,
        graph: FlightGraph,
        origin: int,
    ) -> Dict[int, SearchResult]:
        """
        Find the cheapest route from origin to every other airport.

        Runs the engine once and assembles a result per destination.

        Raises:
            OutOfRangeError: If origin is not a node.
        """
        table = shortest_path_tree(self._matrix(graph), origin)

        results: Dict[int, SearchResult] = {}
        for destination in range(graph.node_count):
            if destination == origin:
                continue
            results[destination] = self._to_search_result(
                graph, result_for(table, destination)
            )
        return results

    def _to_search_result(self, graph: FlightGraph, result: PathResult) -> SearchResult:
        """
        Convert an engine result to a schema object.

        Unreachable destinations become NoRoute; paths become a
        RouteResult with one RouteSegment per flight.
        """
        airports = graph.airports

        if not isinstance(result, ShortestPath):
            return NoRoute(
                origin=airports.code(result.source),
                destination=airports.code(result.destination),
            )

        segments: List[RouteSegment] = []
        for i, (src, dst) in enumerate(zip(result.path, result.path[1:])):
            segments.append(
                RouteSegment(
                    segment_index=i,
                    departure_airport=airports.code(src),
                    arrival_airport=airports.code(dst),
                    price=int(graph.matrix[src, dst]),
                )
            )

        route = RouteResult.from_segments(
            path=result.path,
            cities=[airports.code(node) for node in result.path],
            segments=segments,
        )
        if route.cost != result.cost:
            raise RuntimeError(
                f"Segment prices sum to {route.cost}, engine reported {result.cost}"
            )
        return route
