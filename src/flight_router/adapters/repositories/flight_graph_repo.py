"""
Flight Graph Repository - build-once graph infrastructure.

Builds the immutable adjacency matrix from a network provider on first
access and serves the same graph to every later query.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

import numpy as np

from src.dijkstra.load_flights import edges_from_frame
from src.dijkstra.matrix import NO_EDGE, AdjacencyMatrix, build_adjacency_matrix
from src.dijkstra.validation import validate_node
from src.flight_router.adapters.algorithms.immutability import is_immutable
from src.flight_router.ports.graph_repository import GraphNotInitializedError
from src.flight_router.schemas.airports import AirportTable

if TYPE_CHECKING:
    from src.flight_router.ports.flight_data_provider import FlightNetworkProvider

logger = logging.getLogger(__name__)


# =============================================================================
# FLIGHT GRAPH: airport labels plus read-only adjacency matrix
# =============================================================================


@dataclass(frozen=True)
class FlightGraph:
    """
    Immutable flight graph shared by all queries.

    Attributes:
        airports: Airport table; airport i is matrix row/column i.
        matrix: Read-only N x N price matrix, 0 meaning no flight.
        built_at: Timestamp when graph was built.
        version: Hash of the matrix contents.
        edge_count: Number of distinct directed flights.
    """

    airports: AirportTable
    matrix: AdjacencyMatrix
    built_at: datetime
    version: str
    edge_count: int

    def __post_init__(self) -> None:
        """Validate that labels and matrix describe the same node space."""
        n = len(self.airports)
        if self.matrix.shape != (n, n):
            raise ValueError(
                f"Matrix shape {self.matrix.shape} does not match {n} airports"
            )
        if not is_immutable(self.matrix):
            raise ValueError("FlightGraph matrix must be read-only")

    @property
    def node_count(self) -> int:
        """Number of airports."""
        return len(self.airports)

    def _check_pair(self, origin: int, destination: int) -> None:
        validate_node(origin, self.node_count, "origin")
        validate_node(destination, self.node_count, "destination")

    def has_route(self, origin: int, destination: int) -> bool:
        """
        Check if a direct flight exists.

        Raises:
            OutOfRangeError: If either index is not an airport.
        """
        self._check_pair(origin, destination)
        return bool(self.matrix[origin, destination] != NO_EDGE)

    def price(self, origin: int, destination: int) -> Optional[int]:
        """Direct flight price, or None if there is no direct flight."""
        self._check_pair(origin, destination)
        value = int(self.matrix[origin, destination])
        return None if value == NO_EDGE else value


def compute_version(matrix: np.ndarray) -> str:
    """Compute hash of the matrix for version tracking."""
    content = f"{matrix.shape}:".encode() + np.ascontiguousarray(matrix).tobytes()
    return hashlib.md5(content).hexdigest()[:12]


def build_flight_graph(provider: FlightNetworkProvider) -> FlightGraph:
    """
    Build a FlightGraph from a network provider.

    Steps:
    1. Fetch airports and flights
    2. Map airport codes to node indices
    3. Build the read-only adjacency matrix
    4. Compute version hash

    Raises:
        ValidationError: If flights reference bad airports or weights.
    """
    airports = provider.get_airports()
    flights_df = provider.get_flights_df()

    edges = edges_from_frame(flights_df, airports.index_by_code)
    matrix = build_adjacency_matrix(edges, len(airports))

    return FlightGraph(
        airports=airports,
        matrix=matrix,
        built_at=datetime.now(),
        version=compute_version(matrix),
        edge_count=int(np.count_nonzero(matrix)),
    )


# =============================================================================
# FLIGHT GRAPH REPOSITORY: cold start once, lock-free reads afterwards
# =============================================================================


class FlightGraphRepository:
    """
    Repository that builds the graph once and serves it forever.

    The graph never changes after construction, so there is no refresh:
    the first get_graph() builds it under a lock, later calls return
    the same object without locking.

    Usage:
        >>> repo = FlightGraphRepository(StaticNetworkProvider.us_reference())
        >>> graph = repo.get_graph()  # Builds once, then never blocks
    """

    def __init__(self, data_provider: FlightNetworkProvider) -> None:
        """
        Initialize repository with a network provider.

        Args:
            data_provider: Source for airports and flights.
        """
        self._provider = data_provider
        self._graph: Optional[FlightGraph] = None
        self._build_lock = threading.Lock()

    def get_graph(self) -> FlightGraph:
        """
        Get the flight graph, building it on first call.

        Returns:
            The shared FlightGraph.

        Raises:
            GraphNotInitializedError: If the build fails.
        """
        graph = self._graph
        if graph is not None:
            return graph

        with self._build_lock:
            # Double-check after acquiring lock
            if self._graph is not None:
                return self._graph

            try:
                self._graph = build_flight_graph(self._provider)
            except Exception as e:
                logger.error("Graph build from %s failed: %s", self._provider.name, e)
                raise GraphNotInitializedError(
                    f"Failed to build flight graph: {e}"
                ) from e

            logger.info(
                "Flight graph built from %s: %d airports, %d flights (version %s)",
                self._provider.name,
                self._graph.node_count,
                self._graph.edge_count,
                self._graph.version,
            )
            return self._graph

    @property
    def is_initialized(self) -> bool:
        """Check if graph has been built."""
        return self._graph is not None

    @property
    def current_version(self) -> Optional[str]:
        """Get version of the built graph."""
        graph = self._graph
        return graph.version if graph else None
