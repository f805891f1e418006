"""
Custom exceptions for the dijkstra module.

Provides a hierarchy of exceptions for clear error handling
and debugging of graph building and route-finding operations.
"""

from typing import Any


class DijkstraError(Exception):
    """Base exception for all dijkstra module errors."""

    pass


class ValidationError(DijkstraError):
    """Base exception for input validation errors."""

    pass


class OutOfRangeError(ValidationError):
    """Raised when a node index falls outside [0, node_count)."""

    def __init__(self, node: Any, node_count: int, context: str = "node") -> None:
        self.node = node
        self.node_count = node_count
        self.context = context
        message = f"{context} {node!r} out of range [0, {node_count})"
        super().__init__(message)


class InvalidWeightError(ValidationError):
    """Raised when an edge weight is negative, not an integer, or too large."""

    def __init__(self, edge: Any, weight: Any) -> None:
        self.edge = edge
        self.weight = weight
        message = (
            f"Invalid weight {weight!r} for edge {edge!r}: "
            "must be a non-negative integer that fits in int64"
        )
        super().__init__(message)


class MalformedEdgeError(ValidationError):
    """Raised when an edge is not a (from, to, weight) triple."""

    def __init__(self, edge: Any) -> None:
        self.edge = edge
        message = f"Edge must be a (from, to, weight) triple, got {edge!r}"
        super().__init__(message)


class InvalidNodeCountError(ValidationError):
    """Raised when the node count is not a positive integer."""

    def __init__(self, node_count: Any) -> None:
        self.node_count = node_count
        message = f"Node count must be a positive integer, got {node_count!r}"
        super().__init__(message)


class InvalidMatrixError(ValidationError):
    """Raised when an adjacency matrix is not a square 2-D array."""

    def __init__(self, shape: tuple) -> None:
        self.shape = shape
        message = f"Adjacency matrix must be square, got shape {shape}"
        super().__init__(message)


class UnknownAirportError(ValidationError):
    """Raised when an airport code is not found in the airport table."""

    def __init__(self, airport: str, context: str = "airport table") -> None:
        self.airport = airport
        message = f"Airport '{airport}' not found in {context}"
        super().__init__(message)
