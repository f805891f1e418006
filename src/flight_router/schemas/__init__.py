"""
Schema definitions for Flight Router.

Frozen dataclasses for queries and results, Pandera models for
tabular flight data.
"""

from .airports import Airport, AirportTable
from .constraints import RouteQuery, RouteQuerySchema
from .flight import FlightEdgeDataFrame, FlightEdgeSchema
from .route import (
    NoRoute,
    RouteResult,
    RouteSegment,
    RouteSegmentSchema,
    SearchResult,
)

__all__ = [
    # Airports
    "Airport",
    "AirportTable",
    # Flight schemas
    "FlightEdgeSchema",
    "FlightEdgeDataFrame",
    # Queries
    "RouteQuery",
    "RouteQuerySchema",
    # Route schemas
    "RouteSegment",
    "RouteResult",
    "RouteSegmentSchema",
    "NoRoute",
    "SearchResult",
]
