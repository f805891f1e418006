"""
Route query constraints.

Defines the contract for search parameters passed to the route finder.
"""

from dataclasses import dataclass

import pandera as pa
from pandera.typing import Series


@dataclass(frozen=True)
class RouteQuery:
    """
    Immutable cheapest-route search parameters.

    Frozen to prevent accidental mutation during concurrent access.

    Attributes:
        origin: Origin airport IATA code (upper case).
        destination: Destination airport IATA code (upper case).
        allow_same_airport: If False, origin == destination is rejected.
    """

    origin: str
    destination: str
    allow_same_airport: bool = False

    def __post_init__(self) -> None:
        """Validate constraints after initialization."""
        if not self.origin:
            raise ValueError("origin cannot be empty")
        if not self.destination:
            raise ValueError("destination cannot be empty")
        if not self.allow_same_airport and self.origin == self.destination:
            raise ValueError(
                f"origin and destination must differ, got {self.origin} twice"
            )

    @classmethod
    def create(
        cls,
        origin: str,
        destination: str,
        allow_same_airport: bool = False,
    ) -> "RouteQuery":
        """
        Factory method for creating RouteQuery.

        Strips and upper-cases airport codes.

        Returns:
            Validated RouteQuery instance.
        """
        return cls(
            origin=(origin or "").strip().upper(),
            destination=(destination or "").strip().upper(),
            allow_same_airport=allow_same_airport,
        )

    def reversed(self) -> "RouteQuery":
        """Create the return-trip query."""
        return RouteQuery(
            origin=self.destination,
            destination=self.origin,
            allow_same_airport=self.allow_same_airport,
        )


class RouteQuerySchema(pa.DataFrameModel):
    """
    Pandera schema for batch query validation.

    Used when processing many origin/destination pairs at once
    (e.g., CSV imports in RouteFinderService.search_batch).
    """

    origin: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 2, "max_value": 4},
        description="Origin airport IATA code",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 2, "max_value": 4},
        description="Destination airport IATA code",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteQuerySchema"
