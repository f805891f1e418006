"""
Flight Network Provider port interface.

Defines the abstract contract for sources of the flight network:
an airport table plus a table of priced directed flights.
"""

from abc import ABC, abstractmethod

from src.flight_router.schemas.airports import AirportTable
from src.flight_router.schemas.flight import FlightEdgeDataFrame


class FlightNetworkProvider(ABC):
    """
    Abstract interface for flight network providers.

    Providers return validated DataFrames directly. Schema validation
    happens at the boundary (in the provider), not per-row.

    Implementations:
    - StaticNetworkProvider: In-memory airports and flights
    """

    @abstractmethod
    def get_airports(self) -> AirportTable:
        """
        Return the airport table defining the node-index space.

        Returns:
            Immutable AirportTable; airport i is graph node i.
        """
        ...

    @abstractmethod
    def get_flights_df(self) -> FlightEdgeDataFrame:
        """
        Return flights as a validated DataFrame.

        Returns:
            DataFrame validated against FlightEdgeSchema. Every airport
            code appears in get_airports().

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this provider.

        Returns:
            Provider identifier (e.g., "US reference network").
        """
        ...
