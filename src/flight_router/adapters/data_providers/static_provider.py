"""
Static Network Provider - in-memory flight network adapter.

Serves a fixed airport table and flights DataFrame, validated once
against FlightEdgeSchema at construction.
"""

import logging
from typing import Iterable, Sequence, Tuple

import pandas as pd

from src.dijkstra.exceptions import UnknownAirportError
from src.dijkstra.load_flights import validate_prices
from src.dijkstra.validation import validate_edge
from src.flight_router.data.us_network import us_airports, us_flights_df
from src.flight_router.ports.flight_data_provider import FlightNetworkProvider
from src.flight_router.schemas.airports import AirportTable
from src.flight_router.schemas.flight import FlightEdgeDataFrame, FlightEdgeSchema

logger = logging.getLogger(__name__)


class StaticNetworkProvider(FlightNetworkProvider):
    """
    Provider for a network held in memory.

    Attributes:
        _airports: Airport table defining node indices.
        _flights_df: Validated flights, upper-cased codes.
        _name: Provider label for logs.
    """

    def __init__(
        self,
        airports: AirportTable,
        flights_df: pd.DataFrame,
        name: str = "Static network",
    ) -> None:
        """
        Validate and store the network.

        Args:
            airports: Airport table; airport i is node i.
            flights_df: Flights with departure_airport, arrival_airport, price.
            name: Provider label.

        Raises:
            pandera.errors.SchemaError: If flights_df fails FlightEdgeSchema.
            InvalidWeightError: If a price has a fractional part.
            UnknownAirportError: If a flight uses a code not in airports.
        """
        df = flights_df.copy()
        for col in ("departure_airport", "arrival_airport"):
            if col in df.columns:
                df[col] = df[col].astype(str).str.strip().str.upper()
        # schema coercion would truncate fractional prices
        if "price" in df.columns:
            validate_prices(df)
        df = FlightEdgeSchema.validate(df)

        used = set(df["departure_airport"]) | set(df["arrival_airport"])
        unknown = sorted(code for code in used if not airports.has_code(code))
        if unknown:
            raise UnknownAirportError(unknown[0], f"{name} airports")

        self._airports = airports
        self._flights_df = df
        self._name = name

        logger.debug(
            "%s: %d airports, %d flights",
            name,
            len(airports),
            len(df),
        )

    @classmethod
    def us_reference(cls) -> "StaticNetworkProvider":
        """The bundled 11-airport US network."""
        return cls(us_airports(), us_flights_df(), name="US reference network")

    @classmethod
    def from_edges(
        cls,
        airport_pairs: Sequence[Tuple[str, str]],
        edges: Iterable[Tuple[int, int, int]],
        name: str = "Static network",
    ) -> "StaticNetworkProvider":
        """
        Build a provider from (code, name) pairs and index-based edges.

        Edges are checked the same way build_adjacency_matrix checks them.

        Raises:
            OutOfRangeError: If an edge endpoint has no airport pair.
            InvalidWeightError: If a price is negative or not an integer.
            MalformedEdgeError: If an edge is not a triple.
        """
        airports = AirportTable.from_pairs(airport_pairs)
        rows = []
        for edge in edges:
            src, dst, price = validate_edge(edge, len(airports))
            rows.append(
                {
                    "departure_airport": airports.code(src),
                    "arrival_airport": airports.code(dst),
                    "price": price,
                }
            )
        df = pd.DataFrame(
            rows, columns=["departure_airport", "arrival_airport", "price"]
        )
        return cls(airports, df, name=name)

    def get_airports(self) -> AirportTable:
        return self._airports

    def get_flights_df(self) -> FlightEdgeDataFrame:
        return self._flights_df

    @property
    def name(self) -> str:
        return self._name
