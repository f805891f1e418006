"""
Route result schemas.

Defines the output contract for routing results and standardizes the
interface between the algorithm adapter and its consumers.
"""

from dataclasses import dataclass
from typing import List, Sequence, Union

import pandas as pd
import pandera as pa
from pandera.typing import Series


class RouteSegmentSchema(pa.DataFrameModel):
    """
    Schema for individual flight segments in a route.

    Each row represents one flight in a multi-leg journey.
    """

    segment_index: Series[int] = pa.Field(
        ge=0,
        description="Zero-based index of this segment in the route",
    )
    departure_airport: Series[str] = pa.Field(
        nullable=False,
        description="Departure airport IATA code",
    )
    arrival_airport: Series[str] = pa.Field(
        nullable=False,
        description="Arrival airport IATA code",
    )
    price: Series[int] = pa.Field(
        ge=0,
        description="Segment price",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteSegmentSchema"
        ordered = True


@dataclass(frozen=True)
class RouteSegment:
    """
    Immutable representation of a single flight segment.

    Used for constructing route results from algorithm output.
    """

    segment_index: int
    departure_airport: str
    arrival_airport: str
    price: int


@dataclass(frozen=True)
class RouteResult:
    """
    Immutable representation of the cheapest route.

    Aggregates RouteSegments into a cohesive result. This is the
    primary output type of a successful search.

    Attributes:
        cost: Total route cost reported by the algorithm.
        path: Node indices from origin to destination inclusive.
        cities: IATA codes matching path.
        segments: One flight per consecutive pair of cities.
    """

    cost: int
    path: tuple[int, ...]
    cities: tuple[str, ...]
    segments: tuple[RouteSegment, ...]

    @property
    def total_cost(self) -> int:
        """Sum of all segment prices."""
        return sum(seg.price for seg in self.segments)

    @property
    def num_segments(self) -> int:
        """Number of flight segments."""
        return len(self.segments)

    @property
    def route_cities(self) -> List[str]:
        """Ordered list of all airports in route."""
        return list(self.cities)

    @property
    def start_city(self) -> str:
        """Origin airport."""
        return self.cities[0]

    @property
    def end_city(self) -> str:
        """Final destination airport."""
        return self.cities[-1]

    @property
    def reachable(self) -> bool:
        return True

    def to_frame(self) -> pd.DataFrame:
        """Segments as a RouteSegmentSchema-validated DataFrame."""
        df = pd.DataFrame(
            [
                {
                    "segment_index": s.segment_index,
                    "departure_airport": s.departure_airport,
                    "arrival_airport": s.arrival_airport,
                    "price": s.price,
                }
                for s in self.segments
            ],
            columns=["segment_index", "departure_airport", "arrival_airport", "price"],
        )
        return RouteSegmentSchema.validate(df)

    @classmethod
    def from_segments(
        cls,
        path: Sequence[int],
        cities: Sequence[str],
        segments: Sequence[RouteSegment],
    ) -> "RouteResult":
        """
        Factory method to create RouteResult from segments.

        Args:
            path: Node indices from origin to destination inclusive.
            cities: IATA codes matching path.
            segments: One RouteSegment per consecutive pair in path.

        Returns:
            RouteResult whose cost is the sum of segment prices.
        """
        if not path or len(cities) != len(path):
            raise ValueError("Route needs one city per path node")
        if len(segments) != len(path) - 1:
            raise ValueError(
                f"Path of {len(path)} airports needs {len(path) - 1} segments, "
                f"got {len(segments)}"
            )

        return cls(
            cost=sum(seg.price for seg in segments),
            path=tuple(path),
            cities=tuple(cities),
            segments=tuple(segments),
        )


@dataclass(frozen=True)
class NoRoute:
    """Search outcome when the destination cannot be reached."""

    origin: str
    destination: str

    @property
    def reachable(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"No route exists from {self.origin} to {self.destination}"


SearchResult = Union[RouteResult, NoRoute]
