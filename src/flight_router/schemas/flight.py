"""
Flight edge schemas using Pandera.

Defines the contract for priced flight tables that are turned into
graph edges. Schema validation happens at the boundary only, not per-row.
"""

import pandera as pa
from pandera.typing import DataFrame, Series


class FlightEdgeSchema(pa.DataFrameModel):
    """
    Core contract for a flight network table.

    One row per directed flight. Extra columns are allowed and
    preserved (strict=False).
    """

    departure_airport: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 2, "max_value": 4},
        description="Departure airport IATA code (e.g., 'SFO')",
    )
    arrival_airport: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 2, "max_value": 4},
        description="Arrival airport IATA code",
    )
    price: Series[int] = pa.Field(
        ge=0,
        description="Flight cost in whole currency units",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightEdgeSchema"
        description = "Directed priced flights forming the route network"

    @pa.dataframe_check
    def no_self_loops(cls, df: DataFrame) -> Series[bool]:
        """A flight must leave the airport it departs from."""
        return df["departure_airport"] != df["arrival_airport"]


FlightEdgeDataFrame = DataFrame[FlightEdgeSchema]
