from typing import List, Mapping, Set, Tuple

import pandas as pd

from .exceptions import InvalidWeightError, UnknownAirportError, ValidationError

# Columns needed to turn a flights table into edges
REQUIRED_COLUMNS: Set[str] = {
    "departure_airport",
    "arrival_airport",
    "price",
}


def validate_prices(flights_df: pd.DataFrame) -> None:
    """
    Reject prices with a fractional part.

    Integer casting would truncate them silently, so 99.9 must fail here
    the same way a weight of 1.5 fails in build_adjacency_matrix.
    Non-numeric values are left to the schema.

    Raises:
        InvalidWeightError: For the first row with a fractional price.
    """
    prices = pd.to_numeric(flights_df["price"], errors="coerce")
    fractional = prices.notna() & (prices % 1 != 0)
    if fractional.any():
        row = flights_df.loc[fractional].iloc[0]
        edge = (
            row.get("departure_airport"),
            row.get("arrival_airport"),
            row["price"],
        )
        raise InvalidWeightError(edge, row["price"])


def edges_from_frame(
    flights_df: pd.DataFrame,
    airport_index: Mapping[str, int],
) -> List[Tuple[int, int, int]]:
    """
    Convert a flights DataFrame into (from, to, weight) edges.

    Airport codes are upper-cased and mapped through airport_index.
    Row order is kept, so a repeated route keeps the last price once
    the edges are built into a matrix.

    Raises:
        ValidationError: If required columns are missing.
        InvalidWeightError: If a price has a fractional part.
        UnknownAirportError: If a code is missing from airport_index.
    """
    missing_columns = REQUIRED_COLUMNS - set(flights_df.columns)
    if missing_columns:
        raise ValidationError(
            f"Missing required columns: {', '.join(sorted(missing_columns))}"
        )
    validate_prices(flights_df)

    dep = flights_df["departure_airport"].astype(str).str.upper()
    arr = flights_df["arrival_airport"].astype(str).str.upper()

    unknown = sorted((set(dep) | set(arr)) - set(airport_index))
    if unknown:
        raise UnknownAirportError(unknown[0])

    src = dep.map(airport_index).astype("int64")
    dst = arr.map(airport_index).astype("int64")
    price = flights_df["price"].astype("int64")

    return list(zip(src.tolist(), dst.tolist(), price.tolist()))
