"""
Reference US flight network: 11 airports, 38 priced directed flights.

Node indices follow the order of AIRPORTS (0=SFO ... 10=BOS).
"""

from typing import List, Tuple

import pandas as pd

from src.flight_router.schemas.airports import AirportTable

AIRPORTS: List[Tuple[str, str]] = [
    ("SFO", "San Francisco"),
    ("SEA", "Seattle"),
    ("LAX", "Los Angeles"),
    ("DEN", "Denver"),
    ("ORD", "Chicago"),
    ("DFW", "Dallas"),
    ("IAH", "Houston"),
    ("ATL", "Atlanta"),
    ("MIA", "Miami"),
    ("JFK", "New York"),
    ("BOS", "Boston"),
]

# (from, to, price)
FLIGHTS: List[Tuple[int, int, int]] = [
    (0, 1, 400), (0, 2, 150), (0, 4, 600), (0, 3, 240),
    (1, 0, 350), (1, 4, 500),
    (2, 0, 100), (2, 3, 300), (2, 9, 1000),
    (3, 0, 200), (3, 2, 360), (3, 4, 400), (3, 5, 210), (3, 6, 300),
    (4, 0, 500), (4, 1, 450), (4, 3, 420), (4, 10, 800), (4, 9, 600),
    (5, 3, 150), (5, 7, 360),
    (6, 3, 240), (6, 7, 400),
    (7, 5, 300), (7, 6, 360), (7, 8, 180), (7, 9, 400), (7, 10, 650),
    (8, 7, 100), (8, 9, 550),
    (9, 4, 630), (9, 2, 900), (9, 7, 450), (9, 8, 470), (9, 10, 100),
    (10, 4, 720), (10, 9, 150), (10, 7, 550),
]


def us_airports() -> AirportTable:
    """Airport table of the reference network."""
    return AirportTable.from_pairs(AIRPORTS)


def us_flights_df() -> pd.DataFrame:
    """Reference flights as a FlightEdgeSchema-shaped DataFrame."""
    codes = [code for code, _ in AIRPORTS]
    return pd.DataFrame(
        {
            "departure_airport": [codes[src] for src, _, _ in FLIGHTS],
            "arrival_airport": [codes[dst] for _, dst, _ in FLIGHTS],
            "price": [price for _, _, price in FLIGHTS],
        }
    )
