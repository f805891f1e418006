"""
Bundled flight networks.
"""

from src.flight_router.data.random_network import random_airport_pairs, random_edges
from src.flight_router.data.us_network import (
    AIRPORTS,
    FLIGHTS,
    us_airports,
    us_flights_df,
)

__all__ = [
    "AIRPORTS",
    "FLIGHTS",
    "random_airport_pairs",
    "random_edges",
    "us_airports",
    "us_flights_df",
]
