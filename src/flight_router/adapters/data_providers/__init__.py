"""
Data provider adapters for flight network sources.
"""

from src.flight_router.adapters.data_providers.static_provider import (
    StaticNetworkProvider,
)

__all__ = [
    "StaticNetworkProvider",
]
