"""
Graph Repository port interface.
"""


class GraphNotInitializedError(Exception):
    """Raised when the flight graph cannot be built."""

    pass
