"""
Immutability utilities for adjacency matrix protection.

The matrix is shared read-only across all queries; these helpers set and
check the numpy writeable flag so accidental mutation raises instead of
corrupting every later search.
"""

import numpy as np


def make_immutable(matrix: np.ndarray) -> np.ndarray:
    """
    Make the matrix read-only to prevent accidental mutation.

    This is a zero-copy operation - no data duplication occurs.

    Args:
        matrix: Array to protect.

    Returns:
        The same array with the writeable flag cleared.

    Example:
        >>> m = make_immutable(np.zeros((2, 2), dtype=np.int64))
        >>> m[0, 1] = 5  # Raises ValueError
    """
    if matrix.flags.writeable:
        matrix.flags.writeable = False
    return matrix


def make_defensive_copy(matrix: np.ndarray) -> np.ndarray:
    """
    Create a writeable copy for code that needs to modify weights.

    WARNING: O(N^2) memory and time cost!

    Args:
        matrix: Array to copy.

    Returns:
        New writeable array with copied data.
    """
    return np.array(matrix, copy=True)


def is_immutable(matrix: np.ndarray) -> bool:
    """
    Check if the matrix is read-only.

    Args:
        matrix: Array to check.

    Returns:
        True if the writeable flag is cleared.
    """
    return not matrix.flags.writeable
