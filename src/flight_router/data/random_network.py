"""
Seeded random flight networks for tests and benchmarks.
"""

from typing import List, Tuple

import numpy as np

# -----------------------------
# Configuration
# -----------------------------
PRICE_RANGE = (50, 1000)
DEFAULT_SEED = 2137


def random_edges(
    node_count: int,
    density: float = 0.3,
    price_range: Tuple[int, int] = PRICE_RANGE,
    seed: int = DEFAULT_SEED,
) -> List[Tuple[int, int, int]]:
    """
    Generate directed (from, to, price) edges without self loops.

    Each ordered pair gets a flight with probability density; prices
    are drawn uniformly from price_range (inclusive) and are never 0.
    """
    if node_count <= 0:
        raise ValueError(f"node_count must be > 0, got {node_count}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    low, high = price_range
    if low < 1 or high < low:
        raise ValueError(f"Invalid price range: {price_range}")

    rng = np.random.default_rng(seed)

    mask = rng.random((node_count, node_count)) < density
    np.fill_diagonal(mask, False)
    prices = rng.integers(low, high + 1, size=(node_count, node_count))

    src, dst = np.nonzero(mask)
    return list(zip(src.tolist(), dst.tolist(), prices[src, dst].tolist()))


def random_airport_pairs(node_count: int) -> List[Tuple[str, str]]:
    """Synthetic (code, name) pairs 'A00', 'Airport 0', ..."""
    width = max(2, len(str(node_count - 1)))
    return [
        (f"A{i:0{width}d}", f"Airport {i}") for i in range(node_count)
    ]
