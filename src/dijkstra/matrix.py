"""
Adjacency matrix builder.

Converts a flat list of weighted edges into a dense N x N matrix over a
contiguous node-index space. A zero entry means "no edge", so a true
zero-cost flight cannot be represented.
"""

import logging
from typing import Iterable, Sequence

import numpy as np

from .validation import validate_edge, validate_node_count

logger = logging.getLogger(__name__)

# matrix[u, v] is the weight of edge u -> v, 0 if there is none
AdjacencyMatrix = np.ndarray

NO_EDGE = 0


def build_adjacency_matrix(
    edges: Iterable[Sequence[int]],
    node_count: int,
) -> AdjacencyMatrix:
    """
    Build a read-only adjacency matrix from (from, to, weight) edges.

    All edges are validated before the matrix is returned. A repeated
    (from, to) pair overwrites the earlier weight.

    Args:
        edges: Directed edges as (from, to, weight) triples.
        node_count: Number of nodes N; valid indices are [0, N).

    Returns:
        N x N int64 array with the writeable flag cleared.

    Raises:
        InvalidNodeCountError: If node_count is not a positive integer.
        MalformedEdgeError: If an edge is not a triple.
        OutOfRangeError: If an endpoint is outside [0, N).
        InvalidWeightError: If a weight is negative or not an integer.

    Example:
        >>> m = build_adjacency_matrix([(0, 1, 5), (1, 0, 7)], 2)
        >>> m.tolist()
        [[0, 5], [7, 0]]
    """
    validate_node_count(node_count)

    matrix = np.zeros((node_count, node_count), dtype=np.int64)
    edge_count = 0

    for edge in edges:
        src, dst, weight = validate_edge(edge, node_count)

        if weight == NO_EDGE:
            logger.warning(
                "Edge %d -> %d has zero weight and will be treated as no edge",
                src,
                dst,
            )
        if matrix[src, dst] != NO_EDGE:
            logger.debug(
                "Edge %d -> %d overwritten: %d -> %d",
                src,
                dst,
                matrix[src, dst],
                weight,
            )

        matrix[src, dst] = weight
        edge_count += 1

    matrix.flags.writeable = False

    logger.debug(
        "Built %dx%d adjacency matrix from %d edges",
        node_count,
        node_count,
        edge_count,
    )
    return matrix


# Short alias matching the builder contract name
build = build_adjacency_matrix
