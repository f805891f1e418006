"""
Input validation for the dijkstra module.

Provides validation functions that check inputs before graph building
and algorithm execution, ensuring fail-fast behavior with clear error messages.
"""

from numbers import Integral
from typing import Any, Sequence, Tuple

import numpy as np

from .exceptions import (
    InvalidMatrixError,
    InvalidNodeCountError,
    InvalidWeightError,
    MalformedEdgeError,
    OutOfRangeError,
)

# Largest weight an int64 matrix cell can hold
MAX_WEIGHT = int(np.iinfo(np.int64).max)


def _is_int(value: Any) -> bool:
    # bool is an Integral subclass but never a valid node or weight
    return isinstance(value, Integral) and not isinstance(value, (bool, np.bool_))


def validate_node_count(node_count: Any) -> None:
    """
    Validate the size of the node-index space.

    Raises:
        InvalidNodeCountError: If node_count is not a positive integer.
    """
    if not _is_int(node_count) or node_count <= 0:
        raise InvalidNodeCountError(node_count)


def validate_node(node: Any, node_count: int, context: str = "node") -> None:
    """
    Validate that a node index lies in [0, node_count).

    Args:
        node: Node index to validate.
        node_count: Size of the node-index space.
        context: Description for error message.

    Raises:
        OutOfRangeError: If node is not an integer in range.
    """
    if not _is_int(node) or not 0 <= node < node_count:
        raise OutOfRangeError(node, node_count, context)


def validate_edge(edge: Sequence[Any], node_count: int) -> Tuple[int, int, int]:
    """
    Validate a single (from, to, weight) edge.

    Args:
        edge: Edge triple to validate.
        node_count: Size of the node-index space.

    Returns:
        The edge unpacked as plain ints.

    Raises:
        MalformedEdgeError: If edge is not a 3-item sequence.
        OutOfRangeError: If either endpoint is out of range.
        InvalidWeightError: If weight is negative, not an integer or
            larger than MAX_WEIGHT.
    """
    try:
        src, dst, weight = edge
    except (TypeError, ValueError) as e:
        raise MalformedEdgeError(edge) from e

    validate_node(src, node_count, "edge source")
    validate_node(dst, node_count, "edge destination")

    if not _is_int(weight) or not 0 <= weight <= MAX_WEIGHT:
        raise InvalidWeightError(edge, weight)

    return int(src), int(dst), int(weight)


def validate_matrix(matrix: np.ndarray) -> int:
    """
    Validate adjacency matrix shape.

    Returns:
        The node count N of the N x N matrix.

    Raises:
        InvalidMatrixError: If matrix is not a non-empty square 2-D array.
    """
    shape = np.shape(matrix)
    if len(shape) != 2 or shape[0] != shape[1] or shape[0] == 0:
        raise InvalidMatrixError(tuple(shape))
    return int(shape[0])


def validate_shortest_path_inputs(
    matrix: np.ndarray,
    source: Any,
    destination: Any,
) -> int:
    """
    Validate all inputs for the shortest-path engine.

    This is the main validation entry point for queries, checking the
    matrix first and then both endpoints.

    Returns:
        The node count N.

    Raises:
        InvalidMatrixError: If matrix is not square.
        OutOfRangeError: If source or destination is out of range.
    """
    node_count = validate_matrix(matrix)
    validate_node(source, node_count, "source")
    validate_node(destination, node_count, "destination")
    return node_count
