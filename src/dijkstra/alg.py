"""
Single-pair Dijkstra over a dense adjacency matrix.

Lazy-deletion variant: relaxed nodes are pushed again instead of
decreasing their key, and stale heap entries are skipped on pop.

Performance notes:
- Neighbours of a popped node come from np.flatnonzero on its matrix row
- Row values are converted to Python ints once, so cost sums never overflow
"""

import heapq
import logging
from typing import List, Tuple

import numpy as np

from .labels import DistanceTable, PathResult, ShortestPath, Unreachable
from .matrix import AdjacencyMatrix
from .reconstruction import reconstruct_path
from .validation import validate_node, validate_shortest_path_inputs

logger = logging.getLogger(__name__)


def _neighbours(matrix: AdjacencyMatrix, node: int) -> List[Tuple[int, int]]:
    """Return (neighbour, weight) pairs for every edge leaving node."""
    row = matrix[node]
    idx = np.flatnonzero(row)
    return list(zip(idx.tolist(), row[idx].tolist()))


def _run(matrix: AdjacencyMatrix, source: int, node_count: int) -> DistanceTable:
    table = DistanceTable.start(source, node_count)
    pq: List[Tuple[int, int]] = [(0, source)]
    pops = 0

    while pq:
        cost, node = heapq.heappop(pq)
        pops += 1

        # skip outdated entries
        if cost > table.costs[node]:
            continue

        for neighbour, weight in _neighbours(matrix, node):
            candidate = cost + weight
            if table.relax(neighbour, candidate, via=node):
                heapq.heappush(pq, (candidate, neighbour))

    logger.debug("Dijkstra from %d finished after %d heap pops", source, pops)
    return table


def shortest_path_tree(matrix: AdjacencyMatrix, source: int) -> DistanceTable:
    """
    Run Dijkstra from source to exhaustion.

    Args:
        matrix: Square adjacency matrix with non-negative weights.
        source: Start node.

    Returns:
        Final DistanceTable: optimal cost and predecessor of every node
        reachable from source, INFINITY/None for the rest.

    Raises:
        InvalidMatrixError: If matrix is not square.
        OutOfRangeError: If source is out of range.
    """
    node_count = validate_shortest_path_inputs(matrix, source, source)
    return _run(matrix, int(source), node_count)


def result_for(table: DistanceTable, destination: int) -> PathResult:
    """
    Assemble the query result for destination from a finished table.

    Raises:
        OutOfRangeError: If destination is out of range.
    """
    validate_node(destination, len(table), "destination")
    destination = int(destination)

    if not table.is_reached(destination):
        return Unreachable(source=table.source, destination=destination)

    path = reconstruct_path(table.predecessors, table.source, destination)
    return ShortestPath(cost=table.costs[destination], path=path)


def shortest_path(
    matrix: AdjacencyMatrix,
    source: int,
    destination: int,
) -> PathResult:
    """
    Find the cheapest path from source to destination.

    Args:
        matrix: Square adjacency matrix, 0 meaning no edge.
        source: Start node in [0, N).
        destination: End node in [0, N).

    Returns:
        ShortestPath(cost, path) or Unreachable(source, destination).

    Raises:
        InvalidMatrixError: If matrix is not square.
        OutOfRangeError: If source or destination is out of range.
    """
    node_count = validate_shortest_path_inputs(matrix, source, destination)
    table = _run(matrix, int(source), node_count)
    return result_for(table, destination)
