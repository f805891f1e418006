"""
Tests for the adjacency matrix builder.
"""

import logging

import numpy as np
import pytest

from src.dijkstra.exceptions import (
    InvalidNodeCountError,
    InvalidWeightError,
    MalformedEdgeError,
    OutOfRangeError,
)
from src.dijkstra.matrix import NO_EDGE, build, build_adjacency_matrix
from src.flight_router.data.us_network import FLIGHTS


# -------------------------
# Construction
# -------------------------


def test_empty_edge_list_gives_zero_matrix():
    matrix = build_adjacency_matrix([], 3)
    assert matrix.shape == (3, 3)
    assert not matrix.any()


def test_edges_are_directed():
    matrix = build_adjacency_matrix([(0, 1, 5)], 2)
    assert matrix[0, 1] == 5
    assert matrix[1, 0] == NO_EDGE


def test_reference_network(us_matrix):
    assert us_matrix.shape == (11, 11)
    assert np.count_nonzero(us_matrix) == len(FLIGHTS)
    assert us_matrix[2, 0] == 100
    assert us_matrix[0, 2] == 150


def test_last_duplicate_wins():
    matrix = build_adjacency_matrix([(0, 1, 5), (0, 1, 9), (0, 1, 3)], 2)
    assert matrix[0, 1] == 3


def test_matrix_is_read_only():
    matrix = build_adjacency_matrix([(0, 1, 5)], 2)
    with pytest.raises(ValueError):
        matrix[0, 1] = 1


def test_input_is_not_mutated():
    edges = [[0, 1, 5], [1, 0, 6]]
    build_adjacency_matrix(edges, 2)
    assert edges == [[0, 1, 5], [1, 0, 6]]


def test_accepts_generators_and_numpy_ints():
    edges = ((np.int64(i), np.int64(i + 1), np.int32(10)) for i in range(3))
    matrix = build_adjacency_matrix(edges, 4)
    assert matrix[2, 3] == 10


def test_build_alias():
    assert build is build_adjacency_matrix


# -------------------------
# Validation
# -------------------------


@pytest.mark.parametrize(
    "edge",
    [
        (3, 0, 1),
        (0, 3, 1),
        (-1, 0, 1),
        (0, -1, 1),
        (0, 100, 1),
    ],
)
def test_out_of_range_endpoint_rejected(edge):
    with pytest.raises(OutOfRangeError):
        build_adjacency_matrix([(0, 1, 1), edge], 3)


@pytest.mark.parametrize("weight", [-1, 1.5, "10", None, True, 2**63])
def test_invalid_weight_rejected(weight):
    with pytest.raises(InvalidWeightError) as exc_info:
        build_adjacency_matrix([(0, 1, weight)], 2)
    assert exc_info.value.weight == weight


@pytest.mark.parametrize("edge", [(0, 1), (0, 1, 2, 3), 5, None])
def test_malformed_edge_rejected(edge):
    with pytest.raises(MalformedEdgeError):
        build_adjacency_matrix([edge], 2)


@pytest.mark.parametrize("node_count", [0, -3, 2.0, "11", None])
def test_invalid_node_count_rejected(node_count):
    with pytest.raises(InvalidNodeCountError):
        build_adjacency_matrix([], node_count)


def test_out_of_range_error_carries_context():
    with pytest.raises(OutOfRangeError) as exc_info:
        build_adjacency_matrix([(0, 11, 5)], 11)
    assert exc_info.value.node == 11
    assert exc_info.value.node_count == 11
    assert "edge destination" in str(exc_info.value)


# -------------------------
# Logging
# -------------------------


def test_zero_weight_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="src.dijkstra.matrix"):
        matrix = build_adjacency_matrix([(0, 1, 0)], 2)
    assert matrix[0, 1] == NO_EDGE
    assert "zero weight" in caplog.text


def test_overwrite_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="src.dijkstra.matrix"):
        build_adjacency_matrix([(0, 1, 5), (0, 1, 9)], 2)
    assert "overwritten" in caplog.text
