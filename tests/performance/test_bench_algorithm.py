"""
Algorithm performance benchmarks.

Measures:
- Raw Dijkstra latency on the reference and a 200-airport network
- Adapter overhead (segment assembly) on top of the engine
- Immutability overhead
"""

from src.dijkstra.alg import shortest_path, shortest_path_tree
from src.dijkstra.matrix import build_adjacency_matrix
from src.flight_router.adapters.algorithms.immutability import (
    make_defensive_copy,
    make_immutable,
)
from src.flight_router.data.us_network import FLIGHTS


class TestEngineLatency:
    """Benchmark the core engine."""

    def test_reference_network(self, benchmark):
        matrix = build_adjacency_matrix(FLIGHTS, 11)

        result = benchmark(shortest_path, matrix, 0, 6)

        assert result.cost == 540

    def test_large_network_single_pair(self, benchmark, large_matrix):
        result = benchmark(shortest_path, large_matrix, 0, 199)
        assert result.source == 0

    def test_large_network_full_tree(self, benchmark, large_matrix):
        table = benchmark(shortest_path_tree, large_matrix, 0)
        assert len(table) == 200

    def test_matrix_build(self, benchmark, large_edges):
        matrix = benchmark(build_adjacency_matrix, large_edges, 200)
        assert matrix.shape == (200, 200)


class TestAdapterLatency:
    """Benchmark the adapter on top of the engine."""

    def test_find_route(self, benchmark, us_graph, route_finder):
        result = benchmark(route_finder.find_route, us_graph, 10, 0)
        assert result.cost == 1150

    def test_find_all_routes(self, benchmark, large_graph, route_finder):
        routes = benchmark.pedantic(
            route_finder.find_all_routes,
            args=(large_graph, 0),
            rounds=5,
            warmup_rounds=1,
        )
        assert len(routes) == 199


class TestImmutabilityOverhead:
    """Compare the read-only flag against copying the matrix."""

    def test_make_immutable(self, benchmark, large_matrix):
        result = benchmark(make_immutable, large_matrix)
        assert result is large_matrix

    def test_defensive_copy(self, benchmark, large_matrix):
        result = benchmark(make_defensive_copy, large_matrix)
        assert result.shape == large_matrix.shape
