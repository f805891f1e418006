from typing import List, Optional, Protocol, Sequence

from .labels import PathResult, ShortestPath


class NodeLabels(Protocol):
    """Anything mapping a node index to its display label."""

    def __getitem__(self, node: int) -> str:
        ...


def reconstruct_path(
    predecessors: Sequence[Optional[int]],
    source: int,
    destination: int,
) -> tuple:
    """
    Reconstruct the node path from source to destination.

    Walks predecessor links back from destination until source is
    reached, then reverses the walk.

    Returns:
        path: tuple of nodes from source to destination inclusive

    Raises:
        ValueError: If the predecessor chain does not lead to source.
    """
    path: List[int] = [destination]
    curr = destination

    while curr != source:
        prev = predecessors[curr]
        if prev is None or len(path) >= len(predecessors):
            raise ValueError(
                f"No predecessor chain from {destination} back to {source}"
            )
        path.append(prev)
        curr = prev

    path.reverse()
    return tuple(path)


def format_route(path: Sequence[int], labels: NodeLabels) -> str:
    """Render a path as 'SFO -> DEN -> IAH'."""
    return " -> ".join(labels[node] for node in path)


def format_result(result: PathResult, labels: NodeLabels) -> str:
    """
    Render a query result as the two-line route report.

    Unreachable destinations get a single 'No route exists' line
    instead of a numeric cost.
    """
    if not isinstance(result, ShortestPath):
        return (
            f"No route exists from {labels[result.source]} "
            f"to {labels[result.destination]}"
        )

    return (
        f"The cheapest flight cost from {labels[result.source]} to "
        f"{labels[result.destination]}: {result.cost}\n"
        f"The route: {format_route(result.path, labels)}"
    )


def print_result(result: PathResult, labels: NodeLabels):
    """
    Print a query result.

    Returns:
        Nothing.
    """
    print(f"\n{format_result(result, labels)}\n")
