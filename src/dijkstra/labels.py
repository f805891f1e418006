import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

Cost = Union[int, float]

INFINITY: float = math.inf


@dataclass(eq=False)
class DistanceTable:
    """
    Per-query search state of the Dijkstra engine.

    Each node tracks:
    - Best known cost from the source (INFINITY until reached)
    - Predecessor on the best known path (None until reached)

    Owned by a single query and discarded once the result is assembled.
    """
    source: int
    costs: List[Cost] = field(default_factory=list)
    predecessors: List[Optional[int]] = field(default_factory=list)

    @classmethod
    def start(cls, source: int, node_count: int) -> "DistanceTable":
        """Source at cost 0, every other node at infinity, no predecessors."""
        costs: List[Cost] = [INFINITY] * node_count
        costs[source] = 0
        return cls(
            source=source,
            costs=costs,
            predecessors=[None] * node_count,
        )

    def relax(self, node: int, candidate: int, via: int) -> bool:
        """
        Record candidate as the cost of node if it strictly improves it.

        Returns True if the table changed. Costs only ever decrease.
        """
        if candidate < self.costs[node]:
            self.costs[node] = candidate
            self.predecessors[node] = via
            return True
        return False

    def is_reached(self, node: int) -> bool:
        return self.costs[node] != INFINITY

    def __len__(self) -> int:
        return len(self.costs)


@dataclass(frozen=True)
class ShortestPath:
    """
    Cheapest route found by the engine.

    path runs from source to destination inclusive; cost is the sum of
    the edge weights along it.
    """
    cost: int
    path: tuple

    @property
    def source(self) -> int:
        return self.path[0]

    @property
    def destination(self) -> int:
        return self.path[-1]

    @property
    def reachable(self) -> bool:
        return True


@dataclass(frozen=True)
class Unreachable:
    """Outcome for a destination with no path from the source."""
    source: int
    destination: int

    @property
    def reachable(self) -> bool:
        return False


PathResult = Union[ShortestPath, Unreachable]
