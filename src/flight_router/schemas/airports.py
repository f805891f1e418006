"""
Airport label table.

Maps the contiguous node indices used by the routing core to IATA codes
and city names. The table is immutable and handed explicitly to whatever
formats output; nothing reads it as module-level state.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Sequence, Tuple

from src.dijkstra.exceptions import UnknownAirportError
from src.dijkstra.validation import validate_node


@dataclass(frozen=True)
class Airport:
    """Single airport: node index, IATA code and city name."""

    index: int
    code: str
    name: str

    @property
    def label(self) -> str:
        """Legend label, e.g. 'San Francisco (SFO)'."""
        return f"{self.name} ({self.code})"


@dataclass(frozen=True)
class AirportTable:
    """
    Immutable index <-> airport lookup.

    Indices are dense: airport i sits at position i. Supports
    table[i] -> code so it can be passed straight to the route
    formatters in src.dijkstra.reconstruction.

    Attributes:
        airports: Airports ordered by index.
    """

    airports: Tuple[Airport, ...]
    _by_code: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate density and code uniqueness, then build the code index."""
        by_code: Dict[str, int] = {}
        for position, airport in enumerate(self.airports):
            if airport.index != position:
                raise ValueError(
                    f"Airport indices must be contiguous from 0, "
                    f"got {airport.index} at position {position}"
                )
            if airport.code in by_code:
                raise ValueError(f"Duplicate airport code '{airport.code}'")
            by_code[airport.code] = airport.index
        object.__setattr__(self, "_by_code", by_code)

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[str, str]]) -> "AirportTable":
        """
        Factory method to create an AirportTable from (code, name) pairs.

        The position of each pair becomes its node index.
        """
        return cls(
            airports=tuple(
                Airport(index=i, code=code.upper(), name=name)
                for i, (code, name) in enumerate(pairs)
            )
        )

    def __len__(self) -> int:
        return len(self.airports)

    def __iter__(self) -> Iterator[Airport]:
        return iter(self.airports)

    def __getitem__(self, index: int) -> str:
        return self.code(index)

    def airport(self, index: int) -> Airport:
        """Airport at index; raises OutOfRangeError if there is none."""
        validate_node(index, len(self.airports), "airport")
        return self.airports[int(index)]

    def code(self, index: int) -> str:
        """IATA code of the airport at index."""
        return self.airport(index).code

    def name(self, index: int) -> str:
        """City name of the airport at index."""
        return self.airport(index).name

    def index(self, code: str) -> int:
        """
        Node index for an IATA code (case-insensitive).

        Raises:
            UnknownAirportError: If code is not in the table.
        """
        normalized = code.strip().upper()
        if normalized not in self._by_code:
            raise UnknownAirportError(code)
        return self._by_code[normalized]

    def has_code(self, code: str) -> bool:
        """Check if an IATA code is in the table."""
        return code.strip().upper() in self._by_code

    @property
    def index_by_code(self) -> Dict[str, int]:
        """Copy of the code -> index mapping."""
        return dict(self._by_code)

    @property
    def codes(self) -> Tuple[str, ...]:
        """All codes ordered by index."""
        return tuple(a.code for a in self.airports)

    def legend(self, columns: int = 3) -> str:
        """
        Numbered code list, e.g. ' 0: San Francisco (SFO)   1: Seattle (SEA)'.

        Args:
            columns: Airports per line.
        """
        width = len(str(len(self.airports) - 1))
        cells = [
            f"{a.index:>{width}}: {a.label:<22}" for a in self.airports
        ]
        lines = [
            "".join(cells[i : i + columns]).rstrip()
            for i in range(0, len(cells), columns)
        ]
        return "\n".join(["<Code List of Airports>"] + lines)
