"""Territory registry: the fixed roster of territories for one session."""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..utils.constants import (
    DEFAULT_TERRITORY_COUNT,
    DEMO_COLORS,
    DEMO_NAMES,
    DEMO_TROOPS,
    MIN_TERRITORY_COUNT,
    UNASSIGNED_OWNER,
)
from .errors import IndexOutOfRangeError
from .territory import Territory


class TerritoryRegistry:
    """Ordered, fixed-size collection of territories.

    Indices are stable for the lifetime of the registry: territories are
    mutated in place but never inserted or removed. Both combat and mission
    evaluation read from the same registry instance, which is owned by the
    game session.
    """

    def __init__(self, territories: Iterable[Territory]):
        """Initialize registry.

        Args:
            territories: Territories in index order (at least 2)

        Raises:
            ValueError: If fewer than two territories are given
        """
        self._territories: List[Territory] = list(territories)
        if len(self._territories) < MIN_TERRITORY_COUNT:
            raise ValueError(
                f"Registry needs at least {MIN_TERRITORY_COUNT} territories "
                f"(got {len(self._territories)})"
            )

    @classmethod
    def demo(cls, size: int = DEFAULT_TERRITORY_COUNT) -> "TerritoryRegistry":
        """Build a registry populated with the demo layout."""
        if size < MIN_TERRITORY_COUNT:
            raise ValueError(
                f"Registry needs at least {MIN_TERRITORY_COUNT} territories (got {size})"
            )
        return cls(_demo_territory(i) for i in range(size))

    @classmethod
    def from_entries(cls, entries: Sequence[Tuple[str, str, int]]) -> "TerritoryRegistry":
        """Build a registry from (name, color, troops) tuples."""
        return cls(Territory(name=name, color=color, troops=troops) for name, color, troops in entries)

    def __len__(self) -> int:
        return len(self._territories)

    def __iter__(self) -> Iterator[Territory]:
        return iter(self._territories)

    @property
    def territories(self) -> List[Territory]:
        """Snapshot list of the territories (the Territory objects are shared)."""
        return list(self._territories)

    def get(self, index: int) -> Territory:
        """Return the territory at ``index``.

        Raises:
            IndexOutOfRangeError: If index is outside [0, len)
        """
        if not 0 <= index < len(self._territories):
            raise IndexOutOfRangeError(index, len(self._territories))
        return self._territories[index]

    def count_with_troops(self, color: Optional[str] = None) -> int:
        """Count territories holding at least one troop.

        Args:
            color: If given, only count territories whose color contains this
                string (case-insensitive)

        Returns:
            Number of matching territories with troops > 0
        """
        return sum(
            1
            for territory in self._territories
            if territory.has_troops and (color is None or territory.matches_color(color))
        )

    def matching_color(self, color: str) -> List[Territory]:
        """Return territories whose color contains ``color`` (case-insensitive)."""
        return [t for t in self._territories if t.matches_color(color)]

    def seed_demo(self) -> None:
        """Overwrite every slot with the deterministic demo layout."""
        for i, territory in enumerate(self._territories):
            demo = _demo_territory(i)
            territory.name = demo.name
            territory.color = demo.color
            territory.troops = demo.troops
            territory.owner_id = UNASSIGNED_OWNER


def _demo_territory(index: int) -> Territory:
    slot = index % len(DEMO_NAMES)
    return Territory(name=DEMO_NAMES[slot], color=DEMO_COLORS[slot], troops=DEMO_TROOPS[slot])
