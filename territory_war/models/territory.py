"""Territory data model."""

from dataclasses import dataclass

from ..utils.constants import MAX_COLOR_LENGTH, MAX_NAME_LENGTH, UNASSIGNED_OWNER


def color_matches(color: str, query: str) -> bool:
    """Return True if ``query`` occurs in ``color``, ignoring case."""
    return query.casefold() in color.casefold()


@dataclass
class Territory:
    """A named region held by an army color.

    Territories never hold a negative troop count; combat clamps at zero.
    A territory with 0 troops has no force to attack or defend with.
    """

    name: str  # Display name (e.g., "Aldea")
    color: str  # Army color/faction label (e.g., "Verde")
    troops: int  # Troop count, >= 0
    owner_id: int = UNASSIGNED_OWNER  # Reserved, -1 = unassigned

    def __post_init__(self):
        """Validate territory data after initialization."""
        if not self.name:
            raise ValueError("Territory name cannot be empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"Invalid name: {self.name!r} (max {MAX_NAME_LENGTH} characters)"
            )
        if not self.color:
            raise ValueError("Territory color cannot be empty")
        if len(self.color) > MAX_COLOR_LENGTH:
            raise ValueError(
                f"Invalid color: {self.color!r} (max {MAX_COLOR_LENGTH} characters)"
            )
        if self.troops < 0:
            raise ValueError(f"Invalid troops: {self.troops} (must be >= 0)")

    @property
    def has_troops(self) -> bool:
        return self.troops > 0

    def matches_color(self, query: str) -> bool:
        """Case-insensitive substring match against this territory's color."""
        return color_matches(self.color, query)
