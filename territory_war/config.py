"""Runtime settings for a Territory War run."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .utils.constants import DEFAULT_TERRITORY_COUNT, MIN_TERRITORY_COUNT
from .utils.rng import GameRNG

Level = Literal["menu", "novice", "adventurer", "master"]


class GameSettings(BaseModel):
    """Validated options for one run of the game."""

    level: Level = Field(default="menu", description="Level to start in, or 'menu' to choose")
    seed: Optional[int] = Field(default=None, description="Optional RNG seed for determinism")
    territory_count: int = Field(
        default=DEFAULT_TERRITORY_COUNT,
        ge=MIN_TERRITORY_COUNT,
        description="Number of territories per level",
    )
    debug: bool = Field(default=False, description="Enable debug logging")
    tui: bool = Field(default=False, description="Play the master level in the Textual TUI")

    @model_validator(mode="after")
    def _tui_needs_master(self) -> "GameSettings":
        if self.tui and self.level not in ("menu", "master"):
            raise ValueError("The TUI only supports the master level")
        return self

    @classmethod
    def from_args(cls, args) -> "GameSettings":
        """Build settings from an argparse namespace."""
        return cls(
            level=args.level,
            seed=args.seed,
            territory_count=args.territories,
            debug=args.debug,
            tui=args.tui,
        )

    def make_rng(self) -> GameRNG:
        return GameRNG(self.seed)
