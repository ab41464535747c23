"""
Game configuration.

Replaces process-wide settings (who moves first, search depth) with an
explicit object handed to the search tree, the rules and the driver.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .board import Symbol
from .errors import ConfigurationError

# Search depth (plies) per difficulty
DIFFICULTY_DEPTHS: Dict[str, int] = {
    "easy": 2,
    "normal": 4,
    "hard": 5,
    "impossible": 9,
}


def parse_symbol(text: str) -> Symbol:
    """Parse a player symbol ('x' or 'o', any case)."""
    key = str(text).strip().upper()
    if key == Symbol.X.value:
        return Symbol.X
    if key == Symbol.O.value:
        return Symbol.O
    raise ConfigurationError(f"unrecognized player symbol: {text!r}")


@dataclass(frozen=True)
class GameConfig:
    """Game and search configuration."""

    # Side that opens the game (X is always the human)
    first_player: Symbol = Symbol.X

    # Search depth in plies
    depth: int = 9

    # Terminal scores
    player_win_score: float = -100.0
    ai_win_score: float = 100.0
    draw_score: float = 0.0

    # Seed for tie-breaking between equally scored moves
    seed: Optional[int] = None

    def __post_init__(self):
        if self.first_player not in (Symbol.X, Symbol.O):
            raise ConfigurationError(f"first player must be X or O, got {self.first_player!r}")
        if self.depth < 1:
            raise ConfigurationError(f"search depth must be at least 1, got {self.depth}")

    @classmethod
    def for_difficulty(cls, difficulty: str, **overrides) -> "GameConfig":
        """Build a config whose depth comes from DIFFICULTY_DEPTHS."""
        try:
            depth = DIFFICULTY_DEPTHS[difficulty.lower()]
        except KeyError:
            raise ConfigurationError(
                f"unknown difficulty {difficulty!r}, expected one of {sorted(DIFFICULTY_DEPTHS)}"
            ) from None
        overrides.setdefault("depth", depth)
        return cls(**overrides)


DEFAULT_CONFIG = GameConfig()
