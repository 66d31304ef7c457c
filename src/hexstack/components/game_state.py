"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Play continues until the board fills with stacks still in hand."""
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode and the cascade lock."""
    mode: GameMode = GameMode.PLAYING
    cascade_active: bool = False
