from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from hexstack.components.tile_color import TileColor

RGB = Tuple[int, int, int]


@dataclass(slots=True)
class TilePalette:
    """Display colors for each TileColor plus the subset hands may draw from.

    Lives on a single registry entity; merge logic never reads it.
    """
    colors: Dict[TileColor, RGB]
    spawnable: List[TileColor] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.spawnable:
            # Preserve order while filtering unknown colors.
            seen: set[TileColor] = set()
            filtered: List[TileColor] = []
            for color in self.spawnable:
                if color in self.colors and color not in seen:
                    filtered.append(color)
                    seen.add(color)
            self.spawnable = filtered or list(self.colors.keys())
        else:
            self.spawnable = list(self.colors.keys())

    def background_for(self, color: TileColor) -> RGB:
        return self.colors[color]

    def spawnable_colors(self) -> List[TileColor]:
        return list(self.spawnable)
