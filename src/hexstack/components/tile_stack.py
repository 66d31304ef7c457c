from dataclasses import dataclass, field
from typing import List

from hexstack.components.tile_color import TileColor


@dataclass(slots=True)
class TileStack:
    """Ordered tiles occupying a cell, bottom to top.

    Present only on occupied cells; the component is removed instead of being left empty.
    """
    tiles: List[TileColor] = field(default_factory=list)

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def top(self) -> TileColor | None:
        return self.tiles[-1] if self.tiles else None

    def top_run_length(self, color: TileColor) -> int:
        """Count contiguous tiles of ``color`` from the top downward."""
        count = 0
        for tile in reversed(self.tiles):
            if tile != color:
                break
            count += 1
        return count
