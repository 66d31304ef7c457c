from dataclasses import dataclass, field
from typing import List

from hexstack.components.tile_color import TileColor


@dataclass(slots=True)
class Hand:
    """Stacks waiting to be placed. An empty slot has already been played."""
    slots: List[List[TileColor]] = field(default_factory=list)

    def is_spent(self) -> bool:
        return all(not slot for slot in self.slots)

    def has_playable(self) -> bool:
        return any(slot for slot in self.slots)

    def snapshot(self) -> list[tuple[TileColor, ...]]:
        return [tuple(slot) for slot in self.slots]
