from enum import Enum


class TileColor(Enum):
    """Closed set of tile colors used for merge matching.

    Display colors are looked up through the TilePalette component.
    """
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    AMBER = "amber"
    VIOLET = "violet"
