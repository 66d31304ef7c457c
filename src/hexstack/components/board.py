from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    radius: int
