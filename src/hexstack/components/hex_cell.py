from dataclasses import dataclass

@dataclass(slots=True)
class HexCell:
    """Axial position of a grid cell entity; one entity exists per in-bounds cell."""
    q: int
    r: int

    @property
    def coord(self) -> tuple[int, int]:
        return (self.q, self.r)
