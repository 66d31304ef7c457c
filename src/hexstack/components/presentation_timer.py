from dataclasses import dataclass, field
from typing import Any, List


@dataclass(slots=True)
class PresentationTimer:
    """Tick-driven presentation effect (settle, score pulse, overflow burst, modal delay).

    progress runs from 0.0 to 1.0 over the entity's Duration.
    """
    kind: str
    items: List[Any] = field(default_factory=list)
    progress: float = 0.0
