from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MARKER_LABEL = "#"
EMPTY_LABEL = "."

# Coordinates must fit the int32 fields of the binary edge format.
COORDINATE_MIN = -(2**31)
COORDINATE_MAX = 2**31 - 1


@dataclass(frozen=True)
class Vertex:
    """
    Labeled antenna at a unique grid coordinate.
    """

    id: int
    x: int
    y: int
    label: str

    @property
    def coordinate(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "label": self.label,
        }


@dataclass(frozen=True)
class Edge:
    """
    Directed connection between two vertices, by identifier.
    """

    source: int
    target: int

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target}
