from dataclasses import dataclass
from typing import Tuple

from ..config import DEFAULT_MAX_SIZE, DEFAULT_MIN_NEIGHBOURS, DEFAULT_MIN_SIZE, DEFAULT_SCALE

Box = Tuple[int, int, int, int]  # x, y, w, h


@dataclass(frozen=True)
class DetectionParams:
    scale: float = DEFAULT_SCALE
    min_neighbours: int = DEFAULT_MIN_NEIGHBOURS
    min_size: int = DEFAULT_MIN_SIZE
    max_size: int = DEFAULT_MAX_SIZE


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box in photo pixels; max edges are exclusive."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_xywh(cls, box: Box) -> "Rectangle":
        x, y, w, h = (int(v) for v in box)
        return cls(x, y, x + w, y + h)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y
