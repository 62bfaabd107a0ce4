"""Value types shared by the encoder, decoder and neighbor lookup."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe, ``x`` is longitude and ``y`` is latitude."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned cell denoted by a geohash."""

    min: Coordinate
    max: Coordinate

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            x=(self.min.x + self.max.x) / 2,
            y=(self.min.y + self.max.y) / 2,
        )

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.min.x <= coordinate.x <= self.max.x
            and self.min.y <= coordinate.y <= self.max.y
        )


class Direction(Enum):
    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"

    def to_tuple(self) -> tuple[float, float]:
        """Return the ``(dlat, dlng)`` unit step for this direction."""
        return _STEPS[self]


_STEPS = {
    Direction.N: (1.0, 0.0),
    Direction.NE: (1.0, 1.0),
    Direction.E: (0.0, 1.0),
    Direction.SE: (-1.0, 1.0),
    Direction.S: (-1.0, 0.0),
    Direction.SW: (-1.0, -1.0),
    Direction.W: (0.0, -1.0),
    Direction.NW: (1.0, -1.0),
}


@dataclass(frozen=True)
class Neighbors:
    """The eight cells surrounding a geohash, at the same length."""

    n: str
    ne: str
    e: str
    se: str
    s: str
    sw: str
    w: str
    nw: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)
