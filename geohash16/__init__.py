"""Geohash encoding over a 16-symbol (hexadecimal) alphabet."""

from .core import (
    BASE16,
    Geohash,
    cell_error,
    decode,
    decode_bbox,
    encode,
    neighbor,
    neighbors,
)
from .errors import GeohashError, InvalidCoordinateRange, InvalidHashCharacter
from .types import Coordinate, Direction, Neighbors, Rect

__all__ = [
    "BASE16",
    "Coordinate",
    "Direction",
    "Geohash",
    "GeohashError",
    "InvalidCoordinateRange",
    "InvalidHashCharacter",
    "Neighbors",
    "Rect",
    "cell_error",
    "decode",
    "decode_bbox",
    "encode",
    "neighbor",
    "neighbors",
]
