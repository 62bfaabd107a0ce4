"""Encode, decode and neighbor lookup over the 16-symbol geohash alphabet.

Each character carries 4 bits. Bits alternate between longitude and latitude,
starting with longitude, and the alternation runs across character
boundaries: a hash is one interleaved bitstream cut into 4-bit chunks.

The alphabet is ``0123456789abcdef``, not the conventional 32-symbol geohash
alphabet, so hashes produced here are not interchangeable with standard ones.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import InvalidCoordinateRange, InvalidHashCharacter
from .types import Coordinate, Direction, Neighbors, Rect

if TYPE_CHECKING:
    from .config import GeohashConfig

logger = logging.getLogger(__name__)

BASE16 = "0123456789abcdef"
BITS_PER_CHAR = 4

MIN_LON, MAX_LON = -180.0, 180.0
MIN_LAT, MAX_LAT = -90.0, 90.0

# Bottom row first, west to east.
NEIGHBOR_ORDER = (
    Direction.SW,
    Direction.S,
    Direction.SE,
    Direction.W,
    Direction.E,
    Direction.NW,
    Direction.N,
    Direction.NE,
)


def encode(coordinate: Coordinate, length: int) -> str:
    """Encode a coordinate into a geohash of ``length`` characters."""
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")

    x, y = coordinate.x, coordinate.y
    if not (MIN_LON <= x <= MAX_LON and MIN_LAT <= y <= MAX_LAT):
        logger.debug("Rejecting out of range coordinate %s", coordinate)
        raise InvalidCoordinateRange(coordinate)

    min_lon, max_lon = MIN_LON, MAX_LON
    min_lat, max_lat = MIN_LAT, MAX_LAT

    out = []
    bits_total = 0
    while len(out) < length:
        value = 0
        for _ in range(BITS_PER_CHAR):
            if bits_total % 2 == 0:
                mid = (min_lon + max_lon) / 2
                if x > mid:
                    value = (value << 1) | 1
                    min_lon = mid
                else:
                    value <<= 1
                    max_lon = mid
            else:
                mid = (min_lat + max_lat) / 2
                if y > mid:
                    value = (value << 1) | 1
                    min_lat = mid
                else:
                    value <<= 1
                    max_lat = mid
            bits_total += 1
        out.append(BASE16[value])

    return "".join(out)


def _char_value(char: str) -> int:
    """Map a hash character back to its 4-bit value."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    logger.debug("Rejecting hash character %r", char)
    raise InvalidHashCharacter(char)


def decode_bbox(geohash: str) -> Rect:
    """Decode a geohash into the rectangle it denotes.

    The empty string denotes the whole world.
    """
    min_lon, max_lon = MIN_LON, MAX_LON
    min_lat, max_lat = MIN_LAT, MAX_LAT
    is_lon = True

    for char in geohash:
        value = _char_value(char)
        for i in range(BITS_PER_CHAR):
            bit = (value >> (BITS_PER_CHAR - 1 - i)) & 1
            if is_lon:
                mid = (min_lon + max_lon) / 2
                if bit:
                    min_lon = mid
                else:
                    max_lon = mid
            else:
                mid = (min_lat + max_lat) / 2
                if bit:
                    min_lat = mid
                else:
                    max_lat = mid
            is_lon = not is_lon

    return Rect(
        min=Coordinate(x=min_lon, y=min_lat),
        max=Coordinate(x=max_lon, y=max_lat),
    )


def decode(geohash: str) -> tuple[Coordinate, float, float]:
    """Decode a geohash into ``(center, lon_err, lat_err)``.

    The errors are the half-widths of the cell, i.e. the furthest the
    original coordinate can lie from the returned center on each axis.
    """
    rect = decode_bbox(geohash)
    return (
        rect.center,
        (rect.max.x - rect.min.x) / 2,
        (rect.max.y - rect.min.y) / 2,
    )


def cell_error(length: int) -> tuple[float, float]:
    """Return ``(lon_err, lat_err)`` shared by every cell of ``length`` characters."""
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")

    bit_length = length * BITS_PER_CHAR
    lat_bits = bit_length // 2
    lon_bits = bit_length - lat_bits

    lon_err = (MAX_LON - MIN_LON) / (1 << lon_bits) / 2
    lat_err = (MAX_LAT - MIN_LAT) / (1 << lat_bits) / 2
    return lon_err, lat_err


def neighbor(geohash: str, direction: Direction) -> str:
    """Return the adjacent geohash of the same length in ``direction``.

    Cells on the antimeridian or at the poles have no neighbor across the
    edge; asking for one raises ``InvalidCoordinateRange``.
    """
    center, lon_err, lat_err = decode(geohash)
    dlat, dlng = direction.to_tuple()
    shifted = Coordinate(
        x=center.x + 2 * abs(lon_err) * dlng,
        y=center.y + 2 * abs(lat_err) * dlat,
    )
    return encode(shifted, len(geohash))


def neighbors(geohash: str) -> Neighbors:
    """Return all eight neighbors of a geohash.

    Directions are tried in ``NEIGHBOR_ORDER``; the first one that steps off
    the world raises and no partial result is returned.
    """
    return Neighbors(**{d.value: neighbor(geohash, d) for d in NEIGHBOR_ORDER})


class Geohash:
    """Encoder/decoder bound to a fixed hash length."""

    def __init__(self, length: int = 12):
        if length < 1:
            raise ValueError("Length must be at least 1")
        self.length = length

    @classmethod
    def from_config(cls, config: GeohashConfig) -> Geohash:
        """Build from a :class:`geohash16.config.GeohashConfig`."""
        return cls(length=config.default_length)

    def encode(self, coordinate: Coordinate) -> str:
        """Encode a coordinate at this instance's length."""
        return encode(coordinate, self.length)

    def _check_length(self, geohash: str) -> None:
        if len(geohash) != self.length:
            raise ValueError(
                f"Geohash length {len(geohash)} doesn't match length {self.length}"
            )

    def decode(self, geohash: str) -> tuple[Coordinate, float, float]:
        """Decode a geohash of this length into ``(center, lon_err, lat_err)``."""
        self._check_length(geohash)
        return decode(geohash)

    def decode_bbox(self, geohash: str) -> Rect:
        """Decode a geohash of this length into its bounding rectangle."""
        self._check_length(geohash)
        return decode_bbox(geohash)

    def cell_error(self) -> tuple[float, float]:
        """Return ``(lon_err, lat_err)`` for cells of this length."""
        return cell_error(self.length)

    def get_neighbors(self, geohash: str) -> dict[str, str]:
        """
        Compute the 8 neighboring geohashes (N, NE, E, SE, S, SW, W, NW).
        """
        self._check_length(geohash)
        return neighbors(geohash).as_dict()
