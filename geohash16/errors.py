"""Errors raised for malformed coordinates and hashes."""

from __future__ import annotations

from .types import Coordinate


class GeohashError(ValueError):
    """Base class for every input the geohash functions reject."""


class InvalidCoordinateRange(GeohashError):
    def __init__(self, coordinate: Coordinate) -> None:
        super().__init__(
            f"Invalid coordinate range: longitude {coordinate.x} must be between "
            f"-180 and 180, latitude {coordinate.y} must be between -90 and 90"
        )
        self.coordinate = coordinate


class InvalidHashCharacter(GeohashError):
    def __init__(self, character: str) -> None:
        super().__init__(f"Invalid character in geohash: {character!r}")
        self.character = character
