"""
Point in the aircraft reference frame.

Origin at the nose, x positive aft, y positive starboard, z positive up.
All coordinates in feet.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple


@dataclass(frozen=True)
class Point:
    """
    Immutable (x, y, z) triple.

    Used both as a position and as a weight-moment accumulator
    (position * weight, in lb-ft).
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def origin(cls) -> "Point":
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Point":
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Point":
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "z": self.z}
