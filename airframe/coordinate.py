"""
Weighted 3-D coordinates for airframe geometry.

Positions are measured along the rocket axis from the nose tip (x), with
y and z in the cross-section plane. Each coordinate carries a weight,
which is mass for CG positions and CN_alpha for centers of pressure.
CG positions combine by weighted average; the aggregate center of
pressure is a plain running midpoint.
"""
from dataclasses import dataclass


# Tolerance used for geometric equality checks (m)
EPSILON = 1e-8


def fuzzy_equals(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Relative floating-point equality with an absolute floor near zero."""
    absb = abs(b)
    if absb < epsilon / 2:
        return abs(a) < epsilon / 2
    return abs(a - b) < epsilon * absb


@dataclass(frozen=True)
class Coordinate:
    """Immutable (x, y, z) position with an associated weight"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    weight: float = 0.0

    def add(self, x: float, y: float = 0.0, z: float = 0.0) -> "Coordinate":
        """Translate the coordinate, keeping its weight"""
        return Coordinate(self.x + x, self.y + y, self.z + z, self.weight)

    def with_weight(self, weight: float) -> "Coordinate":
        return Coordinate(self.x, self.y, self.z, weight)

    def average(self, other: "Coordinate") -> "Coordinate":
        """
        Weighted average of two coordinates.

        The result carries the summed weight. When the summed weight is
        (numerically) zero the plain midpoint is returned with zero weight.
        """
        if other is None:
            return self

        w = self.weight + other.weight
        if abs(w) < EPSILON ** 2:
            return Coordinate(
                (self.x + other.x) / 2,
                (self.y + other.y) / 2,
                (self.z + other.z) / 2,
                0.0,
            )

        return Coordinate(
            (self.x * self.weight + other.x * other.weight) / w,
            (self.y * self.weight + other.y * other.weight) / w,
            (self.z * self.weight + other.z * other.weight) / w,
            w,
        )

    def midpoint(self, other: "Coordinate") -> "Coordinate":
        """Unweighted midpoint of two coordinates, carrying the summed weight"""
        return Coordinate(
            (self.x + other.x) / 2,
            (self.y + other.y) / 2,
            (self.z + other.z) / 2,
            self.weight + other.weight,
        )


Coordinate.NUL = Coordinate()
