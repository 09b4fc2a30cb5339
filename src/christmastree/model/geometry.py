"""
Geometric primitives in design space.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """
    A point (or displacement) in 2D design space.

    Mutable on purpose: snowflakes move by updating their position in place.
    """
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def cross(self, other: Point) -> float:
        """Z component of the 3D cross product of two planar vectors."""
        return self.x * other.y - self.y * other.x

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Rgb:
    """An opaque color with float channels in [0, 1]."""
    r: float
    g: float
    b: float

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> Rgb:
        return cls(r / 255.0, g / 255.0, b / 255.0)

    def to_rgb8(self) -> tuple[int, int, int]:
        return round(self.r * 255), round(self.g * 255), round(self.b * 255)


@dataclass(frozen=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    def vertices(self) -> tuple[Point, Point, Point]:
        return self.a, self.b, self.c

    def point_at(self, u: float, v: float) -> Point:
        """
        Map barycentric weights to a point: a + u*(b - a) + v*(c - a).

        Any (u, v) with u, v >= 0 and u + v <= 1 lies inside the triangle.
        """
        return self.a + (self.b - self.a) * u + (self.c - self.a) * v

    def contains(self, p: Point, eps: float = 1e-9) -> bool:
        """
        Check whether `p` lies inside the triangle or on its boundary.

        Uses the sign of the cross product of each edge with the vector from the
        edge start to `p`; the point is inside when no two signs disagree.
        """
        d1 = (self.b - self.a).cross(p - self.a)
        d2 = (self.c - self.b).cross(p - self.b)
        d3 = (self.a - self.c).cross(p - self.c)

        has_neg = d1 < -eps or d2 < -eps or d3 < -eps
        has_pos = d1 > eps or d2 > eps or d3 > eps
        return not (has_neg and has_pos)
