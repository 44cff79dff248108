"""Geometry value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class Shape(Protocol):
    """An enclosed 2D area.

    Implemented structurally by Circle and Box.
    """

    def contains(self, p: Point) -> bool:
        """Check if the point is on or inside the shape."""
        ...

    @property
    def area(self) -> float:
        ...

    @property
    def perimeter(self) -> float:
        ...


@dataclass(frozen=True, slots=True)
class Point:
    """Point on the 2D plane. Stored in PostgreSQL as <point>."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Calculate Euclidean distance to another point."""
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def vector_to(self, other: Point) -> Vector:
        """Displacement from this point to another point."""
        return Vector(other.x - self.x, other.y - self.y)

    def translate(self, v: Vector) -> Point:
        return Point(self.x + v.x, self.y + v.y)

    def segment_to(self, v: Vector) -> Segment:
        """Segment from this point to this point translated by v."""
        return Segment(self, self.translate(v))

    def values(self) -> tuple[float, float]:
        return self.x, self.y

    def __add__(self, v: Vector) -> Point:
        if not isinstance(v, Vector):
            return NotImplemented
        return self.translate(v)

    def __sub__(self, other: Point) -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return other.vector_to(self)


@dataclass(frozen=True, slots=True)
class Vector:
    """Vector on the 2D plane. Stored in PostgreSQL as <point>.

    Never equal to a Point, even with the same components.
    """
    x: float
    y: float

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def unit(self) -> Vector:
        """Vector with the same angle and a magnitude of 1.

        The magnitude must be non-zero; the zero vector yields NaN components.
        """
        m = self.magnitude()
        if m == 0:
            return Vector(math.nan, math.nan)
        return Vector(self.x / m, self.y / m)

    def scale(self, n: float) -> Vector:
        return Vector(self.x * n, self.y * n)

    def angle(self) -> float:
        """Angle from the X axis in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def plus(self, *vs: Vector) -> Vector:
        """Sum of this vector and all the given vectors."""
        dx = self.x
        dy = self.y
        for v in vs:
            dx += v.x
            dy += v.y
        return Vector(dx, dy)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross_z(self, other: Vector) -> float:
        """Z component of the cross product with another vector.

        Both inputs lie in the X/Y plane, so the cross product is parallel to
        the Z axis; its sign gives the direction.
        """
        return self.x * other.y - self.y * other.x

    def as_segment(self) -> Segment:
        """Segment from the origin to the tip of this vector.

        Use Point.segment_to() to start anywhere else.
        """
        return ORIGIN.segment_to(self)

    def values(self) -> tuple[float, float]:
        return self.x, self.y

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.plus(other)

    def __neg__(self) -> Vector:
        return self.scale(-1)

    def __mul__(self, n: float) -> Vector:
        return self.scale(n)

    __rmul__ = __mul__


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle on the 2D plane. Stored in PostgreSQL as <circle>.

    The radius is not validated; a negative radius contains nothing
    but still has a positive area.
    """
    center: Point
    radius: float

    def contains(self, p: Point) -> bool:
        """Check if the point is on or inside the circle."""
        return self.center.distance_to(p) <= self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    @property
    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def bounding_box(self) -> Box:
        """Box tangent to the circle at its sides' midpoints."""
        c, r = self.center, self.radius
        return Box(Point(c.x - r, c.y - r), Point(c.x + r, c.y + r))

    def values(self) -> tuple[float, float, float]:
        return self.center.x, self.center.y, self.radius


@dataclass(frozen=True, slots=True)
class Segment:
    """Line segment between two ordered endpoints. Stored as <lseg>."""
    start: Point
    end: Point

    def __iter__(self) -> Iterator[Point]:
        """Allow unpacking: start, end = segment"""
        yield self.start
        yield self.end

    def magnitude(self) -> float:
        return self.start.distance_to(self.end)

    def as_box(self) -> Box:
        """Box whose opposite corners are the segment's endpoints."""
        return Box(self.start, self.end)

    def flip(self) -> Segment:
        return Segment(self.end, self.start)


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned rectangle. Stored in PostgreSQL as <box>.

    Any two opposite corners may be passed; they are normalized so that
    ``lower`` holds the smallest X and Y and ``upper`` the largest.
    A NaN coordinate makes that axis NaN on both corners.
    """
    lower: Point
    upper: Point

    def __post_init__(self) -> None:
        x1, x2 = _ordered(self.lower.x, self.upper.x)
        y1, y2 = _ordered(self.lower.y, self.upper.y)
        object.__setattr__(self, "lower", Point(x1, y1))
        object.__setattr__(self, "upper", Point(x2, y2))

    def __iter__(self) -> Iterator[Point]:
        yield self.lower
        yield self.upper

    @property
    def width(self) -> float:
        return self.upper.x - self.lower.x

    @property
    def height(self) -> float:
        return self.upper.y - self.lower.y

    @property
    def center(self) -> Point:
        return Point(
            (self.lower.x + self.upper.x) / 2,
            (self.lower.y + self.upper.y) / 2
        )

    @property
    def area(self) -> float:
        # normalized, so both sides are non-negative
        return self.width * self.height

    @property
    def perimeter(self) -> float:
        return 2 * self.width + 2 * self.height

    def contains(self, p: Point) -> bool:
        """Check if the point is on or inside the box."""
        return (
            self.lower.x <= p.x <= self.upper.x and
            self.lower.y <= p.y <= self.upper.y
        )


@dataclass(frozen=True, slots=True)
class Path:
    """Open or closed sequence of points. No encoding exists yet."""
    points: tuple[Point, ...]
    closed: bool = False

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


@dataclass(frozen=True, slots=True)
class Polygon:
    """Closed polygon. No encoding exists yet."""
    points: tuple[Point, ...]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


ORIGIN = Point(0.0, 0.0)
ZERO_VECTOR = Vector(0.0, 0.0)
BASIS_X = Vector(1.0, 0.0)
BASIS_Y = Vector(0.0, 1.0)


def _ordered(a: float, b: float) -> tuple[float, float]:
    # NaN on either side poisons the whole axis
    if math.isnan(a) or math.isnan(b):
        return math.nan, math.nan
    if a <= b:
        return a, b
    return b, a
