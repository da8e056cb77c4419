"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional

from shapely.geometry import LineString, Point as ShapelyPoint

from .constants import EPSILON, PARALLEL_THRESHOLD


@dataclass(frozen=True)
class Point:
    """
    A point (or vector) in a local, unit-free 2D Cartesian frame.

    Both components are finite, or both are NaN. The all-NaN point is the
    "no image formed" sentinel returned by the transforms.
    """
    x: float
    y: float

    @classmethod
    def nan(cls) -> 'Point':
        """The 'undefined' sentinel point."""
        return cls(math.nan, math.nan)

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Point':
        """Create Point from Shapely Point."""
        return cls(sp.x, sp.y)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


class Line:
    """
    A line in 2D space, defined by two points.
    Can represent a line, ray, or segment depending on context.
    - As a line: p1 and p2 are two distinct points on the line.
    - As a ray: p1 is the starting point and p2 is another point on the ray.
    - As a segment: p1 and p2 are the two endpoints.
    """
    def __init__(self, p1: Point, p2: Point):
        self.p1 = p1
        self.p2 = p2

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.p1.x, self.p1.y), (self.p2.x, self.p2.y)])

    def __repr__(self) -> str:
        return f"Line(p1={self.p1}, p2={self.p2})"


class SegmentHit(NamedTuple):
    """Ray/segment intersection: ray parameter t, segment parameter u, and the point."""
    t: float
    u: float
    point: Point


class Geometry:
    """
    Basic vector operations and intersections on Point values.

    All operations are pure; vectors are represented as Points.
    """

    @staticmethod
    def add(p1: Point, p2: Point) -> Point:
        return Point(p1.x + p2.x, p1.y + p2.y)

    @staticmethod
    def sub(p1: Point, p2: Point) -> Point:
        return Point(p1.x - p2.x, p1.y - p2.y)

    @staticmethod
    def scale(p1: Point, k: float) -> Point:
        return Point(p1.x * k, p1.y * k)

    @staticmethod
    def neg(p1: Point) -> Point:
        return Point(-p1.x, -p1.y)

    @staticmethod
    def dot(p1: Point, p2: Point) -> float:
        """
        Calculate the dot product, where the two points are treated as vectors.

        Args:
            p1: First point (as vector)
            p2: Second point (as vector)

        Returns:
            Dot product
        """
        return p1.x * p2.x + p1.y * p2.y

    @staticmethod
    def cross(p1: Point, p2: Point) -> float:
        """
        Calculate the cross product, where the two points are treated as vectors.

        Args:
            p1: First point (as vector)
            p2: Second point (as vector)

        Returns:
            Cross product (z-component in 2D)
        """
        return p1.x * p2.y - p1.y * p2.x

    @staticmethod
    def length(p1: Point) -> float:
        return math.hypot(p1.x, p1.y)

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        return math.hypot(p1.x - p2.x, p1.y - p2.y)

    @staticmethod
    def midpoint(p1: Point, p2: Point) -> Point:
        return Point((p1.x + p2.x) * 0.5, (p1.y + p2.y) * 0.5)

    @staticmethod
    def normalize_vec(p1: Point) -> Point:
        """
        Normalize the given point as if it were a vector.

        The zero vector normalizes to itself instead of dividing by zero.
        """
        len_val = math.hypot(p1.x, p1.y)
        if len_val == 0:
            return Point(0.0, 0.0)
        return Point(p1.x / len_val, p1.y / len_val)

    @staticmethod
    def perp_right(p1: Point) -> Point:
        """Rotate a vector 90 degrees clockwise."""
        return Point(p1.y, -p1.x)

    @staticmethod
    def reflect_vec(d: Point, n: Point) -> Point:
        """
        Reflect direction d about a unit normal n: r = d - 2(d.n)n.
        """
        k = 2.0 * (d.x * n.x + d.y * n.y)
        return Point(d.x - k * n.x, d.y - k * n.y)

    @staticmethod
    def lines_intersection(l1: Line, l2: Line) -> Point:
        """
        Calculate the intersection of two infinite lines.

        Returns:
            Intersection point, or Point.nan() for parallel/coincident lines.
        """
        A = l1.p2.x * l1.p1.y - l1.p1.x * l1.p2.y
        B = l2.p2.x * l2.p1.y - l2.p1.x * l2.p2.y
        xa = l1.p2.x - l1.p1.x
        xb = l2.p2.x - l2.p1.x
        ya = l1.p2.y - l1.p1.y
        yb = l2.p2.y - l2.p1.y

        denominator = xa * yb - xb * ya

        if abs(denominator) < PARALLEL_THRESHOLD:
            return Point.nan()

        x = (A * xb - B * xa) / denominator
        y = (A * yb - B * ya) / denominator

        return Point(x, y)

    @staticmethod
    def ray_segment_intersection(
        origin: Point,
        direction: Point,
        a: Point,
        b: Point,
        eps: float = EPSILON
    ) -> Optional[SegmentHit]:
        """
        Intersect the ray origin + t*direction (t >= 0) with segment a + u*(b - a).

        A hit is accepted for t >= eps and -eps <= u <= 1 + eps. Rays parallel
        to the segment (|cross| < eps) give no hit, so grazing geometry
        degrades to "no intersection" rather than a division artifact.

        Returns:
            SegmentHit, or None.
        """
        sx = b.x - a.x
        sy = b.y - a.y
        denom = direction.x * sy - direction.y * sx
        if abs(denom) < eps:
            return None
        apx = a.x - origin.x
        apy = a.y - origin.y
        t = (apx * sy - apy * sx) / denom
        u = (apx * direction.y - apy * direction.x) / denom
        if t >= eps and -eps <= u <= 1 + eps:
            return SegmentHit(t, u, Point(origin.x + direction.x * t, origin.y + direction.y * t))
        return None


# Create a singleton instance for convenience
geometry = Geometry()
