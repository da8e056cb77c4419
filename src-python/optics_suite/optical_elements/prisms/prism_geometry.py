"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
ISOSCELES PRISM GEOMETRY
===============================================================================
Physics-driven geometry for the dispersing prism: the triangle is built from
its apex angle and height, so callers never specify raw vertices.

Vertex layout:

    Coordinate system: +X = East, +Y = North (y-up maths frame)

                  V2 (apex)
                  / \\
     Edge 2:     /   \\   Edge 1: Right Face (X)
     Left Face  /     \\
     (E)       V0-----V1
                Edge 0: Base (B)

    Vertex traversal V0 -> V1 -> V2 -> V0 is counterclockwise (positive
    signed area). Edge i connects vertex i to vertex (i + 1) % 3.

Normals:
    For a CCW polygon the outward normal of an edge is its tangent rotated
    clockwise. The outward normal of the left face points to the top-left;
    incidence angles are measured against it.
===============================================================================
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Tuple

from shapely.geometry import Polygon

from ...core.geometry import Point, geometry


class PrismEdge(IntEnum):
    """Edge indices in path order."""
    BASE = 0
    RIGHT = 1
    LEFT = 2


# Functional labels (short, long) per edge
EDGE_LABELS: Dict[PrismEdge, Tuple[str, str]] = {
    PrismEdge.BASE: ("B", "Base"),
    PrismEdge.RIGHT: ("X", "Right Face"),
    PrismEdge.LEFT: ("E", "Left Face"),
}


@dataclass(frozen=True)
class PrismGeometry:
    """
    Isosceles triangular prism centred on the origin.

    Attributes:
        apex_angle_deg: Apex angle in degrees.
        height: Apex-to-base height.
        vertices: (base_left, base_right, apex) in CCW order.
    """
    apex_angle_deg: float
    height: float
    vertices: Tuple[Point, Point, Point]

    @property
    def base_left(self) -> Point:
        return self.vertices[0]

    @property
    def base_right(self) -> Point:
        return self.vertices[1]

    @property
    def apex(self) -> Point:
        return self.vertices[2]

    def edge(self, edge: PrismEdge) -> Tuple[Point, Point]:
        """Endpoints (A, B) of an edge, in path order."""
        i = int(edge)
        return self.vertices[i], self.vertices[(i + 1) % 3]

    def tangent(self, edge: PrismEdge) -> Point:
        """Unit tangent from A to B."""
        a, b = self.edge(edge)
        return geometry.normalize_vec(geometry.sub(b, a))

    def outward_normal(self, edge: PrismEdge) -> Point:
        """Unit outward normal (tangent rotated clockwise)."""
        return geometry.perp_right(self.tangent(edge))

    @property
    def top_left_normal(self) -> Point:
        """Outward normal of the left face; points to the top-left."""
        return self.outward_normal(PrismEdge.LEFT)

    def edge_midpoint(self, edge: PrismEdge) -> Point:
        a, b = self.edge(edge)
        return geometry.midpoint(a, b)

    def signed_area(self) -> float:
        """Shoelace area; positive for CCW winding."""
        area = 0.0
        for i in range(3):
            p, q = self.vertices[i], self.vertices[(i + 1) % 3]
            area += p.x * q.y - q.x * p.y
        return area / 2.0

    @property
    def polygon(self) -> Polygon:
        """The prism body as a Shapely Polygon."""
        return Polygon([(v.x, v.y) for v in self.vertices])

    def interior_angle(self, vertex_index: int) -> float:
        """Interior angle at a vertex, in degrees."""
        v = self.vertices[vertex_index]
        prev_v = self.vertices[(vertex_index - 1) % 3]
        next_v = self.vertices[(vertex_index + 1) % 3]
        a = geometry.normalize_vec(geometry.sub(prev_v, v))
        b = geometry.normalize_vec(geometry.sub(next_v, v))
        return math.degrees(math.acos(max(-1.0, min(1.0, geometry.dot(a, b)))))


@lru_cache(maxsize=64)
def build_prism(apex_angle_deg: float, height: float = 1.0) -> PrismGeometry:
    """
    Build an isosceles prism from its apex angle.

    The base half-width is tan(apex/2) * height; the base sits at
    y = -height/2 and the apex at y = +height/2.

    Args:
        apex_angle_deg: Apex angle in degrees, strictly between 0 and 180.
        height: Apex-to-base height (> 0).

    Returns:
        PrismGeometry (immutable, cached per parameter set).

    Raises:
        ValueError: For an apex angle outside (0, 180) or non-positive height.

    Example:
        >>> prism = build_prism(60.0)
        >>> round(prism.interior_angle(2), 6)
        60.0
    """
    if not (0.0 < apex_angle_deg < 180.0):
        raise ValueError(
            f"apex_angle_deg must be in (0, 180), got {apex_angle_deg}"
        )
    if not height > 0:
        raise ValueError(f"height must be positive, got {height}")

    half_base = math.tan(math.radians(apex_angle_deg) / 2.0) * height
    vertices = (
        Point(-half_base, -height / 2.0),
        Point(half_base, -height / 2.0),
        Point(0.0, height / 2.0),
    )
    return PrismGeometry(apex_angle_deg, height, vertices)
