"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
PRISM RAY TRACER
===============================================================================
Traces a single ray (one wavelength) through an isosceles prism:

    source --(air)--> entry --(glass)--> inside_exit --(air)--> out_end

Each trace ends in one of three terminal states:
- EXITED: refracted out through a second face
- TOTAL_INTERNAL_REFLECTION: Snell's law has no real solution at an interface
- NO_INTERSECTION: the ray misses the prism, or grazes so that no valid
  exit face is found

Failures are reported per ray through the status/tir flag; nothing raises.
===============================================================================
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence

from shapely.geometry import LineString

from ...core.constants import EPSILON, PRISM_RAY_EXTENT
from ...core.geometry import Line, Point, geometry
from ...materials.dispersion import crown_glass_index
from .prism_geometry import PrismEdge, PrismGeometry

logger = logging.getLogger(__name__)


class TraceStatus(Enum):
    EXITED = "exited"
    TOTAL_INTERNAL_REFLECTION = "total_internal_reflection"
    NO_INTERSECTION = "no_intersection"


@dataclass(frozen=True)
class PrismRayTrace:
    """
    Geometry of one traced ray.

    Attributes:
        source: Start of the incident segment.
        status: Terminal state of the trace.
        entry: Point where the ray enters the glass (None if it missed).
        inside_exit: Point where the internal ray meets the second face.
        out_end: End of the drawn exiting segment.
        entry_edge: Face the ray entered through.
        exit_edge: Face the internal ray reached.
        incident_direction: Unit direction in air before entry.
        internal_direction: Unit direction inside the glass.
        exit_direction: Unit direction in air after exit.
    """
    source: Point
    status: TraceStatus
    entry: Optional[Point] = None
    inside_exit: Optional[Point] = None
    out_end: Optional[Point] = None
    entry_edge: Optional[PrismEdge] = None
    exit_edge: Optional[PrismEdge] = None
    incident_direction: Optional[Point] = None
    internal_direction: Optional[Point] = None
    exit_direction: Optional[Point] = None

    @property
    def tir(self) -> bool:
        return self.status is TraceStatus.TOTAL_INTERNAL_REFLECTION

    @property
    def exited(self) -> bool:
        return self.status is TraceStatus.EXITED

    def points(self) -> List[Point]:
        """The polyline source -> entry -> inside_exit -> out_end, truncated at the first gap."""
        pts = [self.source]
        for p in (self.entry, self.inside_exit, self.out_end):
            if p is None:
                break
            pts.append(p)
        return pts

    def segments(self, include_incident: bool = True) -> List[Line]:
        """Consecutive segments of the polyline (incident, internal, exiting)."""
        pts = self.points()
        lines = [Line(a, b) for a, b in zip(pts, pts[1:])]
        return lines if include_incident else lines[1:]

    def to_shapely(self) -> Optional[LineString]:
        """The traced path as a Shapely LineString (None for a bare source)."""
        pts = self.points()
        if len(pts) < 2:
            return None
        return LineString([(p.x, p.y) for p in pts])

    def deviation_deg(self) -> float:
        """Angle between incident and exit directions; NaN unless EXITED."""
        if not self.exited or self.incident_direction is None or self.exit_direction is None:
            return math.nan
        c = geometry.dot(self.incident_direction, self.exit_direction)
        return math.degrees(math.acos(max(-1.0, min(1.0, c))))


@dataclass(frozen=True)
class SpectrumTrace:
    """One wavelength of a dispersed beam."""
    wavelength_nm: float
    n: float
    trace: PrismRayTrace


# =============================================================================
# Vector Snell's Law
# =============================================================================

def refract(
    incident: Point,
    normal: Point,
    n1: float,
    n2: float,
    eps: float = EPSILON
) -> Optional[Point]:
    """
    Refract a direction at an interface (vector form of Snell's law).

    The normal is auto-oriented to point into the incident medium
    (flipped when -i.n < 0), so either face normal may be passed.

        eta = n1 / n2
        cos_i = -i.n
        k = 1 - eta^2 (1 - cos_i^2)
        t = eta i + (eta cos_i - sqrt(k)) n

    Args:
        incident: Incident direction (need not be unit length).
        normal: Surface normal (either orientation).
        n1: Index of the incident medium.
        n2: Index of the transmitting medium.

    Returns:
        Unit refracted direction, or None for total internal reflection
        (k < eps, which also treats exact grazing emergence as TIR).
    """
    i = geometry.normalize_vec(incident)
    n = geometry.normalize_vec(normal)

    if -geometry.dot(i, n) < 0:
        n = geometry.neg(n)

    eta = n1 / n2
    cos_i = max(-1.0, min(1.0, -geometry.dot(i, n)))
    k = 1.0 - eta * eta * (1.0 - cos_i * cos_i)
    if k < eps:
        return None

    t = geometry.add(geometry.scale(i, eta), geometry.scale(n, eta * cos_i - math.sqrt(k)))
    return geometry.normalize_vec(t)


# =============================================================================
# Tracing
# =============================================================================

def _nearest_hit(
    prism: PrismGeometry,
    origin: Point,
    direction: Point,
    edges: Iterable[PrismEdge]
) -> Optional[tuple]:
    best = None
    for edge in edges:
        a, b = prism.edge(edge)
        hit = geometry.ray_segment_intersection(origin, direction, a, b)
        if hit is not None and (best is None or hit.t < best[1].t):
            best = (edge, hit)
    return best


def trace_ray(
    prism: PrismGeometry,
    source: Point,
    direction: Point,
    n_glass: float,
    extent: float = PRISM_RAY_EXTENT,
    n_outside: float = 1.0
) -> PrismRayTrace:
    """
    Trace a ray from an external source through the prism.

    The ray enters through the nearest face it meets, is refracted into the
    glass, propagates to the nearest of the two remaining faces, and is
    refracted back out.

    Args:
        prism: Prism geometry.
        source: Ray origin (outside the prism).
        direction: Ray direction in air.
        n_glass: Refractive index of the prism.
        extent: Length of the drawn exiting segment.
        n_outside: Refractive index of the surrounding medium.

    Returns:
        PrismRayTrace with as much of the path as was formed.
    """
    d = geometry.normalize_vec(direction)
    if d.x == 0 and d.y == 0:
        return PrismRayTrace(source, TraceStatus.NO_INTERSECTION)

    first = _nearest_hit(prism, source, d, PrismEdge)
    if first is None:
        return PrismRayTrace(source, TraceStatus.NO_INTERSECTION, incident_direction=d)
    entry_edge, entry_hit = first
    entry = entry_hit.point

    inside = refract(d, prism.outward_normal(entry_edge), n_outside, n_glass)
    if inside is None:
        return PrismRayTrace(
            source, TraceStatus.TOTAL_INTERNAL_REFLECTION,
            entry=entry, entry_edge=entry_edge, incident_direction=d,
        )

    remaining = [e for e in PrismEdge if e is not entry_edge]
    second = _nearest_hit(prism, entry, inside, remaining)
    if second is None:
        return PrismRayTrace(
            source, TraceStatus.NO_INTERSECTION,
            entry=entry, entry_edge=entry_edge,
            incident_direction=d, internal_direction=inside,
        )
    exit_edge, exit_hit = second
    inside_exit = exit_hit.point

    out_dir = refract(inside, prism.outward_normal(exit_edge), n_glass, n_outside)
    if out_dir is None:
        return PrismRayTrace(
            source, TraceStatus.TOTAL_INTERNAL_REFLECTION,
            entry=entry, inside_exit=inside_exit,
            entry_edge=entry_edge, exit_edge=exit_edge,
            incident_direction=d, internal_direction=inside,
        )

    return PrismRayTrace(
        source, TraceStatus.EXITED,
        entry=entry,
        inside_exit=inside_exit,
        out_end=geometry.add(inside_exit, geometry.scale(out_dir, extent)),
        entry_edge=entry_edge,
        exit_edge=exit_edge,
        incident_direction=d,
        internal_direction=inside,
        exit_direction=out_dir,
    )


def incident_direction(prism: PrismGeometry, incidence_angle_deg: float, extent: float = PRISM_RAY_EXTENT) -> tuple:
    """
    Incident direction making the given angle with the left face's top-left normal.

    There are two mirror-image candidates, i = -cos(theta) n +/- sin(theta) t.
    The one whose back-projected source lies further right is chosen, since
    the scene is drawn with the light source on the right.

    Returns:
        (direction, source) tuple.
    """
    theta = math.radians(incidence_angle_deg)
    entry = prism.edge_midpoint(PrismEdge.LEFT)
    n = prism.top_left_normal
    t = prism.tangent(PrismEdge.LEFT)

    along_normal = geometry.scale(n, -math.cos(theta))
    i1 = geometry.normalize_vec(geometry.add(along_normal, geometry.scale(t, math.sin(theta))))
    i2 = geometry.normalize_vec(geometry.add(along_normal, geometry.scale(t, -math.sin(theta))))

    src1 = geometry.add(entry, geometry.scale(i1, -extent))
    src2 = geometry.add(entry, geometry.scale(i2, -extent))
    if src1.x > src2.x:
        return i1, src1
    return i2, src2


def trace_prism_ray(
    prism: PrismGeometry,
    incidence_angle_deg: float,
    n_glass: float,
    extent: float = PRISM_RAY_EXTENT
) -> PrismRayTrace:
    """
    Trace a ray aimed at the middle of the left face at a given incidence angle.

    Args:
        prism: Prism geometry.
        incidence_angle_deg: Angle to the left face's top-left normal.
        n_glass: Refractive index of the prism at this wavelength.
        extent: Source distance and length of the drawn exiting segment.

    Returns:
        PrismRayTrace. A ray that does not enter through the left face
        (grazing incidence at 90 degrees clips the apex instead) is
        NO_INTERSECTION with no entry point.

    Example:
        >>> trace = trace_prism_ray(build_prism(60.0), 50.0, 1.5)
        >>> trace.exited
        True
    """
    direction, source = incident_direction(prism, incidence_angle_deg, extent)
    trace = trace_ray(prism, source, direction, n_glass, extent)
    if trace.entry is not None and trace.entry_edge is not PrismEdge.LEFT:
        return PrismRayTrace(source, TraceStatus.NO_INTERSECTION, incident_direction=direction)
    return trace


def trace_spectrum(
    prism: PrismGeometry,
    incidence_angle_deg: float,
    wavelengths_nm: Sequence[float],
    index_fn: Callable[[float], float] = crown_glass_index,
    extent: float = PRISM_RAY_EXTENT
) -> List[SpectrumTrace]:
    """
    Trace one ray per wavelength at a fixed incidence angle.

    Wavelengths for which index_fn is undefined are skipped.
    """
    results = []
    for wl in wavelengths_nm:
        n = index_fn(wl)
        if not math.isfinite(n):
            continue
        results.append(SpectrumTrace(wl, n, trace_prism_ray(prism, incidence_angle_deg, n, extent)))

    tir_count = sum(1 for r in results if r.trace.tir)
    if tir_count:
        logger.debug(
            f"{tir_count}/{len(results)} wavelengths totally internally reflected "
            f"(apex={prism.apex_angle_deg}, incidence={incidence_angle_deg})"
        )
    return results


def any_tir(traces: Iterable[SpectrumTrace]) -> bool:
    """True if any wavelength in the spectrum was totally internally reflected."""
    return any(t.trace.tir for t in traces)
