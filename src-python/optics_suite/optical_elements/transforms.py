"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
POINT TRANSFORMS
===============================================================================
Closed-form and ray-traced maps from an object-space point to its image
under a single optical element.

Every function here is total: when no image is formed (object at the focal
point, outside the aperture, vanishing denominator) it returns Point.nan()
instead of raising. They are called once per source pixel, so the caller
filters with Point.is_finite.

Coordinate conventions:
- Lenses and mirrors sit at x = 0 with the optical axis along x.
- Objects are placed at x > 0 (object distance u = x).
- The concave mirror has its vertex at the origin and its centre of
  curvature at (R, 0).
- The convex mirror is the circle of radius R centred at the origin, seen
  from x > 0.
===============================================================================
"""

from __future__ import annotations

import math

from ..core.constants import ANNULUS_RATIO, EPSILON
from ..core.geometry import Line, Point, geometry


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


# =============================================================================
# Plane Mirror
# =============================================================================

def plane_mirror_transform(p: Point) -> Point:
    """
    Virtual image in a plane mirror lying along the y axis: (x, y) -> (-x, y).

    The map is an involution.
    """
    return Point(-p.x, p.y)


# =============================================================================
# Thin Lens
# =============================================================================

def image_distance(u: float, f: float, eps: float = EPSILON) -> float:
    """
    Image distance from the thin lens equation 1/u + 1/v = 1/f.

    Returns:
        v = 1 / (1/f - 1/u), or NaN when u = 0, f = 0 or u = f.
    """
    if not _finite(u, f) or abs(u) < eps or abs(f) < eps or abs(u - f) < eps:
        return math.nan
    return 1.0 / (1.0 / f - 1.0 / u)


def thin_lens_transform(p: Point, f: float, eps: float = EPSILON) -> Point:
    """
    Image of a point through a thin lens of focal length f.

    With u = x, v = 1/(1/f - 1/u) and magnification M = -v/u, the image is
    at (-v, y*M). Real images (u > f) land on the far side of the lens;
    virtual images (0 < u < f) land on the object side, upright and enlarged.

    Args:
        p: Object point.
        f: Focal length (positive for a converging lens).

    Returns:
        Image point, or Point.nan() when u = 0 or u = f.
    """
    v = image_distance(p.x, f, eps)
    if not _finite(v, p.y):
        return Point.nan()
    magnification = -v / p.x
    return Point(-v, p.y * magnification)


def thin_lens_real_image(p: Point, f: float) -> Point:
    """Real, inverted image only: defined for u > f > 0."""
    if not (f > 0 and p.x > f):
        return Point.nan()
    return thin_lens_transform(p, f)


def thin_lens_virtual_image(p: Point, f: float) -> Point:
    """Virtual, upright image only: defined for 0 < u < f."""
    if not (0 < p.x < f):
        return Point.nan()
    return thin_lens_transform(p, f)


# =============================================================================
# Concave Spherical Mirror
# =============================================================================

def concave_mirror_transform(p: Point, R: float, eps: float = EPSILON) -> Point:
    """
    Paraxial image in a concave mirror of radius R (mirror equation, f = R/2).

    The image forms on the object side at (v, y*M) with M = -v/u.

    Returns:
        Image point, or Point.nan() for R <= 0, u <= 0 or u = f.
    """
    if not _finite(p.x, p.y, R) or R <= 0 or p.x <= 0:
        return Point.nan()
    v = image_distance(p.x, R / 2.0, eps)
    if not math.isfinite(v):
        return Point.nan()
    return Point(v, p.y * (-v / p.x))


def concave_mirror_pixel_transform(p: Point, R: float, eps: float = EPSILON) -> Point:
    """
    Ray-traced image in a concave spherical mirror.

    Two rays leave the object point:
    1. A ray parallel to the axis meets the sphere at M and is reflected
       about the local surface normal (which points at the centre).
    2. The chief ray through the centre of curvature C = (R, 0), which
       retraces itself.
    The image is where the two cross. Unlike the paraxial version this
    keeps spherical aberration.

    Returns:
        Image point, or Point.nan() when the parallel ray misses the mirror
        (|y| >= R), the object sits at C, or the rays are parallel.
    """
    x, y = p.x, p.y
    if not _finite(x, y, R) or R <= 0 or x <= 0:
        return Point.nan()
    if abs(y) >= R:
        return Point.nan()

    # On axis both rays coincide with the axis; use the paraxial image
    if abs(y) < eps:
        return concave_mirror_transform(p, R, eps)

    c = math.sqrt(R * R - y * y)
    hit = Point(R - c, y)
    normal = Point(c / R, -y / R)
    reflected = geometry.reflect_vec(Point(-1.0, 0.0), normal)

    centre = Point(R, 0.0)
    if geometry.distance(p, centre) < eps:
        return Point.nan()

    image = geometry.lines_intersection(
        Line(hit, geometry.add(hit, reflected)),
        Line(p, centre),
    )
    if not image.is_finite:
        return Point.nan()
    return image


# =============================================================================
# Convex Spherical Mirror
# =============================================================================

def _convex_on_axis(x: float, R: float, eps: float) -> Point:
    # Limit of the half-angle solution as y -> 0: X = xR / (2x - R)
    denom = 2.0 * x - R
    if abs(denom) < eps:
        return Point.nan()
    return Point(x * R / denom, 0.0)


def _convex_half_angle(x: float, y: float, alpha: float, R: float, eps: float) -> Point:
    c2a = math.cos(2.0 * alpha)
    if abs(c2a) < eps:
        return Point.nan()

    k = x / c2a

    # Must be (x / y), not (y / x)
    denom = k / R - math.cos(alpha) + (x / y) * math.sin(alpha)
    if abs(denom) < eps:
        return Point.nan()

    Y = (k * math.sin(alpha)) / denom
    X = x * (Y / y)
    return Point(X, Y)


def convex_mirror_pixel_transform(p: Point, R: float, eps: float = EPSILON) -> Point:
    """
    Virtual image in a convex mirror of radius R, pixel-exact.

    Half-angle method: with alpha = atan2(y, x) / 2 the reflecting point is
    R(cos alpha, sin alpha); the image lies on the line from the centre to
    the object, at

        k = x / cos(2 alpha)
        Y = k sin(alpha) / (k/R - cos(alpha) + (x/y) sin(alpha))
        X = x * Y / y

    Args:
        p: Object point, right of the centre.
        R: Mirror radius.

    Returns:
        Image point, or Point.nan() for x <= 0, |y| >= R, or a vanishing
        denominator. On-axis objects (|y| < eps) take the y -> 0 limit
        (xR / (2x - R), 0) rather than the origin.
    """
    x, y = p.x, p.y
    if not _finite(x, y, R) or R <= 0:
        return Point.nan()
    if x <= 0:
        return Point.nan()
    if abs(y) >= R:
        return Point.nan()
    if abs(y) < eps:
        return _convex_on_axis(x, R, eps)

    alpha = 0.5 * math.atan2(y, x)
    return _convex_half_angle(x, y, alpha, R, eps)


def convex_mirror_virtual_image(p: Point, R: float, eps: float = EPSILON) -> Point:
    """
    Closed-form convex-mirror image without aperture clipping.

    Same half-angle solution as convex_mirror_pixel_transform, with
    alpha = atan(y/x) / 2, accepted for any x != 0 and any height.
    """
    x, y = p.x, p.y
    if not _finite(x, y, R) or R <= 0:
        return Point.nan()
    if abs(x) < eps:
        return Point.nan()
    if abs(y) < eps:
        return _convex_on_axis(x, R, eps)

    alpha = 0.5 * math.atan(y / x)
    return _convex_half_angle(x, y, alpha, R, eps)


# =============================================================================
# Anamorphic Disc -> Annular Arc
# =============================================================================

def disc_to_annular_arc_transform(
    p: Point,
    outer_radius: float,
    arc_deg: float,
    tau: float = ANNULUS_RATIO,
    eps: float = EPSILON
) -> Point:
    """
    Map the unit disc onto an annular arc (anamorphic projection).

    The radius maps linearly onto [R_in, R_out] with R_in = tau * R_out, and
    the polar angle (-pi, pi] maps linearly onto an arc of span arc_deg
    centred on the +x axis.

    Args:
        p: Point in normalized disc coordinates.
        outer_radius: Outer radius R_out of the annulus.
        arc_deg: Angular span of the arc in degrees.
        tau: Inner/outer radius ratio.

    Returns:
        Mapped point, or Point.nan() for points outside the unit disc.
    """
    x, y = p.x, p.y
    if not _finite(x, y, outer_radius, arc_deg):
        return Point.nan()

    rho_sq = x * x + y * y
    if rho_sq > 1 + eps:
        return Point.nan()

    rho = min(1.0, math.sqrt(max(0.0, rho_sq)))
    phi = math.atan2(y, x)

    span = math.radians(max(eps, arc_deg))
    r_out = max(eps, outer_radius)
    r_in = min(max(eps, tau * r_out), r_out - eps)

    r_prime = r_in + (r_out - r_in) * rho
    theta_prime = -0.5 * span + span * (phi + math.pi) / (2 * math.pi)

    return Point(r_prime * math.cos(theta_prime), r_prime * math.sin(theta_prime))
