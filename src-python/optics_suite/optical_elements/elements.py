"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
OPTICAL ELEMENTS
===============================================================================
Parameter records for the supported elements and dispatch to their point
transforms.

    OpticalElement = PlaneMirror | ThinLens | ConcaveMirror
                   | ConvexMirror | AnamorphicArc | Prism

transform() is the per-pixel entry point and never raises. image_of() and
require_image() are the checked boundary for callers that want an explicit
"no image" result.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..core.constants import ANNULUS_RATIO, PRISM_RAY_EXTENT
from ..core.exceptions import NoImageError
from ..core.geometry import Point, geometry
from . import transforms
from .prisms.prism_geometry import PrismEdge, PrismGeometry, build_prism
from .prisms.ray_tracer import trace_ray


@dataclass(frozen=True)
class PlaneMirror:
    """Plane mirror along the y axis."""
    type = 'plane_mirror'


@dataclass(frozen=True)
class ThinLens:
    """Thin lens at x = 0 with focal length f."""
    type = 'thin_lens'

    focal_length: float


@dataclass(frozen=True)
class ConcaveMirror:
    """Concave spherical mirror, vertex at the origin, centre at (R, 0)."""
    type = 'concave_mirror'

    radius: float


@dataclass(frozen=True)
class ConvexMirror:
    """Convex spherical mirror of radius R centred at the origin."""
    type = 'convex_mirror'

    radius: float


@dataclass(frozen=True)
class AnamorphicArc:
    """Disc-to-annular-arc anamorphic projection."""
    type = 'anamorphic_arc'

    outer_radius: float
    arc_deg: float
    tau: float = ANNULUS_RATIO


@dataclass(frozen=True)
class Prism:
    """
    Isosceles dispersing prism at a single refractive index.

    Attributes:
        apex_angle_deg: Apex angle in degrees.
        n_glass: Refractive index of the glass.
        height: Apex-to-base height.
        extent: Length of the drawn exiting segment.

    Raises:
        ValueError: For an apex angle outside (0, 180) or non-positive
            height, at construction.
    """
    type = 'prism'

    apex_angle_deg: float
    n_glass: float
    height: float = 1.0
    extent: float = PRISM_RAY_EXTENT

    def __post_init__(self) -> None:
        build_prism(self.apex_angle_deg, self.height)

    @property
    def prism_geometry(self) -> PrismGeometry:
        return build_prism(self.apex_angle_deg, self.height)


OpticalElement = Union[PlaneMirror, ThinLens, ConcaveMirror, ConvexMirror, AnamorphicArc, Prism]


def _prism_transform(element: Prism, p: Point) -> Point:
    if not p.is_finite:
        return Point.nan()
    prism = element.prism_geometry
    target = prism.edge_midpoint(PrismEdge.LEFT)
    direction = geometry.sub(target, p)
    trace = trace_ray(prism, p, direction, element.n_glass, element.extent)
    if not trace.exited or trace.out_end is None:
        return Point.nan()
    return trace.out_end


def transform(element: OpticalElement, p: Point) -> Point:
    """
    Image of a point under an optical element.

    Dispatches to the ray-traced variant wherever a closed form and a traced
    form both exist.

    Args:
        element: Any member of the OpticalElement union.
        p: Object-space point.

    Returns:
        Image point, or Point.nan() when no image is formed.

    Raises:
        TypeError: If element is not an OpticalElement.
    """
    if isinstance(element, PlaneMirror):
        return transforms.plane_mirror_transform(p)
    elif isinstance(element, ThinLens):
        return transforms.thin_lens_transform(p, element.focal_length)
    elif isinstance(element, ConcaveMirror):
        return transforms.concave_mirror_pixel_transform(p, element.radius)
    elif isinstance(element, ConvexMirror):
        return transforms.convex_mirror_pixel_transform(p, element.radius)
    elif isinstance(element, AnamorphicArc):
        return transforms.disc_to_annular_arc_transform(
            p, element.outer_radius, element.arc_deg, element.tau
        )
    elif isinstance(element, Prism):
        return _prism_transform(element, p)
    raise TypeError(f"Unsupported optical element: {type(element).__name__}")


def image_of(element: OpticalElement, p: Point) -> Optional[Point]:
    """Image of p, or None when the element forms no image."""
    image = transform(element, p)
    return image if image.is_finite else None


def require_image(element: OpticalElement, p: Point) -> Point:
    """
    Image of p, raising when none exists.

    Raises:
        NoImageError: If the element forms no image of p.
    """
    image = image_of(element, p)
    if image is None:
        raise NoImageError(
            f"{element.type} forms no image of ({p.x}, {p.y})",
            element=element,
            point=p,
        )
    return image


def make_transform(element: OpticalElement) -> Callable[[Point], Point]:
    """Bind an element into a one-argument transform for pixel loops."""
    def _apply(p: Point) -> Point:
        return transform(element, p)
    return _apply
