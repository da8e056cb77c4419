"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
OPTICAL ELEMENTS MODULE
===============================================================================
Point transforms for mirrors, lenses and the anamorphic arc, the element
union that dispatches to them, and the prism ray tracer.

Sub-modules:
- transforms: closed-form and ray-traced point transforms
- elements: element records, transform() dispatch, image_of/require_image
- prisms: prism geometry and single-ray tracing
===============================================================================
"""

from . import transforms
from .elements import (
    AnamorphicArc,
    ConcaveMirror,
    ConvexMirror,
    OpticalElement,
    PlaneMirror,
    Prism,
    ThinLens,
    image_of,
    make_transform,
    require_image,
    transform,
)
from .prisms import (
    PrismGeometry,
    PrismRayTrace,
    TraceStatus,
    build_prism,
    prism_utils,
    refract,
    trace_prism_ray,
    trace_ray,
    trace_spectrum,
)

__all__ = [
    'transforms',
    # Elements
    'AnamorphicArc',
    'ConcaveMirror',
    'ConvexMirror',
    'OpticalElement',
    'PlaneMirror',
    'Prism',
    'ThinLens',
    'image_of',
    'make_transform',
    'require_image',
    'transform',
    # Prisms
    'PrismGeometry',
    'PrismRayTrace',
    'TraceStatus',
    'build_prism',
    'prism_utils',
    'refract',
    'trace_prism_ray',
    'trace_ray',
    'trace_spectrum',
]
