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

Optics Suite
============

Geometric optics calculations for teaching: refractive-index models, point
transforms for mirrors and lenses, a prism ray tracer, rainbow angles and
least-time paths.

Main modules:
- core: Point/geometry helpers, constants, exceptions, root finders
- materials: Dispersion models for crown glass and water
- optical_elements: Point transforms, element dispatch, prism tracing
- analysis: Fermat problems, rainbows, regression, pixel remapping

Quick start:
    from optics_suite import Point, ThinLens, transform
    image = transform(ThinLens(focal_length=1.0), Point(3.0, 0.5))
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core import Point, geometry, NoImageError
from .config import RenderConfig
from .logging_config import setup_logging
from .optical_elements import (
    AnamorphicArc,
    ConcaveMirror,
    ConvexMirror,
    PlaneMirror,
    Prism,
    ThinLens,
    build_prism,
    image_of,
    make_transform,
    require_image,
    trace_prism_ray,
    transform,
)

__all__ = [
    'Point',
    'geometry',
    'NoImageError',
    'RenderConfig',
    'setup_logging',
    'AnamorphicArc',
    'ConcaveMirror',
    'ConvexMirror',
    'PlaneMirror',
    'Prism',
    'ThinLens',
    'build_prism',
    'image_of',
    'make_transform',
    'require_image',
    'trace_prism_ray',
    'transform',
    '__version__',
]
