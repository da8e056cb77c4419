"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
PRISMS SUB-MODULE
===============================================================================
Dispersing prism geometry and single-ray tracing.

Modules:
- prism_geometry: PrismGeometry and the cached build_prism() constructor
- ray_tracer: vector Snell's law and per-wavelength ray tracing
- prism_utils: closed-form deviation and TIR thresholds
===============================================================================
"""

from .prism_geometry import EDGE_LABELS, PrismEdge, PrismGeometry, build_prism
from .ray_tracer import (
    PrismRayTrace,
    SpectrumTrace,
    TraceStatus,
    any_tir,
    incident_direction,
    refract,
    trace_prism_ray,
    trace_ray,
    trace_spectrum,
)

from . import prism_utils

__all__ = [
    'EDGE_LABELS',
    'PrismEdge',
    'PrismGeometry',
    'build_prism',
    'PrismRayTrace',
    'SpectrumTrace',
    'TraceStatus',
    'any_tir',
    'incident_direction',
    'refract',
    'trace_prism_ray',
    'trace_ray',
    'trace_spectrum',
    'prism_utils',
]
