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

===============================================================================
Analysis Utilities
===============================================================================
Problems solved on top of the core geometry and root finders:

- Fermat's principle for reflection and refraction
- Rainbow elevations from the Descartes droplet model
- Least-squares fits for thin-lens bench data
- Pixel remapping of images through point transforms
===============================================================================
"""

from .fermat import (
    FermatSolution,
    find_reflection_point,
    find_refraction_point,
    reflection_travel_time,
    refraction_travel_time,
    travel_time_curve,
)
from .rainbow import (
    BowSolution,
    RainbowSample,
    RainbowSolution,
    bow_visible,
    closed_form_agrees,
    critical_angle,
    deviation,
    elevation,
    elevation_curve,
    find_minima_deg,
    min_deviation_angle,
    sample_rainbow_angles,
    visible_samples,
)
from .regression import (
    LENS_EXPERIMENT_DATA,
    LensFit,
    RegressionResult,
    fit_thin_lens,
    linear_regression,
)
from .image_remap import RemappedImage, remap_image, to_canvas

__all__ = [
    # Fermat
    'FermatSolution',
    'find_reflection_point',
    'find_refraction_point',
    'reflection_travel_time',
    'refraction_travel_time',
    'travel_time_curve',
    # Rainbow
    'BowSolution',
    'RainbowSample',
    'RainbowSolution',
    'bow_visible',
    'closed_form_agrees',
    'critical_angle',
    'deviation',
    'elevation',
    'elevation_curve',
    'find_minima_deg',
    'min_deviation_angle',
    'sample_rainbow_angles',
    'visible_samples',
    # Regression
    'LENS_EXPERIMENT_DATA',
    'LensFit',
    'RegressionResult',
    'fit_thin_lens',
    'linear_regression',
    # Remapping
    'RemappedImage',
    'remap_image',
    'to_canvas',
]
