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

"""
Constants used throughout the optics suite.

Numerical tolerances live here rather than on individual functions so that
transforms, tracers and solvers agree on what "degenerate" means.
"""

# Guard used by the point transforms and the prism tracer to reject
# vanishing denominators and grazing configurations
EPSILON = 1e-9

# Parallel-line threshold for line/line intersection
PARALLEL_THRESHOLD = 1e-12

# Root-finding defaults
BISECTION_TOLERANCE = 1e-12
BISECTION_MAX_ITER = 100
GOLDEN_TOLERANCE = 1e-8
GOLDEN_MAX_ITER = 120

# Search bracket for the rainbow incidence angle, kept off the endpoints
RAINBOW_THETA_MARGIN = 1e-6

# Speed of light in vacuum (m/s)
SPEED_OF_LIGHT = 299792458.0

# Visible band used by the frequency-domain models (THz)
VISIBLE_FREQUENCY_MIN = 405.0
VISIBLE_FREQUENCY_MAX = 790.0

# Inner/outer radius ratio of the anamorphic annulus
ANNULUS_RATIO = 0.35

# Default distance (scene units) at which a prism source is placed and
# an exiting ray is drawn
PRISM_RAY_EXTENT = 2.6
